import logging
from decimal import Decimal

logger = logging.getLogger(__name__)


class CreditCardProcessor:
    """Charge and refund against a credit card."""

    def process_payment(self, amount: Decimal) -> bool:
        logger.info("credit_card_payment_processed amount=%s", amount)
        return True

    def refund_payment(self, amount: Decimal, transaction_id: str) -> bool:
        logger.info(
            "credit_card_payment_refunded transaction_id=%s amount=%s",
            transaction_id,
            amount,
        )
        return True


class CreditCardValidator:
    """Basic pre-charge checks for card payments.

    Details must be present and the amount strictly positive. Card number,
    CVV and expiry are not inspected.

    Example:
        ```python
        validator = CreditCardValidator()
        assert validator.validate_payment(Decimal("200.75"), "4111111111111111|12/25|123")
        assert not validator.validate_payment(Decimal("0"), "4111111111111111|12/25|123")
        ```
    """

    def validate_payment(self, amount: Decimal, payment_details: str | None) -> bool:
        is_valid = bool(payment_details) and amount > 0
        logger.info(
            "credit_card_validation details_present=%s amount=%s valid=%s",
            bool(payment_details),
            amount,
            is_valid,
        )
        return is_valid
