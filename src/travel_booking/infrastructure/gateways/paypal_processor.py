import logging
from decimal import Decimal

logger = logging.getLogger(__name__)


class PayPalProcessor:
    """Charge and refund through PayPal. No validation capability."""

    def process_payment(self, amount: Decimal) -> bool:
        logger.info("paypal_payment_processed amount=%s", amount)
        return True

    def refund_payment(self, amount: Decimal, transaction_id: str) -> bool:
        logger.info(
            "paypal_payment_refunded transaction_id=%s amount=%s",
            transaction_id,
            amount,
        )
        return True
