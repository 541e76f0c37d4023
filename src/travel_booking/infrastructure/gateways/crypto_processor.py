import logging
from decimal import Decimal

logger = logging.getLogger(__name__)


class CryptoCurrencyProcessor:
    """Charge and refund in cryptocurrency; amounts are reported in `currency`."""

    def __init__(self, currency: str = "BTC") -> None:
        self._currency = currency

    def process_payment(self, amount: Decimal) -> bool:
        logger.info(
            "crypto_payment_processed amount=%s currency=%s",
            amount,
            self._currency,
        )
        return True

    def refund_payment(self, amount: Decimal, transaction_id: str) -> bool:
        logger.info(
            "crypto_payment_refunded transaction_id=%s amount=%s currency=%s",
            transaction_id,
            amount,
            self._currency,
        )
        return True
