from travel_booking.infrastructure.gateways.credit_card_processor import (
    CreditCardProcessor,
    CreditCardValidator,
)
from travel_booking.infrastructure.gateways.crypto_processor import CryptoCurrencyProcessor
from travel_booking.infrastructure.gateways.paypal_processor import PayPalProcessor

__all__ = [
    "CreditCardProcessor",
    "CreditCardValidator",
    "CryptoCurrencyProcessor",
    "PayPalProcessor",
]
