from travel_booking.infrastructure.gateways import (
    CreditCardProcessor,
    CreditCardValidator,
    CryptoCurrencyProcessor,
    PayPalProcessor,
)

__all__ = [
    "CreditCardProcessor",
    "CreditCardValidator",
    "CryptoCurrencyProcessor",
    "PayPalProcessor",
]
