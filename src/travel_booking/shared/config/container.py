from travel_booking.application import BookingSystem, PaymentService
from travel_booking.domain.enums import PaymentMethod
from travel_booking.domain.ports import PaymentProcessor, PaymentValidator
from travel_booking.infrastructure.gateways import (
    CreditCardProcessor,
    CreditCardValidator,
    CryptoCurrencyProcessor,
    PayPalProcessor,
)
from travel_booking.shared.config.settings import Settings, settings
from travel_booking.shared.logging import AuditLogger


class ApplicationContainer:
    """Dependency container for the booking registry and payment services."""

    def __init__(self, app_settings: Settings = settings) -> None:
        self.settings = app_settings
        self._audit_logger = AuditLogger()
        self._booking_system: BookingSystem | None = None

    @property
    def booking_system(self) -> BookingSystem:
        """Return the container-scoped booking registry, creating it on first use."""
        if self._booking_system is None:
            self._booking_system = BookingSystem(
                id_prefix=self.settings.reservation_id_prefix,
                audit_logger=self._audit_logger,
            )
        return self._booking_system

    def shutdown(self) -> None:
        """Drop the in-memory registry; its reservations are not kept."""
        self._booking_system = None

    def create_payment_processor(self, method: PaymentMethod) -> PaymentProcessor:
        """Create the processor that charges through `method`."""
        if method == PaymentMethod.PAYPAL:
            return PayPalProcessor()
        if method == PaymentMethod.CREDIT_CARD:
            return CreditCardProcessor()
        if method == PaymentMethod.CRYPTO:
            return CryptoCurrencyProcessor(currency=self.settings.crypto_currency)
        raise ValueError(f"Unsupported payment method: {method}")

    def create_payment_validator(self, method: PaymentMethod) -> PaymentValidator | None:
        """Create the validator paired with `method`, if it has one."""
        if method == PaymentMethod.CREDIT_CARD:
            return CreditCardValidator()
        return None

    def create_payment_service(self, method: PaymentMethod) -> PaymentService:
        """Create a payment service wired for `method`."""
        method = PaymentMethod(method)
        return PaymentService(
            processor=self.create_payment_processor(method),
            validator=self.create_payment_validator(method),
            audit_logger=self._audit_logger,
            payment_method=method.value,
        )
