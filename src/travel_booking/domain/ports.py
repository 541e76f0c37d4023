from decimal import Decimal
from typing import Any, Protocol


class PaymentProcessor(Protocol):
    def process_payment(self, amount: Decimal) -> bool: ...

    def refund_payment(self, amount: Decimal, transaction_id: str) -> bool: ...


class PaymentValidator(Protocol):
    def validate_payment(self, amount: Decimal, payment_details: str | None) -> bool: ...


class PricedReservation(Protocol):
    """Capability shared by every reservation variant."""

    reservation_id: str

    def calculate_price(self) -> Decimal: ...

    def describe(self) -> dict[str, Any]: ...
