from decimal import Decimal
from typing import Any, Protocol

from travel_booking.domain.ports import PaymentProcessor, PaymentValidator


class PaymentAuditLogger(Protocol):
    """Port for audit events emitted around charges and refunds."""

    def log_payment_processed(
        self,
        *,
        payment_method: str,
        actor: str,
        context: dict[str, Any] | None = None,
    ) -> None: ...

    def log_payment_rejected(
        self,
        *,
        payment_method: str,
        actor: str,
        context: dict[str, Any] | None = None,
    ) -> None: ...

    def log_payment_refunded(
        self,
        *,
        payment_method: str,
        actor: str,
        context: dict[str, Any] | None = None,
    ) -> None: ...


class PaymentService:
    """Validate-then-charge orchestration over one processor.

    The validator is optional and independent of the processor; without one
    every payment goes straight to the processor.

    Example:
        ```python
        service = PaymentService(CreditCardProcessor(), CreditCardValidator())
        service.make_payment(Decimal("200.75"), "4111111111111111|12/25|123")
        ```
    """

    def __init__(
        self,
        processor: PaymentProcessor,
        validator: PaymentValidator | None = None,
        audit_logger: PaymentAuditLogger | None = None,
        payment_method: str | None = None,
    ) -> None:
        self._processor = processor
        self._validator = validator
        self._audit_logger = audit_logger
        self._payment_method = payment_method or type(processor).__name__

    @property
    def payment_method(self) -> str:
        return self._payment_method

    @property
    def has_validator(self) -> bool:
        return self._validator is not None

    def make_payment(self, amount: Decimal, payment_details: str | None = None) -> bool:
        """Charge `amount` unless the validator rejects it."""
        if self._validator is not None and not self._validator.validate_payment(
            amount, payment_details
        ):
            if self._audit_logger is not None:
                self._audit_logger.log_payment_rejected(
                    payment_method=self._payment_method,
                    actor="system",
                    context={"amount": str(amount), "payment_details": payment_details or ""},
                )
            return False

        success = self._processor.process_payment(amount)
        if self._audit_logger is not None:
            self._audit_logger.log_payment_processed(
                payment_method=self._payment_method,
                actor="system",
                context={
                    "amount": str(amount),
                    "payment_details": payment_details or "",
                    "success": success,
                },
            )
        return success

    def refund_payment(self, amount: Decimal, transaction_id: str) -> bool:
        """Refund through the processor; refunds are never validated."""
        success = self._processor.refund_payment(amount, transaction_id)
        if self._audit_logger is not None:
            self._audit_logger.log_payment_refunded(
                payment_method=self._payment_method,
                actor="system",
                context={
                    "amount": str(amount),
                    "transaction_id": transaction_id,
                    "success": success,
                },
            )
        return success
