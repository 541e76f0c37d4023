import logging
from collections.abc import Callable, Mapping
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

SENSITIVE_KEY_TOKENS = frozenset(
    {"email", "phone", "card", "cvv", "payment_details", "token", "password", "secret"}
)
MASK = "***MASKED***"


class AuditAction(StrEnum):
    PAYMENT_PROCESSED = "PAYMENT_PROCESSED"
    PAYMENT_REJECTED = "PAYMENT_REJECTED"
    PAYMENT_REFUNDED = "PAYMENT_REFUNDED"
    RESERVATION_CREATED = "RESERVATION_CREATED"
    RESERVATION_MODIFIED = "RESERVATION_MODIFIED"
    RESERVATION_CANCELLED = "RESERVATION_CANCELLED"

    @property
    def category(self) -> str:
        return self.value.split("_", 1)[0].lower()


class AuditLogger:
    """Structured audit trail for payment and booking events.

    Every event is one INFO record on the `travel_booking.audit` logger with
    the payload attached as `record.audit_event`:

        {"timestamp", "category", "action", "reference", "actor", "context"}

    `reference` is the payment method for payment events and the reservation
    ID for booking events. Context values under sensitive keys (card data,
    payment details, contact data, secrets) are masked before emission.

    Example:
        ```python
        audit = AuditLogger()
        audit.log_payment_rejected(
            payment_method="credit_card",
            actor="system",
            context={"payment_details": "4111111111111111|12/25|123"},
        )
        ```
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._logger = logger or logging.getLogger("travel_booking.audit")
        self._clock = clock or (lambda: datetime.now(UTC))

    def log_payment_processed(self, *, payment_method: str, actor: str, context=None) -> None:
        self.record(AuditAction.PAYMENT_PROCESSED, payment_method, actor=actor, context=context)

    def log_payment_rejected(self, *, payment_method: str, actor: str, context=None) -> None:
        self.record(AuditAction.PAYMENT_REJECTED, payment_method, actor=actor, context=context)

    def log_payment_refunded(self, *, payment_method: str, actor: str, context=None) -> None:
        self.record(AuditAction.PAYMENT_REFUNDED, payment_method, actor=actor, context=context)

    def log_reservation_created(self, *, reservation_id: str, actor: str, context=None) -> None:
        self.record(AuditAction.RESERVATION_CREATED, reservation_id, actor=actor, context=context)

    def log_reservation_modified(self, *, reservation_id: str, actor: str, context=None) -> None:
        self.record(AuditAction.RESERVATION_MODIFIED, reservation_id, actor=actor, context=context)

    def log_reservation_cancelled(self, *, reservation_id: str, actor: str, context=None) -> None:
        self.record(AuditAction.RESERVATION_CANCELLED, reservation_id, actor=actor, context=context)

    def record(
        self,
        action: AuditAction,
        reference: str,
        *,
        actor: str,
        context: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Emit one audit event and return the (masked) payload that was logged."""
        event = {
            "timestamp": self._clock().astimezone(UTC).isoformat(),
            "category": action.category,
            "action": action.value,
            "reference": reference,
            "actor": actor,
            "context": self.mask_sensitive_data(dict(context or {})),
        }
        self._logger.info(
            "audit_event action=%s reference=%s",
            action.value,
            reference,
            extra={"audit_event": event},
        )
        return event

    @classmethod
    def mask_sensitive_data(cls, value: Any, key: str | None = None) -> Any:
        """Recursively mask string values whose key names look sensitive."""
        if isinstance(value, Mapping):
            return {k: cls.mask_sensitive_data(v, key=str(k)) for k, v in value.items()}
        if isinstance(value, (list, tuple)):
            return type(value)(cls.mask_sensitive_data(item, key=key) for item in value)
        if isinstance(value, str) and key and _is_sensitive(key):
            return _mask_value(value, key.lower())
        return value


def _is_sensitive(key: str) -> bool:
    lowered = key.lower()
    return any(token in lowered for token in SENSITIVE_KEY_TOKENS)


def _mask_value(raw: str, lowered_key: str) -> str:
    if "email" in lowered_key:
        local_part, at, domain = raw.partition("@")
        return f"{local_part[:1] or '*'}***@{domain}" if at and domain else "***"
    if "phone" in lowered_key:
        digits = [ch for ch in raw if ch.isdigit()]
        if len(digits) <= 2:
            return "***"
        return "*" * (len(digits) - 2) + "".join(digits[-2:])
    return MASK
