from dataclasses import replace
from decimal import Decimal
from threading import RLock
from typing import Any, Protocol

from travel_booking.domain.entities import RESERVATION_CLASSES, Reservation
from travel_booking.domain.enums import ReservationType
from travel_booking.domain.errors import InvalidArgumentError


class BookingAuditLogger(Protocol):
    """Port for audit events emitted by the booking registry."""

    def log_reservation_created(
        self,
        *,
        reservation_id: str,
        actor: str,
        context: dict[str, Any] | None = None,
    ) -> None: ...

    def log_reservation_modified(
        self,
        *,
        reservation_id: str,
        actor: str,
        context: dict[str, Any] | None = None,
    ) -> None: ...

    def log_reservation_cancelled(
        self,
        *,
        reservation_id: str,
        actor: str,
        context: dict[str, Any] | None = None,
    ) -> None: ...


class BookingSystem:
    """Reservation factory and in-memory registry.

    IDs are `<prefix><n>` with `n` taken from a per-instance counter that only
    moves forward, so cancelled IDs are never handed out again. Mutations run
    under one lock; reads price a snapshot of the registry.

    Example:
        ```python
        system = BookingSystem()
        hotel = system.create_reservation(
            "Hotel",
            customer_name="Ivan Ivanov",
            start_date=date(2023, 6, 1),
            end_date=date(2023, 6, 7),
            room_type="Deluxe",
            meal_plan="All Inclusive",
        )
        system.cancel_reservation(hotel.reservation_id)
        ```
    """

    def __init__(
        self,
        id_prefix: str = "RES-",
        audit_logger: BookingAuditLogger | None = None,
    ) -> None:
        if not id_prefix:
            raise ValueError("id_prefix must not be empty")
        self._id_prefix = id_prefix
        self._audit_logger = audit_logger
        self._reservations: dict[str, Reservation] = {}
        self._next_sequence = 1
        self._lock = RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._reservations)

    def create_reservation(self, reservation_type: str, /, **fields: Any) -> Reservation:
        """Build, register and return a reservation of the given type."""
        reservation_class = RESERVATION_CLASSES[self._resolve_type(reservation_type)]
        if "reservation_id" in fields:
            raise InvalidArgumentError("reservation_id is assigned by the booking system")

        with self._lock:
            reservation_id = f"{self._id_prefix}{self._next_sequence}"
            try:
                reservation = reservation_class(reservation_id=reservation_id, **fields)
            except TypeError as exc:
                raise InvalidArgumentError(
                    f"Invalid fields for {reservation_class.reservation_type} reservation: {exc}"
                ) from exc
            self._next_sequence += 1
            self._reservations[reservation_id] = reservation

        if self._audit_logger is not None:
            self._audit_logger.log_reservation_created(
                reservation_id=reservation_id,
                actor="system",
                context={
                    "reservation_type": reservation.reservation_type.value,
                    "customer_name": reservation.customer_name,
                },
            )
        return reservation

    def get_reservation(self, reservation_id: str) -> Reservation | None:
        with self._lock:
            return self._reservations.get(reservation_id)

    def update_reservation(self, reservation_id: str, /, **changes: Any) -> Reservation | None:
        """Replace fields of a registered reservation; `None` when the ID is unknown.

        The ID and the reservation type are fixed for the lifetime of the entry.
        """
        if "reservation_id" in changes:
            raise InvalidArgumentError("reservation_id cannot be changed")

        with self._lock:
            current = self._reservations.get(reservation_id)
            if current is None:
                return None
            try:
                updated = replace(current, **changes)
            except TypeError as exc:
                raise InvalidArgumentError(
                    f"Invalid fields for {current.reservation_type} reservation: {exc}"
                ) from exc
            self._reservations[reservation_id] = updated

        if self._audit_logger is not None:
            self._audit_logger.log_reservation_modified(
                reservation_id=reservation_id,
                actor="system",
                context={"fields": sorted(changes)},
            )
        return updated

    def cancel_reservation(self, reservation_id: str) -> bool:
        """Remove a reservation from the registry; `False` when the ID is unknown."""
        with self._lock:
            removed = self._reservations.pop(reservation_id, None)
        if removed is None:
            return False

        if self._audit_logger is not None:
            self._audit_logger.log_reservation_cancelled(
                reservation_id=reservation_id,
                actor="system",
                context={"reservation_type": removed.reservation_type.value},
            )
        return True

    def list_reservations(self) -> list[Reservation]:
        """Return the active reservations in creation order."""
        with self._lock:
            return list(self._reservations.values())

    def get_total_booking_value(self) -> Decimal:
        """Sum the current price of every active reservation."""
        return sum(
            (reservation.calculate_price() for reservation in self.list_reservations()),
            start=Decimal("0"),
        )

    @staticmethod
    def _resolve_type(reservation_type: str) -> ReservationType:
        try:
            return ReservationType(reservation_type)
        except ValueError as exc:
            raise InvalidArgumentError(f"Unknown reservation type: {reservation_type!r}") from exc
