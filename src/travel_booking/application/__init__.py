from travel_booking.application.services import (
    BookingAuditLogger,
    BookingSystem,
    PaymentAuditLogger,
    PaymentService,
)

__all__ = [
    "BookingAuditLogger",
    "BookingSystem",
    "PaymentAuditLogger",
    "PaymentService",
]
