from travel_booking.application.services.booking_system import (
    BookingAuditLogger,
    BookingSystem,
)
from travel_booking.application.services.payment_service import (
    PaymentAuditLogger,
    PaymentService,
)

__all__ = [
    "BookingAuditLogger",
    "BookingSystem",
    "PaymentAuditLogger",
    "PaymentService",
]
