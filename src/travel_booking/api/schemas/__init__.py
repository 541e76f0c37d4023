from travel_booking.api.schemas.payment_dto import (
    PaymentRequestDTO,
    PaymentResponseDTO,
    RefundRequestDTO,
)
from travel_booking.api.schemas.reservation_dto import (
    BookingTotalResponseDTO,
    ErrorResponseDTO,
    ReservationRequestDTO,
    ReservationResponseDTO,
    ReservationUpdateDTO,
)

__all__ = [
    "BookingTotalResponseDTO",
    "ErrorResponseDTO",
    "PaymentRequestDTO",
    "PaymentResponseDTO",
    "RefundRequestDTO",
    "ReservationRequestDTO",
    "ReservationResponseDTO",
    "ReservationUpdateDTO",
]
