from travel_booking.domain.entities.reservation import (
    RESERVATION_CLASSES,
    CarRentalReservation,
    FlightReservation,
    HotelReservation,
    Reservation,
)

__all__ = [
    "RESERVATION_CLASSES",
    "CarRentalReservation",
    "FlightReservation",
    "HotelReservation",
    "Reservation",
]
