from travel_booking.domain.entities import (
    CarRentalReservation,
    FlightReservation,
    HotelReservation,
    Reservation,
)
from travel_booking.domain.enums import (
    CarType,
    MealPlan,
    PaymentMethod,
    ReservationType,
    RoomType,
)
from travel_booking.domain.errors import InvalidArgumentError
from travel_booking.domain.ports import PaymentProcessor, PaymentValidator, PricedReservation
from travel_booking.domain.value_objects import StayPeriod

__all__ = [
    "CarRentalReservation",
    "CarType",
    "FlightReservation",
    "HotelReservation",
    "InvalidArgumentError",
    "MealPlan",
    "PaymentMethod",
    "PaymentProcessor",
    "PaymentValidator",
    "PricedReservation",
    "Reservation",
    "ReservationType",
    "RoomType",
    "StayPeriod",
]
