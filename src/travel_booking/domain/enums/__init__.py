from travel_booking.domain.enums.payment_method import PaymentMethod
from travel_booking.domain.enums.reservation_type import (
    CarType,
    MealPlan,
    ReservationType,
    RoomType,
)

__all__ = [
    "CarType",
    "MealPlan",
    "PaymentMethod",
    "ReservationType",
    "RoomType",
]
