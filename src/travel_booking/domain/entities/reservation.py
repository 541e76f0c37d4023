from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any, ClassVar

from travel_booking.domain.enums import CarType, MealPlan, ReservationType, RoomType
from travel_booking.domain.errors import InvalidArgumentError
from travel_booking.domain.value_objects import StayPeriod

HOTEL_DAILY_RATE = Decimal("50")
DELUXE_ROOM_MULTIPLIER = Decimal("1.5")
ALL_INCLUSIVE_DAILY_RATE = Decimal("30")
STANDARD_MEAL_DAILY_RATE = Decimal("15")

FLIGHT_BASE_FARE = Decimal("200")
FLIGHT_TAXES = Decimal("50")

CAR_DAILY_RATE = Decimal("40")
SUV_MULTIPLIER = Decimal("1.3")
INSURANCE_DAILY_RATE = Decimal("10")


def _whole_or_exact(amount: Decimal) -> Decimal:
    """Drop the trailing zeros multipliers leave behind (630.0 -> 630, 12.50 -> 12.5)."""
    if amount == amount.to_integral_value():
        return amount.quantize(Decimal("1"))
    return amount.normalize()


def _require_text(field_name: str, value: Any) -> None:
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(f"{field_name} must not be empty")


def _common_details(
    reservation: "Reservation",
    reservation_type: ReservationType,
) -> dict[str, Any]:
    return {
        "reservation_id": reservation.reservation_id,
        "reservation_type": reservation_type.value,
        "customer_name": reservation.customer_name,
        "start_date": reservation.start_date,
        "end_date": reservation.end_date,
        "price": reservation.calculate_price(),
    }


@dataclass(slots=True, frozen=True)
class HotelReservation:
    """Hotel stay priced per day with room and meal-plan surcharges.

    Example:
        ```python
        stay = HotelReservation(
            reservation_id="RES-1",
            customer_name="Ivan Ivanov",
            start_date=date(2023, 6, 1),
            end_date=date(2023, 6, 7),
            room_type=RoomType.DELUXE,
            meal_plan=MealPlan.ALL_INCLUSIVE,
        )
        assert stay.calculate_price() == Decimal("630")
        ```
    """

    reservation_type: ClassVar[ReservationType] = ReservationType.HOTEL

    reservation_id: str
    customer_name: str
    start_date: date
    end_date: date
    room_type: str = RoomType.STANDARD
    meal_plan: str = MealPlan.BREAKFAST

    def __post_init__(self) -> None:
        _require_text("reservation_id", self.reservation_id)
        _require_text("customer_name", self.customer_name)
        StayPeriod(self.start_date, self.end_date)

    @property
    def period(self) -> StayPeriod:
        return StayPeriod(self.start_date, self.end_date)

    def calculate_price(self) -> Decimal:
        days = self.period.days
        base_price = days * HOTEL_DAILY_RATE
        multiplier = DELUXE_ROOM_MULTIPLIER if self.room_type == RoomType.DELUXE else Decimal("1")
        if self.meal_plan == MealPlan.ALL_INCLUSIVE:
            meal_cost = days * ALL_INCLUSIVE_DAILY_RATE
        else:
            meal_cost = days * STANDARD_MEAL_DAILY_RATE
        return _whole_or_exact(base_price * multiplier + meal_cost)

    def describe(self) -> dict[str, Any]:
        details = _common_details(self, self.reservation_type)
        details.update(room_type=str(self.room_type), meal_plan=str(self.meal_plan))
        return details


@dataclass(slots=True, frozen=True)
class FlightReservation:
    """Flight ticket with a flat fare (base fare plus taxes)."""

    reservation_type: ClassVar[ReservationType] = ReservationType.FLIGHT

    reservation_id: str
    customer_name: str
    start_date: date
    end_date: date
    departure_airport: str
    arrival_airport: str

    def __post_init__(self) -> None:
        _require_text("reservation_id", self.reservation_id)
        _require_text("customer_name", self.customer_name)
        _require_text("departure_airport", self.departure_airport)
        _require_text("arrival_airport", self.arrival_airport)
        StayPeriod(self.start_date, self.end_date)

    @property
    def period(self) -> StayPeriod:
        return StayPeriod(self.start_date, self.end_date)

    def calculate_price(self) -> Decimal:
        return FLIGHT_BASE_FARE + FLIGHT_TAXES

    def describe(self) -> dict[str, Any]:
        details = _common_details(self, self.reservation_type)
        details.update(
            departure_airport=self.departure_airport,
            arrival_airport=self.arrival_airport,
        )
        return details


@dataclass(slots=True, frozen=True)
class CarRentalReservation:
    """Car rental priced per day, with an SUV multiplier and optional insurance."""

    reservation_type: ClassVar[ReservationType] = ReservationType.CAR_RENTAL

    reservation_id: str
    customer_name: str
    start_date: date
    end_date: date
    car_type: str = CarType.ECONOMY
    insurance_included: bool = False

    def __post_init__(self) -> None:
        _require_text("reservation_id", self.reservation_id)
        _require_text("customer_name", self.customer_name)
        StayPeriod(self.start_date, self.end_date)

    @property
    def period(self) -> StayPeriod:
        return StayPeriod(self.start_date, self.end_date)

    def calculate_price(self) -> Decimal:
        days = self.period.days
        base_price = days * CAR_DAILY_RATE
        multiplier = SUV_MULTIPLIER if self.car_type == CarType.SUV else Decimal("1")
        insurance_cost = days * INSURANCE_DAILY_RATE if self.insurance_included else Decimal("0")
        return _whole_or_exact(base_price * multiplier + insurance_cost)

    def describe(self) -> dict[str, Any]:
        details = _common_details(self, self.reservation_type)
        details.update(
            car_type=str(self.car_type),
            insurance_included=self.insurance_included,
        )
        return details


Reservation = HotelReservation | FlightReservation | CarRentalReservation

RESERVATION_CLASSES: dict[ReservationType, type[Reservation]] = {
    ReservationType.HOTEL: HotelReservation,
    ReservationType.FLIGHT: FlightReservation,
    ReservationType.CAR_RENTAL: CarRentalReservation,
}
