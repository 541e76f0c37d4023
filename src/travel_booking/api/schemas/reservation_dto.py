from __future__ import annotations

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field, model_validator

from travel_booking.domain.enums import ReservationType


class ReservationRequestDTO(BaseModel):
    """Request body for `POST /api/v1/reservations`.

    Only the fields of the requested type may be sent; the others stay unset.
    """

    reservation_type: ReservationType
    customer_name: str = Field(min_length=1, max_length=200, examples=["Ivan Ivanov"])
    start_date: date
    end_date: date
    room_type: str | None = Field(default=None, max_length=40, examples=["Deluxe"])
    meal_plan: str | None = Field(default=None, max_length=40, examples=["All Inclusive"])
    departure_airport: str | None = Field(default=None, min_length=1, max_length=10, examples=["SVO"])
    arrival_airport: str | None = Field(default=None, min_length=1, max_length=10, examples=["IST"])
    car_type: str | None = Field(default=None, max_length=40, examples=["SUV"])
    insurance_included: bool | None = None

    @model_validator(mode="after")
    def validate_end_not_before_start(self) -> ReservationRequestDTO:
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self

    def reservation_fields(self) -> dict:
        return self.model_dump(exclude_none=True, exclude={"reservation_type"})


class ReservationUpdateDTO(BaseModel):
    """Request body for `PATCH /api/v1/reservations/{reservation_id}`."""

    customer_name: str | None = Field(default=None, min_length=1, max_length=200)
    start_date: date | None = None
    end_date: date | None = None
    room_type: str | None = Field(default=None, max_length=40)
    meal_plan: str | None = Field(default=None, max_length=40)
    departure_airport: str | None = Field(default=None, min_length=1, max_length=10)
    arrival_airport: str | None = Field(default=None, min_length=1, max_length=10)
    car_type: str | None = Field(default=None, max_length=40)
    insurance_included: bool | None = None

    def changed_fields(self) -> dict:
        return self.model_dump(exclude_none=True)


class ReservationResponseDTO(BaseModel):
    """Reservation as returned by the API, priced at response time."""

    reservation_id: str
    reservation_type: ReservationType
    customer_name: str
    start_date: date
    end_date: date
    price: Decimal
    room_type: str | None = None
    meal_plan: str | None = None
    departure_airport: str | None = None
    arrival_airport: str | None = None
    car_type: str | None = None
    insurance_included: bool | None = None


class BookingTotalResponseDTO(BaseModel):
    """Aggregate value of the active reservations."""

    total: Decimal
    count: int


class ErrorResponseDTO(BaseModel):
    """Error payload used for business, validation and server failures."""

    error: str
    message: str
    request_id: str | None = None
    code: str | None = None
