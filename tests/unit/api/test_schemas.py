from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from travel_booking.api.schemas import (
    PaymentRequestDTO,
    ReservationRequestDTO,
    ReservationUpdateDTO,
)
from travel_booking.domain.enums import PaymentMethod, ReservationType


def _hotel_payload() -> dict:
    return {
        "reservation_type": "Hotel",
        "customer_name": "Ivan Ivanov",
        "start_date": "2023-06-01",
        "end_date": "2023-06-07",
        "room_type": "Deluxe",
        "meal_plan": "All Inclusive",
    }


def test_reservation_request_dto_accepts_valid_payload() -> None:
    dto = ReservationRequestDTO.model_validate(_hotel_payload())

    assert dto.reservation_type == ReservationType.HOTEL
    assert dto.start_date == date(2023, 6, 1)


def test_reservation_fields_drop_type_and_unset_values() -> None:
    dto = ReservationRequestDTO.model_validate(_hotel_payload())

    assert dto.reservation_fields() == {
        "customer_name": "Ivan Ivanov",
        "start_date": date(2023, 6, 1),
        "end_date": date(2023, 6, 7),
        "room_type": "Deluxe",
        "meal_plan": "All Inclusive",
    }


def test_reservation_request_rejects_end_before_start() -> None:
    payload = _hotel_payload()
    payload["end_date"] = "2023-05-30"

    with pytest.raises(ValidationError, match="end_date must not be before start_date"):
        ReservationRequestDTO.model_validate(payload)


def test_reservation_request_rejects_unknown_type() -> None:
    payload = _hotel_payload()
    payload["reservation_type"] = "Boat"

    with pytest.raises(ValidationError):
        ReservationRequestDTO.model_validate(payload)


def test_update_dto_only_reports_sent_fields() -> None:
    dto = ReservationUpdateDTO.model_validate({"insurance_included": False})

    assert dto.changed_fields() == {"insurance_included": False}


def test_payment_request_requires_positive_amount() -> None:
    with pytest.raises(ValidationError):
        PaymentRequestDTO.model_validate({"method": "paypal", "amount": "0"})


def test_payment_request_parses_method_and_decimal_amount() -> None:
    dto = PaymentRequestDTO.model_validate(
        {"method": "crypto", "amount": "0.005", "payment_details": "1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa"}
    )

    assert dto.method == PaymentMethod.CRYPTO
    assert dto.amount == Decimal("0.005")
