from fastapi.testclient import TestClient

from travel_booking.api.app import create_app


def _hotel_payload() -> dict:
    return {
        "reservation_type": "Hotel",
        "customer_name": "Ivan Ivanov",
        "start_date": "2023-06-01",
        "end_date": "2023-06-07",
        "room_type": "Deluxe",
        "meal_plan": "All Inclusive",
    }


def _flight_payload() -> dict:
    return {
        "reservation_type": "Flight",
        "customer_name": "Ivan Ivanov",
        "start_date": "2023-06-01",
        "end_date": "2023-06-01",
        "departure_airport": "SVO",
        "arrival_airport": "IST",
    }


def _car_payload() -> dict:
    return {
        "reservation_type": "CarRental",
        "customer_name": "Ivan Ivanov",
        "start_date": "2023-06-01",
        "end_date": "2023-06-05",
        "car_type": "SUV",
        "insurance_included": True,
    }


def _total(client) -> float:
    return float(client.get("/api/v1/reservations/total").json()["total"])


def test_post_reservation_returns_created_with_price(api_client) -> None:
    response = api_client.post("/api/v1/reservations", json=_hotel_payload())

    assert response.status_code == 201
    payload = response.json()
    assert payload["reservation_id"] == "RES-1"
    assert payload["reservation_type"] == "Hotel"
    assert payload["price"] == "630"
    assert payload["room_type"] == "Deluxe"
    assert payload["departure_airport"] is None


def test_unknown_reservation_type_returns_validation_error(api_client) -> None:
    payload = _hotel_payload()
    payload["reservation_type"] = "Boat"

    response = api_client.post("/api/v1/reservations", json=payload)

    assert response.status_code == 422


def test_fields_from_another_type_return_bad_request(api_client) -> None:
    payload = _flight_payload()
    payload["car_type"] = "SUV"

    response = api_client.post("/api/v1/reservations", json=payload)

    assert response.status_code == 400
    assert response.json()["code"] == "BUSINESS_LOGIC_ERROR"


def test_flight_without_airports_returns_bad_request(api_client) -> None:
    payload = _flight_payload()
    del payload["arrival_airport"]

    response = api_client.post("/api/v1/reservations", json=payload)

    assert response.status_code == 400


def test_total_and_cancellation_flow(api_client) -> None:
    api_client.post("/api/v1/reservations", json=_hotel_payload())
    flight_id = api_client.post("/api/v1/reservations", json=_flight_payload()).json()["reservation_id"]
    api_client.post("/api/v1/reservations", json=_car_payload())

    assert _total(api_client) == 1128
    assert api_client.delete(f"/api/v1/reservations/{flight_id}").status_code == 204
    assert _total(api_client) == 878
    assert api_client.delete(f"/api/v1/reservations/{flight_id}").status_code == 404

    listed = api_client.get("/api/v1/reservations").json()
    assert [item["reservation_id"] for item in listed] == ["RES-1", "RES-3"]
    assert api_client.get("/api/v1/reservations/total").json()["count"] == 2


def test_get_reservation_by_id(api_client) -> None:
    api_client.post("/api/v1/reservations", json=_car_payload())

    found = api_client.get("/api/v1/reservations/RES-1")
    missing = api_client.get("/api/v1/reservations/RES-404")

    assert found.status_code == 200
    assert float(found.json()["price"]) == 248
    assert missing.status_code == 404


def test_patch_reservation_reprices(api_client) -> None:
    api_client.post("/api/v1/reservations", json=_car_payload())

    response = api_client.patch(
        "/api/v1/reservations/RES-1",
        json={"car_type": "Economy", "insurance_included": False},
    )

    assert response.status_code == 200
    assert float(response.json()["price"]) == 160
    assert _total(api_client) == 160


def test_patch_unknown_reservation_returns_not_found(api_client) -> None:
    response = api_client.patch("/api/v1/reservations/RES-9", json={"customer_name": "Anna"})

    assert response.status_code == 404


def test_each_app_has_its_own_registry(api_client) -> None:
    api_client.post("/api/v1/reservations", json=_flight_payload())
    with TestClient(create_app()) as other_client:
        assert other_client.get("/api/v1/reservations").json() == []
