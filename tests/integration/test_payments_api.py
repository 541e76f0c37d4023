import pytest


@pytest.mark.parametrize(
    ("method", "amount", "details"),
    [
        ("paypal", "100.50", "user@example.com"),
        ("credit_card", "200.75", "4111111111111111|12/25|123"),
        ("crypto", "0.005", "1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa"),
    ],
)
def test_post_payment_succeeds_for_each_method(api_client, method: str, amount: str, details: str) -> None:
    response = api_client.post(
        "/api/v1/payments",
        json={"method": method, "amount": amount, "payment_details": details},
    )

    assert response.status_code == 200
    assert response.json() == {"method": method, "success": True}


def test_credit_card_payment_without_details_is_rejected_by_validation(api_client) -> None:
    response = api_client.post(
        "/api/v1/payments",
        json={"method": "credit_card", "amount": "50"},
    )

    assert response.status_code == 200
    assert response.json() == {"method": "credit_card", "success": False}


def test_paypal_payment_without_details_is_not_validated(api_client) -> None:
    response = api_client.post("/api/v1/payments", json={"method": "paypal", "amount": "50"})

    assert response.json()["success"] is True


def test_refund_returns_processor_outcome(api_client) -> None:
    response = api_client.post(
        "/api/v1/payments/refunds",
        json={"method": "credit_card", "amount": "20", "transaction_id": "TX-1001"},
    )

    assert response.status_code == 200
    assert response.json() == {"method": "credit_card", "success": True}


@pytest.mark.parametrize(
    "payload",
    [
        {"method": "cheque", "amount": "10"},
        {"method": "paypal", "amount": "-1"},
        {"method": "paypal"},
    ],
)
def test_invalid_payment_requests_return_validation_error(api_client, payload: dict) -> None:
    response = api_client.post("/api/v1/payments", json=payload)

    assert response.status_code == 422
    assert response.json()["code"] == "VALIDATION_ERROR"
