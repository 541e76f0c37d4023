from scripts.run_demo import run_bookings, run_payments
from travel_booking.shared.config import ApplicationContainer, Settings


def test_demo_payments_succeed_for_every_method(capsys) -> None:
    run_payments(ApplicationContainer(Settings()))

    output = capsys.readouterr().out.splitlines()
    assert output == [
        "paypal: amount=100.50 success=True",
        "credit_card: amount=200.75 success=True",
        "crypto: amount=0.005 success=True",
    ]


def test_demo_bookings_report_totals_before_and_after_cancellation(capsys) -> None:
    container = ApplicationContainer(Settings())

    run_bookings(container)

    output = capsys.readouterr().out
    assert "Total booking value: 1128\n" in output
    assert "Total after cancelling RES-2: 878\n" in output
    assert "  price: 630\n" in output
    assert [item.reservation_id for item in container.booking_system.list_reservations()] == [
        "RES-1",
        "RES-3",
    ]
