from __future__ import annotations

from datetime import date
from decimal import Decimal

from travel_booking.domain.enums import CarType, MealPlan, PaymentMethod, ReservationType, RoomType
from travel_booking.shared.config import ApplicationContainer, settings
from travel_booking.shared.logging import configure_logging


def run_payments(container: ApplicationContainer) -> None:
    """Charge once through each payment method."""
    payments = [
        (PaymentMethod.PAYPAL, Decimal("100.50"), "user@example.com"),
        (PaymentMethod.CREDIT_CARD, Decimal("200.75"), "4111111111111111|12/25|123"),
        (PaymentMethod.CRYPTO, Decimal("0.005"), "1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa"),
    ]
    for method, amount, details in payments:
        service = container.create_payment_service(method)
        success = service.make_payment(amount, details)
        print(f"{method.value}: amount={amount} success={success}")


def run_bookings(container: ApplicationContainer) -> None:
    """Book a hotel, a flight and a car, then cancel the flight."""
    booking_system = container.booking_system
    customer = "Ivan Ivanov"
    booking_system.create_reservation(
        ReservationType.HOTEL,
        customer_name=customer,
        start_date=date(2023, 6, 1),
        end_date=date(2023, 6, 7),
        room_type=RoomType.DELUXE,
        meal_plan=MealPlan.ALL_INCLUSIVE,
    )
    flight = booking_system.create_reservation(
        ReservationType.FLIGHT,
        customer_name=customer,
        start_date=date(2023, 6, 1),
        end_date=date(2023, 6, 1),
        departure_airport="SVO",
        arrival_airport="IST",
    )
    booking_system.create_reservation(
        ReservationType.CAR_RENTAL,
        customer_name=customer,
        start_date=date(2023, 6, 1),
        end_date=date(2023, 6, 5),
        car_type=CarType.SUV,
        insurance_included=True,
    )

    print("All reservations:")
    for reservation in booking_system.list_reservations():
        for key, value in reservation.describe().items():
            print(f"  {key}: {value}")
        print()

    print(f"Total booking value: {booking_system.get_total_booking_value()}")
    booking_system.cancel_reservation(flight.reservation_id)
    print(f"Total after cancelling {flight.reservation_id}: {booking_system.get_total_booking_value()}")


def main() -> None:
    configure_logging(settings.log_level)
    container = ApplicationContainer(settings)
    run_payments(container)
    run_bookings(container)


if __name__ == "__main__":
    main()
