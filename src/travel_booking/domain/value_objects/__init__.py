from travel_booking.domain.value_objects.stay_period import StayPeriod

__all__ = ["StayPeriod"]
