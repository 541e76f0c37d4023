from dataclasses import dataclass
from datetime import date

from travel_booking.domain.errors import InvalidArgumentError


@dataclass(frozen=True, slots=True)
class StayPeriod:
    """Immutable calendar range covered by a reservation.

    Same-day periods are allowed (zero days); an end date before the start
    date is rejected instead of producing a negative duration.
    """

    start_date: date
    end_date: date

    def __post_init__(self) -> None:
        if not isinstance(self.start_date, date) or not isinstance(self.end_date, date):
            raise InvalidArgumentError("start_date and end_date must be dates")
        if self.end_date < self.start_date:
            raise InvalidArgumentError("end_date must not be before start_date")

    @property
    def days(self) -> int:
        return (self.end_date - self.start_date).days
