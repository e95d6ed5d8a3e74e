"""Daily grid of bookable start times and the operator's slot selection."""

from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from typing import Self

from tickets.domain.errors import InvalidDateError
from tickets.domain.policy import capacity_of
from tickets.domain.value_objects import TIME_FORMAT, HallType, SlotChoice

GRID_START = time(13, 0)
GRID_END = time(21, 0)
GRID_STEP = timedelta(minutes=10)


@dataclass(frozen=True)
class SlotCandidate:
    """A bookable start time on a given date."""

    id: str
    start_time: time

    @property
    def time_label(self) -> str:
        return self.start_time.strftime(TIME_FORMAT)


def parse_date(value: date | str) -> date:
    """Accept a date or a YYYY-MM-DD string.

    Raises:
        InvalidDateError: If the string is not an ISO calendar date.
    """
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError):
        raise InvalidDateError(str(value)) from None


def _grid_times() -> tuple[time, ...]:
    anchor = date.min
    current = datetime.combine(anchor, GRID_START)
    end = datetime.combine(anchor, GRID_END)
    times = []
    while current <= end:
        times.append(current.time())
        current += GRID_STEP
    return tuple(times)


GRID_TIMES = _grid_times()


def generate_daily_slots(day: date | str) -> tuple[SlotCandidate, ...]:
    """Return the ordered start times from 13:00 to 21:00 for a date.

    Candidate ids are ``"{date}-{HH:MM}"``.
    """
    day = parse_date(day)
    return tuple(
        SlotCandidate(
            id=f"{day.isoformat()}-{start.strftime(TIME_FORMAT)}",
            start_time=start,
        )
        for start in GRID_TIMES
    )


def is_grid_time(value: time) -> bool:
    return value in GRID_TIMES


@dataclass(frozen=True)
class SlotSelection:
    """Picker state for one date.

    Toggling a (time, hall type) pair that is already chosen removes it, so a
    selection never holds the same pair twice.
    """

    selected_date: date
    choices: tuple[SlotChoice, ...] = field(default=())

    def toggle(self, start_time: time, hall_type: HallType) -> Self:
        choice = SlotChoice(start_time=start_time, hall_type=hall_type)
        if choice in self.choices:
            remaining = tuple(c for c in self.choices if c != choice)
            return type(self)(selected_date=self.selected_date, choices=remaining)
        return type(self)(
            selected_date=self.selected_date, choices=self.choices + (choice,)
        )

    def is_selected(self, start_time: time, hall_type: HallType) -> bool:
        return SlotChoice(start_time=start_time, hall_type=hall_type) in self.choices

    def for_date(self, day: date | str) -> Self:
        """Switch the picker to another date; a new date starts empty."""
        day = parse_date(day)
        if day == self.selected_date:
            return self
        return type(self)(selected_date=day)

    @property
    def total_capacity(self) -> int:
        return capacity_of(self.choices)
