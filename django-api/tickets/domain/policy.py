"""Hall capacities and the headcount price tiers.

Everything here is a pure function of its arguments.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from tickets.domain.errors import EmptySlotSelectionError, InsufficientCapacityError
from tickets.domain.value_objects import HallType


@dataclass(frozen=True)
class HallConfig:
    label: str
    capacity: int


HALL_CONFIG: dict[HallType, HallConfig] = {
    HallType.A: HallConfig(label="A Hall (Big)", capacity=4),
    HallType.B: HallConfig(label="B Hall (Small)", capacity=2),
}

# Upper headcount bound of each band, checked in ascending order.
PRICE_TIERS: tuple[tuple[int, str], ...] = (
    (20, "50元 (15-20人)"),
    (30, "80元 (21-30人)"),
)
TOP_PRICE_TIER = "120元 (31-50人)"


class HasHallType(Protocol):
    hall_type: HallType


def hall_capacity(hall_type: HallType) -> int:
    """Return the number of seats a slot in this hall gets."""
    return HALL_CONFIG[hall_type].capacity


def price_tier_for(headcount: int) -> str:
    """Return the display price tier for a headcount.

    Raises:
        ValueError: If headcount is negative.
    """
    if headcount < 0:
        raise ValueError("Headcount cannot be negative")
    for upper_bound, tier in PRICE_TIERS:
        if headcount <= upper_bound:
            return tier
    return TOP_PRICE_TIER


def capacity_of(slots: Iterable[HasHallType]) -> int:
    """Return the total seat count of the given slots or slot choices."""
    return sum(hall_capacity(slot.hall_type) for slot in slots)


def validate_selection(slots: Iterable[HasHallType], headcount: int) -> None:
    """Check that a slot selection can seat the headcount.

    Raises:
        EmptySlotSelectionError: If no slot is selected.
        InsufficientCapacityError: If the slots seat fewer than headcount.
    """
    slots = list(slots)
    if not slots:
        raise EmptySlotSelectionError()
    capacity = capacity_of(slots)
    if capacity < headcount:
        raise InsufficientCapacityError(capacity=capacity, headcount=headcount)
