"""Domain models for group tickets.

These are pure domain objects with no API input rules. A ticket owns its
slots and a slot owns its seats; changing a seat produces a new ticket value
that the store saves under the same id.
"""

from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import date, datetime, time
from typing import Self

from tickets.domain.errors import SeatNotFoundError, SlotNotFoundError
from tickets.domain.policy import hall_capacity, price_tier_for
from tickets.domain.value_objects import HallType, SlotKey, TicketId, UserInfo

DEFAULT_PACKAGE_NAME = "团票"
DEFAULT_HEADCOUNT = 18
# Draws of the seat id facility allowed per seat before giving up.
SEAT_ID_ATTEMPTS = 10


@dataclass(frozen=True)
class Seat:
    """Domain representation of a Seat."""

    id: str
    index: int
    occupant: UserInfo | None = None

    @property
    def is_occupied(self) -> bool:
        return self.occupant is not None


@dataclass(frozen=True)
class TimeSlot:
    """Domain representation of a TimeSlot."""

    id: str
    slot_date: date
    start_time: time
    hall_type: HallType
    capacity: int
    seats: tuple[Seat, ...]

    def __post_init__(self) -> None:
        if self.capacity != hall_capacity(self.hall_type):
            raise ValueError("Slot capacity must match its hall type")
        if self.capacity != len(self.seats):
            raise ValueError("Slot capacity must equal its seat count")
        if len({seat.id for seat in self.seats}) != len(self.seats):
            raise ValueError("Seat ids must be unique within a slot")

    @classmethod
    def create(cls, key: SlotKey, new_seat_id: Callable[[], str]) -> Self:
        """Materialize a slot with empty seats for the given key.

        Raises:
            ValueError: If new_seat_id keeps repeating ids already in the slot.
        """
        capacity = hall_capacity(key.hall_type)
        seat_ids: list[str] = []
        for _ in range(capacity * SEAT_ID_ATTEMPTS):
            seat_id = new_seat_id()
            if seat_id not in seat_ids:
                seat_ids.append(seat_id)
                if len(seat_ids) == capacity:
                    break
        else:
            raise ValueError("Could not draw unique seat ids for the slot")
        return cls(
            id=key.slot_id,
            slot_date=key.slot_date,
            start_time=key.start_time,
            hall_type=key.hall_type,
            capacity=capacity,
            seats=tuple(Seat(id=seat_id, index=i) for i, seat_id in enumerate(seat_ids)),
        )

    @property
    def key(self) -> SlotKey:
        return SlotKey(
            slot_date=self.slot_date,
            start_time=self.start_time,
            hall_type=self.hall_type,
        )

    @property
    def occupied_count(self) -> int:
        return sum(1 for seat in self.seats if seat.is_occupied)

    def with_occupant(self, seat_index: int, occupant: UserInfo | None) -> Self:
        """Return a copy with one seat occupied by ``occupant`` (None empties it).

        Raises:
            IndexError: If seat_index does not address a seat.
        """
        if not 0 <= seat_index < len(self.seats):
            raise IndexError(seat_index)
        seats = list(self.seats)
        seats[seat_index] = replace(seats[seat_index], occupant=occupant)
        return replace(self, seats=tuple(seats))


@dataclass(frozen=True)
class GroupTicket:
    """Domain representation of a GroupTicket.

    The price tier is derived from the headcount on every read.
    """

    id: TicketId
    package_name: str
    headcount: int
    selected_date: date
    slots: tuple[TimeSlot, ...]
    remarks: str
    created_at: datetime
    remark_image: str | None = None

    def __post_init__(self) -> None:
        if not self.slots:
            raise ValueError("A ticket needs at least one slot")
        if len({slot.key for slot in self.slots}) != len(self.slots):
            raise ValueError("Slot keys must be unique within a ticket")
        if self.total_capacity < self.headcount:
            raise ValueError("Slots must seat the whole headcount")

    @property
    def price_tier(self) -> str:
        return price_tier_for(self.headcount)

    @property
    def total_capacity(self) -> int:
        return sum(slot.capacity for slot in self.slots)

    @property
    def occupied_count(self) -> int:
        return sum(slot.occupied_count for slot in self.slots)

    def slot_at(self, slot_index: int) -> TimeSlot:
        """Raises SlotNotFoundError if slot_index does not address a slot."""
        if not 0 <= slot_index < len(self.slots):
            raise SlotNotFoundError(slot_index)
        return self.slots[slot_index]

    def seat_at(self, slot_index: int, seat_index: int) -> Seat:
        slot = self.slot_at(slot_index)
        if not 0 <= seat_index < len(slot.seats):
            raise SeatNotFoundError(slot_index, seat_index)
        return slot.seats[seat_index]

    def with_occupant(
        self, slot_index: int, seat_index: int, occupant: UserInfo | None
    ) -> Self:
        """Return a copy with the addressed seat set to ``occupant``.

        Raises:
            SlotNotFoundError: If slot_index does not address a slot.
            SeatNotFoundError: If seat_index does not address a seat.
        """
        self.seat_at(slot_index, seat_index)
        slots = list(self.slots)
        slots[slot_index] = slots[slot_index].with_occupant(seat_index, occupant)
        return replace(self, slots=tuple(slots))
