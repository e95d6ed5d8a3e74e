"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from datetime import date, time
from enum import Enum
from typing import Self
from uuid import UUID

from tickets.domain.errors import InvalidOccupantError

TIME_FORMAT = "%H:%M"


class HallType(Enum):
    """Hall size; the hall type fixes a slot's seat count."""

    A = "A"
    B = "B"


class Gender(Enum):
    MALE = "Male"
    FEMALE = "Female"


@dataclass(frozen=True)
class TicketId:
    """Unique identifier for a GroupTicket."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class SlotChoice:
    """A (time, hall type) pair picked by the operator for the ticket date."""

    start_time: time
    hall_type: HallType

    @property
    def time_label(self) -> str:
        return self.start_time.strftime(TIME_FORMAT)


@dataclass(frozen=True)
class SlotKey:
    """Identity of a slot within a ticket."""

    slot_date: date
    start_time: time
    hall_type: HallType

    @classmethod
    def for_choice(cls, slot_date: date, choice: SlotChoice) -> Self:
        return cls(
            slot_date=slot_date,
            start_time=choice.start_time,
            hall_type=choice.hall_type,
        )

    @property
    def slot_id(self) -> str:
        return (
            f"{self.slot_date.isoformat()}-"
            f"{self.start_time.strftime(TIME_FORMAT)}-{self.hall_type.value}"
        )


@dataclass(frozen=True)
class UserInfo:
    """Participant details held by an occupied seat.

    Name and phone are both required, so a half-filled occupant cannot exist.
    """

    name: str
    gender: Gender
    phone: str

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise InvalidOccupantError("name")
        if not self.phone or not self.phone.strip():
            raise InvalidOccupantError("phone")
