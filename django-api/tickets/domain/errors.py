"""Domain error codes for the tickets module.

Two kinds of failure exist: ValidationError (the request breaks a rule) and
NotFoundError (the addressed ticket, slot or seat does not exist).
"""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EMPTY_SLOT_SELECTION = "EMPTY_SLOT_SELECTION"
    INSUFFICIENT_CAPACITY = "INSUFFICIENT_CAPACITY"
    INVALID_HEADCOUNT = "INVALID_HEADCOUNT"
    INVALID_OCCUPANT = "INVALID_OCCUPANT"
    INVALID_SLOT_TIME = "INVALID_SLOT_TIME"
    INVALID_DATE = "INVALID_DATE"
    INVALID_TICKET_ID = "INVALID_TICKET_ID"
    TICKET_NOT_FOUND = "TICKET_NOT_FOUND"
    SLOT_NOT_FOUND = "SLOT_NOT_FOUND"
    SEAT_NOT_FOUND = "SEAT_NOT_FOUND"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ValidationError(DomainError):
    """A create, edit or seat request violates a ticket rule."""


class NotFoundError(DomainError):
    """The addressed ticket, slot or seat does not exist."""


class EmptySlotSelectionError(ValidationError):
    """Raised when a ticket is created or edited without any slot."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EMPTY_SLOT_SELECTION,
            message="Select at least one time slot",
        )


class InsufficientCapacityError(ValidationError):
    """Raised when the selected slots cannot seat the headcount."""

    def __init__(self, capacity: int, headcount: int) -> None:
        super().__init__(
            code=ErrorCode.INSUFFICIENT_CAPACITY,
            message=f"Selected slots seat {capacity}, headcount is {headcount}",
        )
        self.capacity = capacity
        self.headcount = headcount


class InvalidHeadcountError(ValidationError):
    """Raised when the headcount is not a positive integer."""

    def __init__(self, headcount: int) -> None:
        super().__init__(
            code=ErrorCode.INVALID_HEADCOUNT,
            message="Headcount must be greater than zero",
        )
        self.headcount = headcount


class InvalidOccupantError(ValidationError):
    """Raised when occupant details are incomplete."""

    def __init__(self, field: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_OCCUPANT,
            message=f"Occupant {field} is required",
        )
        self.field = field


class InvalidSlotTimeError(ValidationError):
    """Raised when a chosen time is not on the daily slot grid."""

    def __init__(self, time_label: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_SLOT_TIME,
            message=f"{time_label} is not a bookable time",
        )
        self.time_label = time_label


class InvalidDateError(ValidationError):
    """Raised when a date is not in YYYY-MM-DD format."""

    def __init__(self, value: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_DATE,
            message="Invalid date format, expected YYYY-MM-DD",
        )
        self.value = value


class InvalidTicketIdError(ValidationError):
    """Raised when a ticket ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TICKET_ID,
            message="Invalid ticket ID format",
        )


class TicketNotFoundError(NotFoundError):
    """Raised when a ticket is not found."""

    def __init__(self, ticket_id: str) -> None:
        super().__init__(
            code=ErrorCode.TICKET_NOT_FOUND,
            message="Ticket not found",
        )
        self.ticket_id = ticket_id


class SlotNotFoundError(NotFoundError):
    """Raised when a slot index does not exist on the ticket."""

    def __init__(self, slot_index: int) -> None:
        super().__init__(
            code=ErrorCode.SLOT_NOT_FOUND,
            message="Slot not found",
        )
        self.slot_index = slot_index


class SeatNotFoundError(NotFoundError):
    """Raised when a seat index does not exist in the slot."""

    def __init__(self, slot_index: int, seat_index: int) -> None:
        super().__init__(
            code=ErrorCode.SEAT_NOT_FOUND,
            message="Seat not found",
        )
        self.slot_index = slot_index
        self.seat_index = seat_index
