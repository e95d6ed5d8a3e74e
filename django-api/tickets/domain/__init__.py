from tickets.domain.models import (
    DEFAULT_HEADCOUNT,
    DEFAULT_PACKAGE_NAME,
    GroupTicket,
    Seat,
    TimeSlot,
)
from tickets.domain.value_objects import Gender, HallType, SlotChoice, SlotKey, TicketId, UserInfo

__all__ = [
    "DEFAULT_HEADCOUNT",
    "DEFAULT_PACKAGE_NAME",
    "GroupTicket",
    "Seat",
    "TimeSlot",
    "Gender",
    "HallType",
    "SlotChoice",
    "SlotKey",
    "TicketId",
    "UserInfo",
]
