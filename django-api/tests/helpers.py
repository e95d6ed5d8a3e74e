"""Builders shared by the test modules."""

from datetime import date, time

from tickets.domain import HallType, SlotChoice

TICKET_DATE = date(2026, 10, 19)


def choice(hh_mm: str, hall: str) -> SlotChoice:
    hour, minute = (int(part) for part in hh_mm.split(":"))
    return SlotChoice(start_time=time(hour, minute), hall_type=HallType(hall))
