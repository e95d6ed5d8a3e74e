"""Ticket service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors

Every operation validates before it saves, so a failed call leaves the stored
ticket exactly as it was.
"""

import logging
from collections.abc import Callable, Iterable
from dataclasses import replace
from datetime import date, datetime
from typing import Any
from uuid import UUID, uuid4

from django.utils import timezone

from tickets.domain import (
    DEFAULT_HEADCOUNT,
    DEFAULT_PACKAGE_NAME,
    GroupTicket,
    SlotChoice,
    SlotKey,
    TicketId,
    TimeSlot,
    UserInfo,
)
from tickets.domain.errors import (
    InvalidHeadcountError,
    InvalidSlotTimeError,
    InvalidTicketIdError,
    TicketNotFoundError,
)
from tickets.domain.policy import validate_selection
from tickets.domain.slot_grid import is_grid_time, parse_date
from tickets.stores.interfaces import TicketStore

logger = logging.getLogger(__name__)

# Marks an edit argument the caller left out.
_UNSET: Any = object()


def short_token() -> str:
    return uuid4().hex[:9]


class TicketService:
    """Service for creating tickets and reserving their seats."""

    def __init__(
        self,
        store: TicketStore,
        clock: Callable[[], datetime] = timezone.now,
        new_ticket_id: Callable[[], UUID] = uuid4,
        new_seat_id: Callable[[], str] = short_token,
    ) -> None:
        self._store = store
        self._clock = clock
        self._new_ticket_id = new_ticket_id
        self._new_seat_id = new_seat_id

    def list_tickets(self) -> list[GroupTicket]:
        """Return all tickets, newest first."""
        return self._store.list_tickets()

    def get_ticket(self, ticket_id: str) -> GroupTicket:
        """Return a ticket by ID.

        Raises:
            InvalidTicketIdError: If the ticket_id is not a valid UUID.
            TicketNotFoundError: If the ticket does not exist.
        """
        try:
            parsed = TicketId.from_string(ticket_id)
        except (TypeError, ValueError):
            raise InvalidTicketIdError() from None
        ticket = self._store.get_ticket(parsed)
        if ticket is None:
            raise TicketNotFoundError(ticket_id)
        return ticket

    def create_ticket(
        self,
        slots: Iterable[SlotChoice],
        headcount: int = DEFAULT_HEADCOUNT,
        selected_date: date | str | None = None,
        remarks: str = "",
        remark_image: str | None = None,
        package_name: str = DEFAULT_PACKAGE_NAME,
    ) -> GroupTicket:
        """Create a ticket with empty seats in every selected slot.

        Without a selected_date the ticket is for today, by the service clock.

        Raises:
            InvalidDateError: If selected_date is malformed.
            InvalidSlotTimeError: If a chosen time is not a grid time.
            InvalidHeadcountError: If headcount is not positive.
            EmptySlotSelectionError: If no slot is selected.
            InsufficientCapacityError: If the slots seat fewer than headcount.
        """
        now = self._clock()
        if selected_date is None:
            slot_date = timezone.localtime(now).date()
        else:
            slot_date = parse_date(selected_date)
        choices = self._checked_choices(slots, headcount)
        ticket = GroupTicket(
            id=TicketId(value=self._new_ticket_id()),
            package_name=package_name,
            headcount=headcount,
            selected_date=slot_date,
            slots=tuple(
                TimeSlot.create(SlotKey.for_choice(slot_date, choice), self._new_seat_id)
                for choice in choices
            ),
            remarks=remarks,
            remark_image=remark_image,
            created_at=now,
        )
        self._store.save_ticket(ticket)
        logger.info(
            "Created ticket %s: %d slot(s), headcount %d, tier %s",
            ticket.id,
            len(ticket.slots),
            ticket.headcount,
            ticket.price_tier,
        )
        return ticket

    def edit_ticket(
        self,
        ticket_id: str,
        slots: Iterable[SlotChoice],
        selected_date: date | str,
        headcount: int,
        remarks: str | None = None,
        remark_image: str | None = _UNSET,
    ) -> GroupTicket:
        """Replace a ticket's slot selection, date and headcount.

        Slots whose (date, time, hall type) survive the edit keep their seats
        and occupants. Removed slots are discarded with their occupants; new
        slots start empty. Remarks and image are kept when not given; passing
        ``remark_image=None`` removes the image.

        Raises:
            InvalidTicketIdError: If the ticket_id is not a valid UUID.
            TicketNotFoundError: If the ticket does not exist.
            InvalidDateError: If selected_date is malformed.
            InvalidSlotTimeError: If a chosen time is not a grid time.
            InvalidHeadcountError: If headcount is not positive.
            EmptySlotSelectionError: If no slot is selected.
            InsufficientCapacityError: If the slots seat fewer than headcount.
        """
        ticket = self.get_ticket(ticket_id)
        slot_date = parse_date(selected_date)
        choices = self._checked_choices(slots, headcount)

        current = {slot.key: slot for slot in ticket.slots}
        new_keys = [SlotKey.for_choice(slot_date, choice) for choice in choices]
        new_slots = tuple(
            current[key] if key in current else TimeSlot.create(key, self._new_seat_id)
            for key in new_keys
        )
        evicted = sum(
            slot.occupied_count for key, slot in current.items() if key not in new_keys
        )

        updated = replace(
            ticket,
            headcount=headcount,
            selected_date=slot_date,
            slots=new_slots,
            remarks=ticket.remarks if remarks is None else remarks,
            remark_image=ticket.remark_image if remark_image is _UNSET else remark_image,
        )
        self._store.save_ticket(updated)
        if evicted:
            logger.warning(
                "Edit of ticket %s removed slots holding %d occupant(s)",
                ticket.id,
                evicted,
            )
        logger.info(
            "Edited ticket %s: %d slot(s), headcount %d, tier %s",
            ticket.id,
            len(updated.slots),
            updated.headcount,
            updated.price_tier,
        )
        return updated

    def occupy_seat(
        self, ticket_id: str, slot_index: int, seat_index: int, info: UserInfo
    ) -> GroupTicket:
        """Put a participant in a seat, replacing whoever held it.

        Raises:
            InvalidTicketIdError: If the ticket_id is not a valid UUID.
            TicketNotFoundError: If the ticket does not exist.
            SlotNotFoundError: If slot_index does not address a slot.
            SeatNotFoundError: If seat_index does not address a seat.
        """
        ticket = self.get_ticket(ticket_id)
        updated = ticket.with_occupant(slot_index, seat_index, info)
        self._store.save_ticket(updated)
        logger.info(
            "Seat %d of slot %d on ticket %s occupied",
            seat_index,
            slot_index,
            ticket.id,
        )
        return updated

    def release_seat(self, ticket_id: str, slot_index: int, seat_index: int) -> GroupTicket:
        """Empty a seat. Releasing an empty seat changes nothing.

        Raises:
            InvalidTicketIdError: If the ticket_id is not a valid UUID.
            TicketNotFoundError: If the ticket does not exist.
            SlotNotFoundError: If slot_index does not address a slot.
            SeatNotFoundError: If seat_index does not address a seat.
        """
        ticket = self.get_ticket(ticket_id)
        if not ticket.seat_at(slot_index, seat_index).is_occupied:
            logger.debug(
                "Seat %d of slot %d on ticket %s already empty",
                seat_index,
                slot_index,
                ticket.id,
            )
            return ticket
        updated = ticket.with_occupant(slot_index, seat_index, None)
        self._store.save_ticket(updated)
        logger.info(
            "Seat %d of slot %d on ticket %s released",
            seat_index,
            slot_index,
            ticket.id,
        )
        return updated

    def _checked_choices(
        self, slots: Iterable[SlotChoice], headcount: int
    ) -> list[SlotChoice]:
        choices: list[SlotChoice] = []
        for choice in slots:
            if not is_grid_time(choice.start_time):
                raise InvalidSlotTimeError(choice.time_label)
            if choice not in choices:
                choices.append(choice)
        if headcount <= 0:
            raise InvalidHeadcountError(headcount)
        validate_selection(choices, headcount)
        return choices
