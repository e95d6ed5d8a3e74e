"""Unit tests for TicketService.

These test validation, all-or-nothing updates and seat occupancy.
Run with: pytest tests/test_services.py -v
"""

from uuid import uuid4

import pytest

from tickets.domain import Gender, UserInfo
from tickets.domain.errors import (
    EmptySlotSelectionError,
    InsufficientCapacityError,
    InvalidDateError,
    InvalidHeadcountError,
    InvalidSlotTimeError,
    InvalidTicketIdError,
    NotFoundError,
    SeatNotFoundError,
    SlotNotFoundError,
    TicketNotFoundError,
)
from tickets.services.ticket_service import TicketService

from helpers import TICKET_DATE, choice


class TestCreateTicket:
    """Tests for TicketService.create_ticket."""

    def test_single_hall_a_slot_for_four(self, service, store):
        ticket = service.create_ticket([choice("13:00", "A")], 4, "2026-10-19", "order 42")

        assert store.get_ticket(ticket.id) == ticket
        assert ticket.price_tier == "50元 (15-20人)"
        assert ticket.selected_date == TICKET_DATE
        assert ticket.package_name == "团票"
        assert ticket.remarks == "order 42"
        assert len(ticket.slots) == 1
        slot = ticket.slots[0]
        assert slot.id == "2026-10-19-13:00-A"
        assert slot.capacity == 4
        assert [seat.occupant for seat in slot.seats] == [None] * 4

    def test_capacity_shortfall_creates_nothing(self, service, store):
        with pytest.raises(InsufficientCapacityError):
            service.create_ticket([choice("13:00", "A")], 5, TICKET_DATE)
        assert store.list_tickets() == []

    def test_empty_selection_creates_nothing(self, service, store):
        with pytest.raises(EmptySlotSelectionError):
            service.create_ticket([], 1, TICKET_DATE)
        assert store.list_tickets() == []

    @pytest.mark.parametrize("headcount", [0, -3])
    def test_non_positive_headcount(self, service, headcount):
        with pytest.raises(InvalidHeadcountError):
            service.create_ticket([choice("13:00", "A")], headcount, TICKET_DATE)

    def test_off_grid_time(self, service):
        with pytest.raises(InvalidSlotTimeError):
            service.create_ticket([choice("13:05", "A")], 2, TICKET_DATE)

    def test_malformed_date(self, service):
        with pytest.raises(InvalidDateError):
            service.create_ticket([choice("13:00", "A")], 2, "2026/10/19")

    def test_repeated_choice_becomes_one_slot(self, service):
        ticket = service.create_ticket(
            [choice("13:00", "A"), choice("13:10", "B"), choice("13:00", "A")],
            4,
            TICKET_DATE,
        )
        assert [slot.id for slot in ticket.slots] == [
            "2026-10-19-13:00-A",
            "2026-10-19-13:10-B",
        ]

    def test_price_tier_for_larger_groups(self, service):
        slots = [choice(f"1{h}:00", "A") for h in range(3, 9)]
        assert service.create_ticket(slots, 21, TICKET_DATE).price_tier == "80元 (21-30人)"

    def test_seat_ids_come_from_the_id_facility(self, store, clock):
        tokens = iter(str(i) for i in range(100))
        service = TicketService(store, clock=clock, new_seat_id=lambda: next(tokens))
        ticket = service.create_ticket([choice("13:00", "B")], 2, TICKET_DATE)
        assert [seat.id for seat in ticket.slots[0].seats] == ["0", "1"]

    def test_defaults_to_eighteen_people_today(self, service):
        slots = [choice(f"1{h}:00", "A") for h in range(3, 8)]
        ticket = service.create_ticket(slots)
        assert ticket.headcount == 18
        assert ticket.price_tier == "50元 (15-20人)"
        assert ticket.selected_date == TICKET_DATE
        assert ticket.slots[0].id == "2026-10-19-13:00-A"

    def test_list_is_newest_first(self, service):
        first = service.create_ticket([choice("13:00", "A")], 4, TICKET_DATE)
        second = service.create_ticket([choice("14:00", "A")], 4, TICKET_DATE)
        assert service.list_tickets() == [second, first]


class TestGetTicket:
    """Tests for TicketService.get_ticket."""

    def test_invalid_id_raises_error(self, service):
        with pytest.raises(InvalidTicketIdError):
            service.get_ticket("not-a-uuid")

    def test_unknown_ticket_raises_error(self, service):
        with pytest.raises(TicketNotFoundError):
            service.get_ticket(str(uuid4()))


class TestSeatOccupancy:
    """Tests for occupy_seat and release_seat."""

    @pytest.fixture
    def ticket(self, service):
        return service.create_ticket([choice("13:00", "A")], 4, TICKET_DATE)

    def test_occupy_release_release(self, service, ticket, alice):
        ticket_id = str(ticket.id)

        service.occupy_seat(ticket_id, 0, 0, alice)
        assert service.get_ticket(ticket_id).slots[0].seats[0].occupant == alice

        released = service.release_seat(ticket_id, 0, 0)
        assert released.slots[0].seats[0].occupant is None

        again = service.release_seat(ticket_id, 0, 0)
        assert again == released
        assert service.get_ticket(ticket_id) == released

    def test_occupy_overwrites_previous_occupant(self, service, ticket, alice):
        bob = UserInfo(name="Bob", gender=Gender.MALE, phone="13900000000")
        service.occupy_seat(str(ticket.id), 0, 2, alice)
        updated = service.occupy_seat(str(ticket.id), 0, 2, bob)
        assert updated.slots[0].seats[2].occupant == bob
        assert updated.slots[0].occupied_count == 1

    def test_occupy_keeps_seat_identity(self, service, ticket, alice):
        updated = service.occupy_seat(str(ticket.id), 0, 1, alice)
        assert updated.slots[0].seats[1].id == ticket.slots[0].seats[1].id

    @pytest.mark.parametrize(
        "slot_index, seat_index, error",
        [
            (1, 0, SlotNotFoundError),
            (-1, 0, SlotNotFoundError),
            (0, 4, SeatNotFoundError),
            (0, -1, SeatNotFoundError),
        ],
    )
    def test_bad_indices(self, service, ticket, alice, slot_index, seat_index, error):
        with pytest.raises(error):
            service.occupy_seat(str(ticket.id), slot_index, seat_index, alice)
        with pytest.raises(NotFoundError):
            service.release_seat(str(ticket.id), slot_index, seat_index)

    def test_unknown_ticket(self, service, alice):
        with pytest.raises(TicketNotFoundError):
            service.occupy_seat(str(uuid4()), 0, 0, alice)


class TestEditTicket:
    """Tests for TicketService.edit_ticket."""

    @pytest.fixture
    def ticket(self, service, alice):
        ticket = service.create_ticket(
            [choice("13:00", "A"), choice("13:10", "B")], 5, TICKET_DATE, "first"
        )
        service.occupy_seat(str(ticket.id), 0, 0, alice)
        return service.occupy_seat(str(ticket.id), 1, 1, alice)

    def test_kept_slot_preserves_occupants(self, service, ticket, alice):
        edited = service.edit_ticket(
            str(ticket.id),
            [choice("14:00", "A"), choice("13:00", "A")],
            TICKET_DATE,
            8,
        )
        assert [slot.id for slot in edited.slots] == [
            "2026-10-19-14:00-A",
            "2026-10-19-13:00-A",
        ]
        assert edited.slots[1] == ticket.slots[0]
        assert edited.slots[1].seats[0].occupant == alice
        assert edited.slots[0].occupied_count == 0

    def test_removed_slot_drops_its_occupants(self, service, ticket):
        edited = service.edit_ticket(str(ticket.id), [choice("13:00", "A")], TICKET_DATE, 4)
        assert edited.occupied_count == 1

    def test_edit_rederives_price_tier(self, service, ticket):
        slots = [choice(f"1{h}:00", "A") for h in range(3, 9)]
        edited = service.edit_ticket(str(ticket.id), slots, TICKET_DATE, 24)
        assert edited.headcount == 24
        assert edited.price_tier == "80元 (21-30人)"
        assert service.get_ticket(str(ticket.id)) == edited

    def test_headcount_beyond_capacity_leaves_ticket_unchanged(self, service, ticket):
        keys = [choice("13:00", "A"), choice("13:10", "B")]
        with pytest.raises(InsufficientCapacityError):
            service.edit_ticket(str(ticket.id), keys, TICKET_DATE, 7)
        assert service.get_ticket(str(ticket.id)) == ticket

    def test_empty_selection_leaves_ticket_unchanged(self, service, ticket):
        with pytest.raises(EmptySlotSelectionError):
            service.edit_ticket(str(ticket.id), [], TICKET_DATE, 5)
        assert service.get_ticket(str(ticket.id)) == ticket

    def test_new_date_starts_fresh_slots(self, service, ticket):
        edited = service.edit_ticket(
            str(ticket.id), [choice("13:00", "A"), choice("13:10", "B")], "2026-10-20", 5
        )
        assert edited.slots[0].id == "2026-10-20-13:00-A"
        assert edited.occupied_count == 0

    def test_remarks_kept_unless_given(self, service, ticket):
        keys = [choice("13:00", "A"), choice("13:10", "B")]
        kept = service.edit_ticket(str(ticket.id), keys, TICKET_DATE, 5)
        assert kept.remarks == "first"
        changed = service.edit_ticket(str(ticket.id), keys, TICKET_DATE, 5, remarks="second")
        assert changed.remarks == "second"

    def test_remark_image_kept_unless_given_and_cleared_by_none(self, service):
        keys = [choice("13:00", "A")]
        ticket = service.create_ticket(keys, 4, TICKET_DATE, remark_image="img://cover")

        kept = service.edit_ticket(str(ticket.id), keys, TICKET_DATE, 3)
        assert kept.remark_image == "img://cover"

        cleared = service.edit_ticket(str(ticket.id), keys, TICKET_DATE, 3, remark_image=None)
        assert cleared.remark_image is None
        assert service.get_ticket(str(ticket.id)).remark_image is None

    def test_id_and_created_at_survive(self, service, ticket):
        edited = service.edit_ticket(str(ticket.id), [choice("15:00", "A")], TICKET_DATE, 3)
        assert edited.id == ticket.id
        assert edited.created_at == ticket.created_at

    def test_unknown_ticket(self, service):
        with pytest.raises(TicketNotFoundError):
            service.edit_ticket(str(uuid4()), [choice("13:00", "A")], TICKET_DATE, 1)
