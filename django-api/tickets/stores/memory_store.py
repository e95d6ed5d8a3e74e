"""In-process implementation of the TicketStore."""

from tickets.domain import GroupTicket, TicketId
from tickets.stores.interfaces import TicketStore


class InMemoryTicketStore(TicketStore):
    """Dict-backed ticket store living for the lifetime of the process."""

    def __init__(self) -> None:
        self._tickets: dict[TicketId, GroupTicket] = {}

    def list_tickets(self) -> list[GroupTicket]:
        # Newest insertion first among tickets sharing a timestamp.
        tickets = list(reversed(self._tickets.values()))
        return sorted(tickets, key=lambda ticket: ticket.created_at, reverse=True)

    def get_ticket(self, ticket_id: TicketId) -> GroupTicket | None:
        return self._tickets.get(ticket_id)

    def save_ticket(self, ticket: GroupTicket) -> None:
        self._tickets[ticket.id] = ticket

    def ticket_exists(self, ticket_id: TicketId) -> bool:
        return ticket_id in self._tickets
