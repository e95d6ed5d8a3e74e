"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. A store is the single
authoritative holder of each ticket; saving a ticket replaces the value
stored under its id.
"""

from abc import ABC, abstractmethod

from tickets.domain import GroupTicket, TicketId


class TicketStore(ABC):
    """Interface for ticket storage operations."""

    @abstractmethod
    def list_tickets(self) -> list[GroupTicket]:
        """Return all tickets ordered by created_at descending."""
        ...

    @abstractmethod
    def get_ticket(self, ticket_id: TicketId) -> GroupTicket | None:
        """Return a ticket by ID, or None if not found."""
        ...

    @abstractmethod
    def save_ticket(self, ticket: GroupTicket) -> None:
        """Insert a ticket or replace the stored ticket with the same ID."""
        ...

    @abstractmethod
    def ticket_exists(self, ticket_id: TicketId) -> bool:
        """Check if a ticket exists."""
        ...
