"""Django cache implementation of the TicketStore.

Tickets are pickled into the configured cache backend under
``tickets:{id}``; ``tickets:index`` holds the ids of every stored ticket.
"""

from django.conf import settings
from django.core.cache import BaseCache, cache as default_cache

from tickets.domain import GroupTicket, TicketId
from tickets.stores.interfaces import TicketStore

INDEX_KEY = "tickets:index"


def ticket_key(ticket_id: TicketId) -> str:
    return f"tickets:{ticket_id}"


class DjangoCacheTicketStore(TicketStore):
    """Ticket store backed by ``CACHES["default"]``."""

    def __init__(
        self, cache: BaseCache | None = None, timeout: int | None = None
    ) -> None:
        self._cache = cache if cache is not None else default_cache
        self._timeout = (
            timeout if timeout is not None else settings.TICKET_CACHE_TIMEOUT
        )

    def list_tickets(self) -> list[GroupTicket]:
        keys = [f"tickets:{i}" for i in reversed(self._cache.get(INDEX_KEY, []))]
        found = self._cache.get_many(keys)
        # Entries may have expired independently of the index.
        tickets = [found[key] for key in keys if key in found]
        return sorted(tickets, key=lambda ticket: ticket.created_at, reverse=True)

    def get_ticket(self, ticket_id: TicketId) -> GroupTicket | None:
        return self._cache.get(ticket_key(ticket_id))

    def save_ticket(self, ticket: GroupTicket) -> None:
        self._cache.set(ticket_key(ticket.id), ticket, timeout=self._timeout)
        ids = self._cache.get(INDEX_KEY, [])
        if str(ticket.id) not in ids:
            self._cache.set(INDEX_KEY, [*ids, str(ticket.id)], timeout=self._timeout)

    def ticket_exists(self, ticket_id: TicketId) -> bool:
        return self._cache.has_key(ticket_key(ticket_id))
