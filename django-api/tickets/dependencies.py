"""Wiring of the process-wide ticket store and service."""

from functools import lru_cache

from django.conf import settings
from django.utils.module_loading import import_string

from tickets.services.ticket_service import TicketService
from tickets.stores.interfaces import TicketStore


@lru_cache(maxsize=1)
def get_ticket_store() -> TicketStore:
    """Return the store named by ``TICKET_STORE_BACKEND``, built once."""
    return import_string(settings.TICKET_STORE_BACKEND)()


def get_ticket_service() -> TicketService:
    return TicketService(get_ticket_store())
