"""Django signals for rebuilding the ticket store."""

import logging

from django.core.signals import setting_changed
from django.dispatch import receiver

from tickets.dependencies import get_ticket_store

logger = logging.getLogger(__name__)


@receiver(setting_changed)
def reset_ticket_store(sender, setting, **kwargs):
    """Drop the cached store when its backend or cache settings change."""
    if setting in ("TICKET_STORE_BACKEND", "TICKET_CACHE_TIMEOUT", "CACHES"):
        get_ticket_store.cache_clear()
        logger.debug("Ticket store reset after %s changed", setting)
