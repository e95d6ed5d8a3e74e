"""Pytest configuration and shared fixtures."""

from datetime import datetime, timedelta, timezone
from itertools import count

import pytest
from rest_framework.test import APIClient

from tickets.domain import Gender, UserInfo
from tickets.services.ticket_service import TicketService
from tickets.stores.memory_store import InMemoryTicketStore


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture(autouse=True)
def reset_ticket_store():
    from tickets.dependencies import get_ticket_store
    get_ticket_store.cache_clear()
    yield
    get_ticket_store.cache_clear()


@pytest.fixture
def store() -> InMemoryTicketStore:
    return InMemoryTicketStore()


@pytest.fixture
def clock():
    """A clock that advances one minute per call."""
    ticks = count()
    start = datetime(2026, 10, 19, 9, 0, tzinfo=timezone.utc)
    return lambda: start + timedelta(minutes=next(ticks))


@pytest.fixture
def service(store, clock) -> TicketService:
    return TicketService(store, clock=clock)


@pytest.fixture
def alice() -> UserInfo:
    return UserInfo(name="Alice", gender=Gender.FEMALE, phone="13800000000")

