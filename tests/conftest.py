"""Pytest configuration and shared fixtures."""

from datetime import datetime, timedelta, timezone

import pytest
from rest_framework.test import APIClient

from events.domain import Capacity, CategoryId, NewEvent
from events.services import EventService
from events.stores.memory_store import InMemoryEventStore

BASE_DATE = datetime(2026, 3, 1, 18, 0, tzinfo=timezone.utc)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def memory_store() -> InMemoryEventStore:
    store = InMemoryEventStore()
    store.add_user("u1", "John", "Doe")
    store.add_user("u2", "Jane", "Smith")
    return store


@pytest.fixture
def service(memory_store: InMemoryEventStore) -> EventService:
    return EventService(memory_store, allow_identity_override=True)


@pytest.fixture
def new_event():
    """Factory for NewEvent inputs; days_ahead shifts event_date from BASE_DATE."""

    def build(
        title: str = "Meetup",
        days_ahead: int = 0,
        capacity: int = 0,
        is_private: bool = False,
        category_ids: tuple[int, ...] = (),
        address: str | None = None,
    ) -> NewEvent:
        return NewEvent(
            title=title,
            description=f"{title} description",
            event_date=BASE_DATE + timedelta(days=days_ahead),
            capacity=Capacity(capacity),
            is_private=is_private,
            address=address,
            category_ids=tuple(CategoryId(i) for i in category_ids),
        )

    return build
