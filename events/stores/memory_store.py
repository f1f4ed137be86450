"""Dictionary-backed EventStore for tests and local experiments."""

import itertools
import threading
from datetime import datetime, timezone

from events.domain import (
    Category,
    CategoryId,
    Event,
    EventId,
    EventSnapshot,
    NewEvent,
    RegistrationOutcome,
    UserId,
)
from events.stores.interfaces import EventCriteria, EventStore


class InMemoryEventStore(EventStore):
    """Keeps events, categories and registrations in process memory."""

    def __init__(self, user_names: dict[str, str] | None = None) -> None:
        self._events: dict[EventId, Event] = {}
        self._categories: dict[CategoryId, Category] = {}
        self._links: dict[EventId, list[CategoryId]] = {}
        self._registrations: dict[EventId, dict[UserId, datetime]] = {}
        self._user_names = dict(user_names or {})
        self._event_ids = itertools.count(1)
        self._category_ids = itertools.count(1)
        self._lock = threading.Lock()

    # Seeding helpers

    def add_user(self, user_id: str, first_name: str = "", last_name: str = "") -> None:
        self._user_names[user_id] = f"{first_name} {last_name}"

    def add_category(self, name: str, color: str = "#3B82F6", icon: str | None = None) -> Category:
        category = Category(
            id=CategoryId(next(self._category_ids)), name=name, color=color, icon=icon
        )
        self._categories[category.id] = category
        return category

    def registration_count(self, event_id: EventId) -> int:
        return len(self._registrations.get(event_id, {}))

    # EventStore

    def count_events(self, criteria: EventCriteria) -> int:
        return sum(1 for s in self._snapshots() if criteria.matches(s))

    def find_events(
        self, criteria: EventCriteria, offset: int, limit: int
    ) -> list[EventSnapshot]:
        matching = [s for s in self._snapshots() if criteria.matches(s)]
        # Stable sort keeps id order among equal dates.
        matching.sort(key=lambda s: s.event.id.value)
        matching.sort(key=lambda s: s.event.event_date, reverse=True)
        return matching[offset : offset + limit]

    def get_event(self, event_id: EventId) -> EventSnapshot | None:
        with self._lock:
            event = self._events.get(event_id)
            return None if event is None else self._snapshot(event)

    def list_categories(self) -> list[Category]:
        return sorted(self._categories.values(), key=lambda c: c.id.value)

    def missing_categories(self, category_ids: tuple[CategoryId, ...]) -> list[CategoryId]:
        return [c for c in dict.fromkeys(category_ids) if c not in self._categories]

    def create_event(self, new_event: NewEvent, created_by_id: UserId) -> EventId:
        event = Event(
            id=EventId(next(self._event_ids)),
            title=new_event.title,
            description=new_event.description,
            event_date=new_event.event_date,
            capacity=new_event.capacity,
            is_private=new_event.is_private,
            address=new_event.address,
            created_at=datetime.now(timezone.utc),
            created_by_id=created_by_id,
        )
        self._events[event.id] = event
        self._links[event.id] = list(dict.fromkeys(new_event.category_ids))
        self._registrations[event.id] = {}
        return event.id

    def add_registration(
        self, event_id: EventId, user_id: UserId
    ) -> RegistrationOutcome:
        with self._lock:
            event = self._events.get(event_id)
            if event is None:
                return RegistrationOutcome.EVENT_NOT_FOUND
            registrations = self._registrations[event_id]
            if user_id in registrations:
                return RegistrationOutcome.ALREADY_REGISTERED
            if event.capacity.is_full(len(registrations)):
                return RegistrationOutcome.EVENT_FULL
            registrations[user_id] = datetime.now(timezone.utc)
            return RegistrationOutcome.REGISTERED

    def remove_registration(self, event_id: EventId, user_id: UserId) -> bool:
        with self._lock:
            return self._registrations.get(event_id, {}).pop(user_id, None) is not None

    def delete_event(self, event_id: EventId) -> bool:
        with self._lock:
            if self._events.pop(event_id, None) is None:
                return False
            self._links.pop(event_id, None)
            self._registrations.pop(event_id, None)
            return True

    def _snapshots(self) -> list[EventSnapshot]:
        with self._lock:
            return [self._snapshot(e) for e in self._events.values()]

    def _snapshot(self, event: Event) -> EventSnapshot:
        return EventSnapshot(
            event=event,
            created_by_name=self._user_names.get(str(event.created_by_id), "").strip(),
            categories=tuple(
                self._categories[c] for c in self._links.get(event.id, []) if c in self._categories
            ),
            registrant_ids=frozenset(self._registrations.get(event.id, {})),
        )
