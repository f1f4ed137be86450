"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

import math
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Generic, TypeVar

from events.domain.value_objects import (
    AuthenticatedUser,
    Capacity,
    CategoryId,
    EventId,
    UserId,
    Viewer,
)

T = TypeVar("T")


@dataclass(frozen=True)
class Category:
    """Domain representation of a Category."""

    id: CategoryId
    name: str
    color: str = "#3B82F6"
    icon: str | None = None


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    title: str
    description: str
    event_date: datetime
    capacity: Capacity
    is_private: bool
    address: str | None
    created_at: datetime
    created_by_id: UserId

    def is_visible_to(self, viewer: Viewer, registrant_ids: frozenset[UserId]) -> bool:
        """Public events are visible to everyone, private ones to creator and registrants."""
        if not self.is_private:
            return True
        if not isinstance(viewer, AuthenticatedUser):
            return False
        return viewer.id == self.created_by_id or viewer.id in registrant_ids


@dataclass(frozen=True)
class Registration:
    """Domain representation of a Registration."""

    id: int
    event_id: EventId
    user_id: UserId
    registration_date: datetime


@dataclass(frozen=True)
class EventSnapshot:
    """An event together with the related rows needed to summarize it."""

    event: Event
    created_by_name: str = ""
    categories: tuple[Category, ...] = ()
    registrant_ids: frozenset[UserId] = field(default_factory=frozenset)

    def is_visible_to(self, viewer: Viewer) -> bool:
        return self.event.is_visible_to(viewer, self.registrant_ids)


@dataclass(frozen=True)
class NewEvent:
    """Input for creating an event."""

    title: str
    description: str
    event_date: datetime
    capacity: Capacity = Capacity(0)
    is_private: bool = False
    address: str | None = None
    category_ids: tuple[CategoryId, ...] = ()


@dataclass(frozen=True)
class CategorySummary:
    id: int
    name: str
    color: str
    icon: str | None

    @classmethod
    def from_category(cls, category: Category) -> "CategorySummary":
        return cls(
            id=category.id.value,
            name=category.name,
            color=category.color,
            icon=category.icon,
        )


@dataclass(frozen=True)
class EventSummary:
    """An event as seen by a particular viewer."""

    id: int
    title: str
    description: str
    event_date: datetime
    capacity: int
    is_private: bool
    address: str | None
    created_at: datetime
    created_by_id: str
    created_by_name: str
    registrations_count: int
    spots_left: int | None
    categories: tuple[CategorySummary, ...]
    is_registered: bool

    @classmethod
    def from_snapshot(cls, snapshot: EventSnapshot, viewer: Viewer) -> "EventSummary":
        event = snapshot.event
        registrations_count = len(snapshot.registrant_ids)
        is_registered = (
            isinstance(viewer, AuthenticatedUser)
            and viewer.id in snapshot.registrant_ids
        )
        return cls(
            id=event.id.value,
            title=event.title,
            description=event.description,
            event_date=event.event_date,
            capacity=event.capacity.value,
            is_private=event.is_private,
            address=event.address,
            created_at=event.created_at,
            created_by_id=str(event.created_by_id),
            created_by_name=snapshot.created_by_name.strip(),
            registrations_count=registrations_count,
            spots_left=event.capacity.remaining(registrations_count),
            categories=tuple(CategorySummary.from_category(c) for c in snapshot.categories),
            is_registered=is_registered,
        )


@dataclass(frozen=True)
class PaginatedResult(Generic[T]):
    """One page of a listing plus the size of the whole filtered set."""

    items: tuple[T, ...]
    total_count: int
    page: int
    page_size: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.page_size) if self.page_size else 0

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


class _Outcome(Enum):
    """Result of a mutating operation, truthy only on success."""

    def __bool__(self) -> bool:
        return self.name in ("REGISTERED", "UNREGISTERED", "DELETED")


class RegistrationOutcome(_Outcome):
    REGISTERED = "REGISTERED"
    NO_USER = "NO_USER"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    ALREADY_REGISTERED = "ALREADY_REGISTERED"
    EVENT_FULL = "EVENT_FULL"


class UnregistrationOutcome(_Outcome):
    UNREGISTERED = "UNREGISTERED"
    NOT_REGISTERED = "NOT_REGISTERED"


class DeletionOutcome(_Outcome):
    DELETED = "DELETED"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    NOT_OWNER = "NOT_OWNER"
