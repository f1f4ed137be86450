"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. They filter, count,
order and slice; deciding what a viewer may see is the service's job,
expressed to the store as EventCriteria.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from events.domain import (
    ANONYMOUS,
    Category,
    CategoryId,
    EventId,
    EventSnapshot,
    NewEvent,
    RegistrationOutcome,
    UserId,
    Viewer,
)


@dataclass(frozen=True)
class EventCriteria:
    """Filter applied to event listings.

    visible_to: only events the viewer may see.
    category_id: only events linked to this category.
    created_by_id: only events created by this user.
    """

    visible_to: Viewer = ANONYMOUS
    category_id: CategoryId | None = None
    created_by_id: UserId | None = None

    def matches(self, snapshot: EventSnapshot) -> bool:
        event = snapshot.event
        if self.category_id is not None and self.category_id not in {
            c.id for c in snapshot.categories
        }:
            return False
        if self.created_by_id is not None and event.created_by_id != self.created_by_id:
            return False
        return snapshot.is_visible_to(self.visible_to)


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def count_events(self, criteria: EventCriteria) -> int:
        """Return the number of events matching criteria."""
        ...

    @abstractmethod
    def find_events(
        self, criteria: EventCriteria, offset: int, limit: int
    ) -> list[EventSnapshot]:
        """Return a slice of matching events ordered by event_date descending, id ascending."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> EventSnapshot | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def list_categories(self) -> list[Category]:
        """Return all categories ordered by id."""
        ...

    @abstractmethod
    def missing_categories(self, category_ids: tuple[CategoryId, ...]) -> list[CategoryId]:
        """Return the ids among category_ids that have no Category."""
        ...

    @abstractmethod
    def create_event(self, new_event: NewEvent, created_by_id: UserId) -> EventId:
        """Persist an event and its category links, returning the new id."""
        ...

    @abstractmethod
    def add_registration(
        self, event_id: EventId, user_id: UserId
    ) -> RegistrationOutcome:
        """Insert a registration if the event exists, has room and the user is not registered.

        The check and the insert must be atomic with respect to other
        registrations for the same event.
        """
        ...

    @abstractmethod
    def remove_registration(self, event_id: EventId, user_id: UserId) -> bool:
        """Delete a registration. Return False if there was none."""
        ...

    @abstractmethod
    def delete_event(self, event_id: EventId) -> bool:
        """Delete an event with its registrations and category links."""
        ...
