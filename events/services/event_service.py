"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models, outcomes or domain errors

Not-found lookups return None and rejected mutations return a falsy
outcome carrying the reason. Storage failures propagate unchanged.
"""

import logging

from events.conf import events_settings
from events.domain import (
    AuthenticatedUser,
    CategoryId,
    CategorySummary,
    DeletionOutcome,
    EventId,
    EventSummary,
    NewEvent,
    PageRequest,
    PaginatedResult,
    RegistrationOutcome,
    UnregistrationOutcome,
    UserId,
    Viewer,
)
from events.domain.errors import CategoryNotFoundError, EventCreationError
from events.stores.interfaces import EventCriteria, EventStore

logger = logging.getLogger(__name__)


class EventService:
    """Service for event catalog and registration operations."""

    def __init__(self, store: EventStore, allow_identity_override: bool | None = None) -> None:
        self._store = store
        if allow_identity_override is None:
            allow_identity_override = events_settings.ALLOW_IDENTITY_OVERRIDE
        self._allow_identity_override = allow_identity_override

    # Queries

    def list_events(
        self, viewer: Viewer, page_request: PageRequest
    ) -> PaginatedResult[EventSummary]:
        """Return the events visible to viewer, newest event_date first."""
        return self._paginate(EventCriteria(visible_to=viewer), viewer, page_request)

    def list_events_by_category(
        self, category_id: CategoryId, viewer: Viewer, page_request: PageRequest
    ) -> PaginatedResult[EventSummary]:
        """Return visible events linked to category_id."""
        criteria = EventCriteria(visible_to=viewer, category_id=category_id)
        return self._paginate(criteria, viewer, page_request)

    def list_events_by_user(
        self, target_user_id: UserId, viewer: Viewer, page_request: PageRequest
    ) -> PaginatedResult[EventSummary]:
        """Return visible events created by target_user_id.

        Private events of the target user are only listed for viewers
        allowed to see them.
        """
        criteria = EventCriteria(visible_to=viewer, created_by_id=target_user_id)
        return self._paginate(criteria, viewer, page_request)

    def get_event(self, event_id: EventId, viewer: Viewer) -> EventSummary | None:
        """Return an event, or None if it does not exist or viewer may not see it."""
        snapshot = self._store.get_event(event_id)
        if snapshot is None or not snapshot.is_visible_to(viewer):
            return None
        return EventSummary.from_snapshot(snapshot, viewer)

    def list_categories(self) -> list[CategorySummary]:
        return [CategorySummary.from_category(c) for c in self._store.list_categories()]

    # Commands

    def create_event(
        self,
        new_event: NewEvent,
        viewer: Viewer,
        requested_created_by_id: UserId | None = None,
    ) -> EventSummary:
        """Create an event owned by the requested user, the viewer, or the anonymous owner.

        Raises:
            CategoryNotFoundError: If any category id does not exist.
            EventCreationError: If the created event cannot be read back.
        """
        owner_id = self._acting_user(requested_created_by_id, viewer)
        if owner_id is None:
            owner_id = UserId(events_settings.ANONYMOUS_OWNER_ID)

        missing = self._store.missing_categories(new_event.category_ids)
        if missing:
            raise CategoryNotFoundError([c.value for c in missing])

        logger.info("Creating event %r for user %s", new_event.title, owner_id)
        event_id = self._store.create_event(new_event, owner_id)

        created = self.get_event(event_id, AuthenticatedUser(owner_id))
        if created is None:
            logger.error("Event %s vanished right after creation", event_id.value)
            raise EventCreationError()
        return created

    def register_for_event(
        self,
        event_id: EventId,
        viewer: Viewer,
        requested_user_id: UserId | None = None,
    ) -> RegistrationOutcome:
        """Register the requested user (or the viewer) for an event.

        Duplicate and capacity checks are re-done by the store atomically
        with the insert.
        """
        user_id = self._acting_user(requested_user_id, viewer)
        if user_id is None:
            return RegistrationOutcome.NO_USER

        snapshot = self._store.get_event(event_id)
        if snapshot is None:
            logger.warning("Attempt to register for non-existent event %s", event_id.value)
            return RegistrationOutcome.EVENT_NOT_FOUND
        if user_id in snapshot.registrant_ids:
            return RegistrationOutcome.ALREADY_REGISTERED
        if snapshot.event.capacity.is_full(len(snapshot.registrant_ids)):
            logger.info("Event %s is full", event_id.value)
            return RegistrationOutcome.EVENT_FULL

        outcome = self._store.add_registration(event_id, user_id)
        if outcome:
            logger.info("User %s registered for event %s", user_id, event_id.value)
        else:
            logger.info(
                "Registration of user %s for event %s lost a race: %s",
                user_id,
                event_id.value,
                outcome.value,
            )
        return outcome

    def unregister_from_event(
        self, event_id: EventId, user_id: UserId
    ) -> UnregistrationOutcome:
        if not self._store.remove_registration(event_id, user_id):
            return UnregistrationOutcome.NOT_REGISTERED
        logger.info("User %s unregistered from event %s", user_id, event_id.value)
        return UnregistrationOutcome.UNREGISTERED

    def delete_event(self, event_id: EventId, requesting_user_id: UserId) -> DeletionOutcome:
        """Delete an event. Only its creator may do so."""
        snapshot = self._store.get_event(event_id)
        if snapshot is None:
            return DeletionOutcome.EVENT_NOT_FOUND
        if snapshot.event.created_by_id != requesting_user_id:
            logger.warning(
                "User %s tried to delete event %s owned by %s",
                requesting_user_id,
                event_id.value,
                snapshot.event.created_by_id,
            )
            return DeletionOutcome.NOT_OWNER
        if not self._store.delete_event(event_id):
            return DeletionOutcome.EVENT_NOT_FOUND
        logger.info("Event %s deleted by %s", event_id.value, requesting_user_id)
        return DeletionOutcome.DELETED

    def _paginate(
        self, criteria: EventCriteria, viewer: Viewer, page_request: PageRequest
    ) -> PaginatedResult[EventSummary]:
        # Count before fetching so the total never depends on the page.
        total_count = self._store.count_events(criteria)
        snapshots = self._store.find_events(
            criteria, offset=page_request.offset, limit=page_request.limit
        )
        return PaginatedResult(
            items=tuple(EventSummary.from_snapshot(s, viewer) for s in snapshots),
            total_count=total_count,
            page=page_request.page,
            page_size=page_request.page_size,
        )

    def _acting_user(self, requested: UserId | None, viewer: Viewer) -> UserId | None:
        if requested is not None and self._allow_identity_override:
            return requested
        if isinstance(viewer, AuthenticatedUser):
            return viewer.id
        return None
