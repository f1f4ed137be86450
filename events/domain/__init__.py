from events.domain.models import (
    Category,
    CategorySummary,
    DeletionOutcome,
    Event,
    EventSnapshot,
    EventSummary,
    NewEvent,
    PaginatedResult,
    Registration,
    RegistrationOutcome,
    UnregistrationOutcome,
)
from events.domain.value_objects import (
    ANONYMOUS,
    Anonymous,
    AuthenticatedUser,
    Capacity,
    CategoryId,
    EventId,
    PageRequest,
    UserId,
    Viewer,
    viewer_from_user_id,
)

__all__ = [
    "Event",
    "Category",
    "Registration",
    "EventSnapshot",
    "NewEvent",
    "EventSummary",
    "CategorySummary",
    "PaginatedResult",
    "RegistrationOutcome",
    "UnregistrationOutcome",
    "DeletionOutcome",
    "EventId",
    "CategoryId",
    "UserId",
    "Capacity",
    "PageRequest",
    "Viewer",
    "Anonymous",
    "AuthenticatedUser",
    "ANONYMOUS",
    "viewer_from_user_id",
]
