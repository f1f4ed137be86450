"""Domain error codes for the events module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    CATEGORY_NOT_FOUND = "CATEGORY_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    INVALID_CATEGORY_ID = "INVALID_CATEGORY_ID"
    INVALID_USER_ID = "INVALID_USER_ID"
    INVALID_PAGINATION = "INVALID_PAGINATION"
    EVENT_CREATION_FAILED = "EVENT_CREATION_FAILED"
    REGISTRATION_REJECTED = "REGISTRATION_REJECTED"
    NOT_REGISTERED = "NOT_REGISTERED"
    NOT_EVENT_OWNER = "NOT_EVENT_OWNER"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    """Raised when an event is not found or not visible."""

    def __init__(self, event_id: int) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class CategoryNotFoundError(DomainError):
    """Raised when an event references categories that do not exist."""

    def __init__(self, category_ids: list[int]) -> None:
        super().__init__(
            code=ErrorCode.CATEGORY_NOT_FOUND,
            message="Unknown category: " + ", ".join(str(i) for i in category_ids),
        )
        self.category_ids = category_ids


class InvalidEventIdError(DomainError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )


class InvalidCategoryIdError(DomainError):
    """Raised when a category ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_CATEGORY_ID,
            message="Invalid category ID format",
        )


class InvalidUserIdError(DomainError):
    """Raised when a user ID in the path is blank."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_USER_ID,
            message="Invalid user ID",
        )


class InvalidPaginationError(DomainError):
    """Raised when page or page_size is out of range."""

    def __init__(self, detail: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_PAGINATION,
            message=detail,
        )


class EventCreationError(DomainError):
    """Raised when a freshly created event cannot be read back."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EVENT_CREATION_FAILED,
            message="Failed to create event",
        )


class RegistrationRejectedError(DomainError):
    """Wraps a failed registration outcome for the HTTP layer."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            code=ErrorCode.REGISTRATION_REJECTED,
            message=f"Registration failed: {reason}",
        )
        self.reason = reason


class NotRegisteredError(DomainError):
    """Raised when unregistering a user who holds no registration."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NOT_REGISTERED,
            message="User is not registered for this event",
        )


class NotEventOwnerError(DomainError):
    """Raised when someone other than the creator deletes an event."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NOT_EVENT_OWNER,
            message="Only the event creator can delete it",
        )
