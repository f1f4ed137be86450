"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 1:
            raise ValueError("EventId must be positive")

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=int(value))


@dataclass(frozen=True)
class CategoryId:
    """Unique identifier for a Category."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 1:
            raise ValueError("CategoryId must be positive")

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=int(value))


@dataclass(frozen=True)
class UserId:
    """Identifier issued by the identity provider."""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("UserId cannot be empty")
        object.__setattr__(self, "value", self.value.strip())

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Capacity:
    """Maximum number of registrations. Zero or less means unlimited."""

    value: int

    @property
    def is_unlimited(self) -> bool:
        return self.value <= 0

    def is_full(self, registrations_count: int) -> bool:
        return not self.is_unlimited and registrations_count >= self.value

    def remaining(self, registrations_count: int) -> int | None:
        if self.is_unlimited:
            return None
        return max(self.value - registrations_count, 0)


@dataclass(frozen=True)
class PageRequest:
    """1-indexed page of a listing."""

    page: int = 1
    page_size: int = 20

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError("page must be at least 1")
        if self.page_size < 1:
            raise ValueError("page_size must be at least 1")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size


@dataclass(frozen=True)
class Anonymous:
    """A viewer with no identity."""

    @property
    def user_id(self) -> None:
        return None


@dataclass(frozen=True)
class AuthenticatedUser:
    """A viewer acting as a known user."""

    id: UserId

    @property
    def user_id(self) -> UserId:
        return self.id


Viewer = Anonymous | AuthenticatedUser

ANONYMOUS = Anonymous()


def viewer_from_user_id(user_id: str | None) -> Viewer:
    """Build a viewer from an optional raw identity string."""
    if user_id is None or not user_id.strip():
        return ANONYMOUS
    return AuthenticatedUser(UserId(user_id))
