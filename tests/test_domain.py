"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

from datetime import datetime, timezone

import pytest

from events.domain import (
    ANONYMOUS,
    Anonymous,
    AuthenticatedUser,
    Capacity,
    Category,
    CategoryId,
    DeletionOutcome,
    Event,
    EventId,
    EventSnapshot,
    EventSummary,
    PageRequest,
    PaginatedResult,
    RegistrationOutcome,
    UnregistrationOutcome,
    UserId,
    viewer_from_user_id,
)
from events.domain.errors import CategoryNotFoundError, ErrorCode, EventNotFoundError

NOW = datetime(2026, 5, 1, tzinfo=timezone.utc)


def make_event(is_private: bool = False, created_by: str = "u1", capacity: int = 0) -> Event:
    return Event(
        id=EventId(1),
        title="Conference",
        description="Annual conference",
        event_date=NOW,
        capacity=Capacity(capacity),
        is_private=is_private,
        address=None,
        created_at=NOW,
        created_by_id=UserId(created_by),
    )


class TestCapacity:
    """Tests for Capacity value object."""

    @pytest.mark.parametrize("value", [0, -1, -50])
    def test_zero_or_negative_is_unlimited(self, value):
        capacity = Capacity(value)
        assert capacity.is_unlimited
        assert not capacity.is_full(10_000)
        assert capacity.remaining(3) is None

    def test_full_at_limit(self):
        capacity = Capacity(2)
        assert not capacity.is_full(1)
        assert capacity.is_full(2)
        assert capacity.is_full(3)

    def test_remaining_never_negative(self):
        assert Capacity(5).remaining(2) == 3
        assert Capacity(5).remaining(7) == 0


class TestIdentifiers:
    """Tests for EventId, CategoryId and UserId."""

    def test_event_id_from_string(self):
        assert EventId.from_string("12") == EventId(12)

    @pytest.mark.parametrize("raw", ["abc", "", "1.5"])
    def test_event_id_from_invalid_string(self, raw):
        with pytest.raises(ValueError):
            EventId.from_string(raw)

    @pytest.mark.parametrize("raw", ["0", "-3"])
    def test_non_positive_ids_rejected(self, raw):
        with pytest.raises(ValueError):
            EventId.from_string(raw)
        with pytest.raises(ValueError):
            CategoryId.from_string(raw)

    def test_user_id_is_stripped(self):
        assert UserId("  u1 ") == UserId("u1")

    @pytest.mark.parametrize("raw", ["", "   "])
    def test_user_id_rejects_blank(self, raw):
        with pytest.raises(ValueError):
            UserId(raw)


class TestPageRequest:
    """Tests for PageRequest value object."""

    def test_offset_and_limit(self):
        page = PageRequest(page=3, page_size=10)
        assert page.offset == 20
        assert page.limit == 10

    def test_defaults(self):
        assert PageRequest() == PageRequest(page=1, page_size=20)

    @pytest.mark.parametrize("page, page_size", [(0, 10), (-1, 10), (1, 0), (1, -5)])
    def test_rejects_out_of_range(self, page, page_size):
        with pytest.raises(ValueError):
            PageRequest(page=page, page_size=page_size)


class TestViewer:
    """Tests for the Anonymous | AuthenticatedUser identity."""

    @pytest.mark.parametrize("raw", [None, "", "  "])
    def test_missing_identity_is_anonymous(self, raw):
        assert viewer_from_user_id(raw) is ANONYMOUS

    def test_identity_is_authenticated_user(self):
        viewer = viewer_from_user_id("u1")
        assert viewer == AuthenticatedUser(UserId("u1"))
        assert viewer.user_id == UserId("u1")

    def test_anonymous_has_no_user_id(self):
        assert Anonymous().user_id is None


class TestVisibility:
    """Tests for Event.is_visible_to."""

    def test_public_event_visible_to_everyone(self):
        event = make_event()
        assert event.is_visible_to(ANONYMOUS, frozenset())
        assert event.is_visible_to(viewer_from_user_id("u9"), frozenset())

    def test_private_event_visible_to_creator(self):
        event = make_event(is_private=True)
        assert event.is_visible_to(viewer_from_user_id("u1"), frozenset())

    def test_private_event_visible_to_registrant(self):
        event = make_event(is_private=True)
        registrants = frozenset({UserId("u2")})
        assert event.is_visible_to(viewer_from_user_id("u2"), registrants)
        assert not event.is_visible_to(viewer_from_user_id("u3"), registrants)

    def test_private_event_hidden_from_anonymous(self):
        event = make_event(is_private=True)
        assert not event.is_visible_to(ANONYMOUS, frozenset({UserId("u2")}))


class TestEventSummary:
    """Tests for EventSummary.from_snapshot."""

    def test_maps_snapshot_for_viewer(self):
        snapshot = EventSnapshot(
            event=make_event(capacity=3),
            created_by_name=" John Doe ",
            categories=(Category(id=CategoryId(4), name="Tech", color="#000", icon="cpu"),),
            registrant_ids=frozenset({UserId("u2"), UserId("u3")}),
        )

        summary = EventSummary.from_snapshot(snapshot, viewer_from_user_id("u2"))

        assert summary.id == 1
        assert summary.created_by_id == "u1"
        assert summary.created_by_name == "John Doe"
        assert summary.registrations_count == 2
        assert summary.spots_left == 1
        assert summary.is_registered is True
        assert summary.categories[0].icon == "cpu"

    def test_anonymous_is_never_registered(self):
        snapshot = EventSnapshot(event=make_event(), registrant_ids=frozenset({UserId("u2")}))
        assert EventSummary.from_snapshot(snapshot, ANONYMOUS).is_registered is False


class TestPaginatedResult:
    def test_total_pages(self):
        result = PaginatedResult(items=(), total_count=25, page=1, page_size=10)
        assert result.total_pages == 3
        assert result.has_next

    def test_empty(self):
        result = PaginatedResult(items=(), total_count=0, page=1, page_size=10)
        assert result.total_pages == 0
        assert not result.has_next


class TestOutcomes:
    """Outcomes are truthy only on success."""

    def test_success_members_are_truthy(self):
        assert RegistrationOutcome.REGISTERED
        assert UnregistrationOutcome.UNREGISTERED
        assert DeletionOutcome.DELETED

    @pytest.mark.parametrize(
        "outcome",
        [
            RegistrationOutcome.NO_USER,
            RegistrationOutcome.EVENT_NOT_FOUND,
            RegistrationOutcome.ALREADY_REGISTERED,
            RegistrationOutcome.EVENT_FULL,
            UnregistrationOutcome.NOT_REGISTERED,
            DeletionOutcome.EVENT_NOT_FOUND,
            DeletionOutcome.NOT_OWNER,
        ],
    )
    def test_rejections_are_falsy(self, outcome):
        assert not outcome


class TestDomainErrors:
    def test_event_not_found(self):
        error = EventNotFoundError(7)
        assert error.code is ErrorCode.EVENT_NOT_FOUND
        assert error.event_id == 7
        assert str(error) == "EVENT_NOT_FOUND: Event not found"

    def test_category_not_found_lists_ids(self):
        error = CategoryNotFoundError([3, 9])
        assert error.category_ids == [3, 9]
        assert error.message == "Unknown category: 3, 9"
