"""Django ORM implementation of the EventStore."""

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction
from django.db.models import Exists, OuterRef, Q, QuerySet

from events import models
from events.domain import (
    AuthenticatedUser,
    Capacity,
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


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    def count_events(self, criteria: EventCriteria) -> int:
        return self._filtered(criteria).count()

    def find_events(
        self, criteria: EventCriteria, offset: int, limit: int
    ) -> list[EventSnapshot]:
        rows = list(
            self._filtered(criteria)
            .order_by("-event_date", "id")
            .prefetch_related("registrations", "categories")[offset : offset + limit]
        )
        return self._to_snapshots(rows)

    def get_event(self, event_id: EventId) -> EventSnapshot | None:
        row = (
            models.Event.objects.prefetch_related("registrations", "categories")
            .filter(pk=event_id.value)
            .first()
        )
        if row is None:
            return None
        return self._to_snapshots([row])[0]

    def list_categories(self) -> list[Category]:
        return [_to_category(row) for row in models.Category.objects.order_by("id")]

    def missing_categories(self, category_ids: tuple[CategoryId, ...]) -> list[CategoryId]:
        wanted = list(dict.fromkeys(category_ids))
        found = set(
            models.Category.objects.filter(
                pk__in=[c.value for c in wanted]
            ).values_list("pk", flat=True)
        )
        return [c for c in wanted if c.value not in found]

    @transaction.atomic
    def create_event(self, new_event: NewEvent, created_by_id: UserId) -> EventId:
        row = models.Event.objects.create(
            title=new_event.title,
            description=new_event.description,
            event_date=new_event.event_date,
            capacity=new_event.capacity.value,
            is_private=new_event.is_private,
            address=new_event.address,
            created_by_id=str(created_by_id),
        )
        models.EventCategory.objects.bulk_create(
            [
                models.EventCategory(event=row, category_id=category_id.value)
                for category_id in dict.fromkeys(new_event.category_ids)
            ]
        )
        return EventId(row.pk)

    def add_registration(
        self, event_id: EventId, user_id: UserId
    ) -> RegistrationOutcome:
        with transaction.atomic():
            # Row lock serializes capacity checks for the same event.
            event = (
                models.Event.objects.select_for_update()
                .filter(pk=event_id.value)
                .first()
            )
            if event is None:
                return RegistrationOutcome.EVENT_NOT_FOUND
            registrations = models.Registration.objects.filter(event=event)
            if registrations.filter(user_id=str(user_id)).exists():
                return RegistrationOutcome.ALREADY_REGISTERED
            if Capacity(event.capacity).is_full(registrations.count()):
                return RegistrationOutcome.EVENT_FULL
            try:
                with transaction.atomic():
                    models.Registration.objects.create(event=event, user_id=str(user_id))
            except IntegrityError:
                return RegistrationOutcome.ALREADY_REGISTERED
        return RegistrationOutcome.REGISTERED

    def remove_registration(self, event_id: EventId, user_id: UserId) -> bool:
        deleted, _ = models.Registration.objects.filter(
            event_id=event_id.value, user_id=str(user_id)
        ).delete()
        return deleted > 0

    def delete_event(self, event_id: EventId) -> bool:
        deleted, _ = models.Event.objects.filter(pk=event_id.value).delete()
        return deleted > 0

    def _filtered(self, criteria: EventCriteria) -> QuerySet:
        queryset = models.Event.objects.all()
        if criteria.category_id is not None:
            queryset = queryset.filter(
                Exists(
                    models.EventCategory.objects.filter(
                        event=OuterRef("pk"), category_id=criteria.category_id.value
                    )
                )
            )
        if criteria.created_by_id is not None:
            queryset = queryset.filter(created_by_id=str(criteria.created_by_id))

        viewer = criteria.visible_to
        if not isinstance(viewer, AuthenticatedUser):
            return queryset.filter(is_private=False)
        user_id = str(viewer.id)
        return queryset.annotate(
            viewer_registered=Exists(
                models.Registration.objects.filter(event=OuterRef("pk"), user_id=user_id)
            )
        ).filter(
            Q(is_private=False) | Q(created_by_id=user_id) | Q(viewer_registered=True)
        )

    def _to_snapshots(self, rows: list[models.Event]) -> list[EventSnapshot]:
        names = _display_names({row.created_by_id for row in rows})
        return [
            EventSnapshot(
                event=_to_event(row),
                created_by_name=names.get(row.created_by_id, ""),
                categories=tuple(_to_category(c) for c in row.categories.all()),
                registrant_ids=frozenset(UserId(r.user_id) for r in row.registrations.all()),
            )
            for row in rows
        ]


def _display_names(user_ids: set[str]) -> dict[str, str]:
    """Map user ids to "first last" names via the auth user model."""
    if not user_ids:
        return {}
    User = get_user_model()
    username_field = User.USERNAME_FIELD
    users = User.objects.filter(**{f"{username_field}__in": user_ids})
    return {
        getattr(user, username_field): f"{user.first_name} {user.last_name}".strip()
        for user in users
    }


def _to_event(row: models.Event) -> Event:
    return Event(
        id=EventId(row.pk),
        title=row.title,
        description=row.description,
        event_date=row.event_date,
        capacity=Capacity(row.capacity),
        is_private=row.is_private,
        address=row.address,
        created_at=row.created_at,
        created_by_id=UserId(row.created_by_id),
    )


def _to_category(row: models.Category) -> Category:
    return Category(
        id=CategoryId(row.pk),
        name=row.name,
        color=row.color,
        icon=row.icon,
    )
