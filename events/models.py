"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
Users are referenced by their identity-provider id (the auth username), not
by foreign key, so an owner without a user row is representable.
"""

from django.db import models


class Category(models.Model):
    """Persistence model for event categories."""

    name = models.CharField(max_length=100)
    color = models.CharField(max_length=20, default="#3B82F6")
    icon = models.CharField(max_length=50, blank=True, null=True)

    class Meta:
        ordering = ["id"]
        verbose_name_plural = "categories"

    def __str__(self) -> str:
        return self.name


class Event(models.Model):
    """Persistence model for events."""

    title = models.CharField(max_length=200)
    description = models.TextField(max_length=2000, blank=True, default="")
    event_date = models.DateTimeField()
    capacity = models.IntegerField(default=0)
    is_private = models.BooleanField(default=False)
    address = models.CharField(max_length=500, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    created_by_id = models.CharField(max_length=150, db_index=True)
    categories = models.ManyToManyField(
        Category, through="EventCategory", related_name="events", blank=True
    )

    class Meta:
        ordering = ["-event_date", "id"]
        indexes = [
            models.Index(fields=["-event_date", "id"]),
        ]

    def __str__(self) -> str:
        return self.title


class EventCategory(models.Model):
    """Association between an event and a category."""

    event = models.ForeignKey(
        Event, on_delete=models.CASCADE, related_name="event_categories"
    )
    category = models.ForeignKey(
        Category, on_delete=models.CASCADE, related_name="event_categories"
    )

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=["event", "category"], name="unique_event_category"
            ),
        ]

    def __str__(self) -> str:
        return f"{self.event_id} - {self.category_id}"


class Registration(models.Model):
    """Persistence model for a user's registration on an event."""

    event = models.ForeignKey(
        Event, on_delete=models.CASCADE, related_name="registrations"
    )
    user_id = models.CharField(max_length=150)
    registration_date = models.DateTimeField(auto_now_add=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=["event", "user_id"], name="unique_event_registration"
            ),
        ]
        indexes = [
            models.Index(fields=["user_id"]),
        ]

    def __str__(self) -> str:
        return f"{self.user_id} - {self.event_id}"
