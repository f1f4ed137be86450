"""Serializers for parsing API input and rendering domain models."""

from rest_framework import serializers

from events.conf import events_settings


class CategorySerializer(serializers.Serializer):
    """Serializer for CategorySummary domain model."""

    id = serializers.IntegerField()
    name = serializers.CharField()
    color = serializers.CharField()
    icon = serializers.CharField(allow_null=True)


class EventSerializer(serializers.Serializer):
    """Serializer for EventSummary domain model."""

    id = serializers.IntegerField()
    title = serializers.CharField()
    description = serializers.CharField()
    event_date = serializers.DateTimeField()
    capacity = serializers.IntegerField()
    is_private = serializers.BooleanField()
    address = serializers.CharField(allow_null=True)
    created_at = serializers.DateTimeField()
    created_by_id = serializers.CharField()
    created_by_name = serializers.CharField()
    registrations_count = serializers.IntegerField()
    spots_left = serializers.IntegerField(allow_null=True)
    categories = CategorySerializer(many=True)
    is_registered = serializers.BooleanField()


class PaginatedEventSerializer(serializers.Serializer):
    """Serializer for a PaginatedResult of events."""

    items = EventSerializer(many=True)
    total_count = serializers.IntegerField()
    page = serializers.IntegerField()
    page_size = serializers.IntegerField()
    total_pages = serializers.IntegerField()


class PageQuerySerializer(serializers.Serializer):
    """Validates ?page=&page_size= query parameters."""

    page = serializers.IntegerField(min_value=1, default=1)
    page_size = serializers.IntegerField(min_value=1, required=False)

    def validate_page_size(self, value: int) -> int:
        return min(value, events_settings.MAX_PAGE_SIZE)


class EventCreateSerializer(serializers.Serializer):
    """Validates the body of POST /api/events."""

    title = serializers.CharField(max_length=200)
    description = serializers.CharField(max_length=2000, allow_blank=True, default="")
    event_date = serializers.DateTimeField()
    capacity = serializers.IntegerField(default=0)
    is_private = serializers.BooleanField(default=False)
    address = serializers.CharField(
        max_length=500, allow_blank=True, allow_null=True, default=None
    )
    category_ids = serializers.ListField(
        child=serializers.IntegerField(min_value=1), default=list
    )
    created_by_id = serializers.CharField(
        max_length=150, allow_null=True, allow_blank=True, default=None
    )


class RegistrationSerializer(serializers.Serializer):
    """Validates the optional body of POST /api/events/{id}/register."""

    user_id = serializers.CharField(
        max_length=150, allow_null=True, allow_blank=True, default=None
    )
