from django.apps import AppConfig


class EventsConfig(AppConfig):
    """Configuration for the events application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "events"
    verbose_name = "Events"

    def ready(self) -> None:
        from events import signals  # noqa: F401
