"""Settings for the events app, read from the EVENTS dict in Django settings."""

from django.conf import settings

DEFAULTS = {
    "STORE": "events.stores.django_store.DjangoEventStore",
    "DEFAULT_PAGE_SIZE": 20,
    "MAX_PAGE_SIZE": 100,
    "ALLOW_IDENTITY_OVERRIDE": True,
    "ANONYMOUS_OWNER_ID": "anonymous",
    "CATEGORY_CACHE_TIMEOUT": 300,
}


class EventsSettings:
    """Lazy view of settings.EVENTS merged over DEFAULTS."""

    def __getattr__(self, name: str):
        if name not in DEFAULTS:
            raise AttributeError(f"Invalid events setting: {name!r}")
        return getattr(settings, "EVENTS", {}).get(name, DEFAULTS[name])


events_settings = EventsSettings()
