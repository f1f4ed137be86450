from django.utils.module_loading import import_string

from events.conf import events_settings
from events.stores.interfaces import EventCriteria, EventStore


def get_event_store() -> EventStore:
    """Build a new instance of the store named by EVENTS["STORE"].

    Nothing is cached here. State lives in the store's backend, so each
    request gets its own handle.
    """
    return import_string(events_settings.STORE)()


__all__ = ["EventCriteria", "EventStore", "get_event_store"]
