from events.handlers.views import (
    CategoryEventListView,
    CategoryListView,
    EventDetailView,
    EventListView,
    EventRegistrationView,
    UserEventListView,
)

__all__ = [
    "CategoryEventListView",
    "CategoryListView",
    "EventDetailView",
    "EventListView",
    "EventRegistrationView",
    "UserEventListView",
]
