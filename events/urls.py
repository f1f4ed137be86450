from django.urls import path

from events.handlers import (
    CategoryEventListView,
    CategoryListView,
    EventDetailView,
    EventListView,
    EventRegistrationView,
    UserEventListView,
)

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/categories", CategoryListView.as_view(), name="category-list"),
    path(
        "events/categories/<str:category_id>",
        CategoryEventListView.as_view(),
        name="category-event-list",
    ),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path(
        "events/<str:event_id>/register",
        EventRegistrationView.as_view(),
        name="event-registration",
    ),
    path("users/<str:user_id>/events", UserEventListView.as_view(), name="user-event-list"),
]
