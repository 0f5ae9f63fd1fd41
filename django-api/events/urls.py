from django.urls import path

from events.handlers.views import (
    EventDetailView,
    EventListView,
    EventRegisterView,
    EventUnregisterView,
)

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path("events/<str:event_id>/register", EventRegisterView.as_view(), name="event-register"),
    path(
        "events/<str:event_id>/unregister",
        EventUnregisterView.as_view(),
        name="event-unregister",
    ),
]
