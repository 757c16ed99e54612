from django.urls import path
from .views import CalendarEventDetailView, CalendarEventListView, UpcomingEventsView

urlpatterns = [
    path("events/", CalendarEventListView.as_view(), name="calendar-event-list"),
    path("events/upcoming/", UpcomingEventsView.as_view(), name="calendar-event-upcoming"),
    path("events/<str:event_id>/", CalendarEventDetailView.as_view(), name="calendar-event-detail"),
]
