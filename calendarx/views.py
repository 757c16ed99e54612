from datetime import timedelta

from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from rest_framework import status
from django.utils import timezone
from django.utils.dateparse import parse_date

from core.constants import DOMAIN_CALENDAR_EVENTS
from core.views import WorkspaceMixin, api_error
from .providers import fetch_provider_events, get_calendar_provider
from .serializers import CalendarEventSerializer


class CalendarEventListView(WorkspaceMixin, APIView):
    """
    GET  /api/calendar/events/                   -> own events
    GET  /api/calendar/events/?date=2026-05-14   -> own + provider events of that day
    POST /api/calendar/events/
    """
    permission_classes = [IsAuthenticated]
    workspace_domains = (DOMAIN_CALENDAR_EVENTS,)

    def get(self, request):
        events = self.get_workspace()[DOMAIN_CALENDAR_EVENTS]

        raw_day = request.query_params.get("date")
        if not raw_day:
            return Response(CalendarEventSerializer(events.all(), many=True).data)

        day = parse_date(raw_day)
        if day is None:
            return api_error("date must be YYYY-MM-DD")

        provider_events = fetch_provider_events(
            get_calendar_provider(),
            events.user_id,
            day,
            day + timedelta(days=1),
        )
        merged = events.events_on(day, provider_events)
        return Response(CalendarEventSerializer(merged, many=True).data)

    def post(self, request):
        serializer = CalendarEventSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = self.get_workspace()[DOMAIN_CALENDAR_EVENTS].create(serializer.validated_data)
        return Response(CalendarEventSerializer(event).data, status=status.HTTP_201_CREATED)


class CalendarEventDetailView(WorkspaceMixin, APIView):
    permission_classes = [IsAuthenticated]
    workspace_domains = (DOMAIN_CALENDAR_EVENTS,)

    def patch(self, request, event_id):
        serializer = CalendarEventSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        event = self.get_workspace()[DOMAIN_CALENDAR_EVENTS].update(event_id, serializer.validated_data)
        if event is None:
            return api_error("Event not found", status.HTTP_404_NOT_FOUND)
        return Response(CalendarEventSerializer(event).data)

    def delete(self, request, event_id):
        events = self.get_workspace()[DOMAIN_CALENDAR_EVENTS]
        if events.get(event_id) is None:
            return api_error("Event not found", status.HTTP_404_NOT_FOUND)
        events.remove(event_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class UpcomingEventsView(WorkspaceMixin, APIView):
    """GET /api/calendar/events/upcoming/?days=7"""
    permission_classes = [IsAuthenticated]
    workspace_domains = (DOMAIN_CALENDAR_EVENTS,)

    def get(self, request):
        try:
            days = int(request.query_params.get("days", 7))
        except ValueError:
            return api_error("days must be a number")

        today = timezone.now().date()
        events = self.get_workspace()[DOMAIN_CALENDAR_EVENTS].between(today, today + timedelta(days=days))
        return Response(CalendarEventSerializer(events, many=True).data)
