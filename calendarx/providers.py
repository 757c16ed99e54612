# calendarx/providers.py
"""
External calendar providers.

A provider hands back events in the Google Calendar API shape
(``{"id", "summary", "start": {"dateTime" | "date"}}``). They are merged
with the user's own events when read and never stored.
"""
import logging
from typing import Iterable, Protocol

from django.conf import settings
from django.utils.module_loading import import_string

from core.codecs import to_date, to_datetime
from .models import CalendarEvent

logger = logging.getLogger("studio.calendar")

PROVIDER_PREFIX = "google_"


class CalendarProvider(Protocol):
    def list_events(self, user_id, start, end) -> Iterable[dict]:
        ...


def normalize_provider_event(event):
    """Map one provider event onto the calendar record shape."""
    start = event.get("start") or {}
    if start.get("dateTime"):
        when = to_datetime(start["dateTime"])
        time = when.strftime("%H:%M")
    elif start.get("date"):
        when = to_datetime(to_date(start["date"]))
        time = ""
    else:
        when = None
        time = ""

    return {
        "id": f"{PROVIDER_PREFIX}{event.get('id') or ''}",
        "title": event.get("summary") or "Untitled Event",
        "date": when,
        "time": time,
        "type": CalendarEvent.TYPE_OTHER,
        "provider": True,
    }


def get_calendar_provider():
    """The provider named by ``SYNC["CALENDAR_PROVIDER"]`` (a dotted path), or None."""
    path = settings.SYNC.get("CALENDAR_PROVIDER")
    if not path:
        return None
    return import_string(path)()


def fetch_provider_events(provider, user_id, start, end):
    """Provider events between ``start`` and ``end``; an unreachable provider yields none."""
    if provider is None:
        return []
    try:
        events = list(provider.list_events(user_id, start, end))
    except Exception as e:
        logger.warning(f"Calendar provider unavailable for user {user_id}: {e}")
        return []
    return [normalize_provider_event(e) for e in events]
