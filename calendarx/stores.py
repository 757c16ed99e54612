# calendarx/stores.py
from datetime import datetime

from core.store import DomainStore


def _day(value):
    if isinstance(value, datetime):
        return value.date()
    return value


class CalendarEventStore(DomainStore):
    def order(self, records):
        return sorted(records, key=lambda e: (e.get("date") or datetime.min, e.get("time", "")))

    def events_on(self, day, provider_events=()):
        """Own events on ``day`` followed by the provider events of that day."""
        own = self.filter(lambda e: _day(e.get("date")) == day)
        return own + [e for e in provider_events if _day(e.get("date")) == day]

    def between(self, start, end):
        """Own events whose day falls within ``start..end`` (inclusive)."""
        return self.filter(lambda e: e.get("date") is not None and start <= _day(e["date"]) <= end)
