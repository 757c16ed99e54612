# calendarx/domains.py
from core.constants import DOMAIN_CALENDAR_EVENTS
from core.domains import Domain, registry

from .stores import CalendarEventStore

CALENDAR_EVENTS = registry.register(Domain(
    name=DOMAIN_CALENDAR_EVENTS,
    storage_key="calendarEvents",
    table="calendar_events",
    model="calendarx.CalendarEvent",
    fields=("title", "date", "time", "project_id", "type"),
    types={"date": "datetime"},
    defaults={"type": "other"},
    optional={"time": "", "project_id": ""},
    value_maps={
        "type": {
            "rodaje": "shoot",
            "reunion": "meeting",
            "entrega": "delivery",
            "otro": "other",
        },
    },
    store_class=CalendarEventStore,
))
