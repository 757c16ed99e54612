import json
from datetime import date, datetime, timedelta

from django.contrib.auth import get_user_model
from django.test import TestCase
from django.urls import reverse
from django.utils import timezone
from rest_framework.test import APIClient

from core.backends import OrmBackend
from core.constants import DOMAIN_CALENDAR_EVENTS
from core.storage import MemoryKeyValueStore
from core.tests.helpers import build_workspace

User = get_user_model()


class CalendarEventStoreTestCase(TestCase):
    def test_legacy_events_are_upgraded(self):
        device = MemoryKeyValueStore({
            "calendarEvents_u1": json.dumps([
                {"id": "e1", "title": "Shoot day", "date": "2026-05-14T07:00:00.000Z", "type": "rodaje"},
                {"id": "e2", "title": "Delivery", "date": "2026-05-10T00:00:00.000Z", "type": "entrega"},
            ]),
        })

        events = build_workspace(OrmBackend(), local_store=device, user_id="u1")[DOMAIN_CALENDAR_EVENTS]

        self.assertEqual([e["id"] for e in events.all()], ["e2", "e1"])
        self.assertEqual(events.get("e1")["type"], "shoot")
        self.assertEqual(events.get("e2")["type"], "delivery")

    def test_events_on_and_between(self):
        events = build_workspace(OrmBackend(), user_id="u1")[DOMAIN_CALENDAR_EVENTS]
        events.create({"title": "A", "date": datetime(2026, 5, 14, 9)})
        events.create({"title": "B", "date": datetime(2026, 5, 16, 9)})
        provider = [{"id": "google_x", "title": "P", "date": datetime(2026, 5, 14, 12), "provider": True}]

        self.assertEqual([e["title"] for e in events.events_on(date(2026, 5, 14), provider)], ["A", "P"])
        self.assertEqual(
            [e["title"] for e in events.between(date(2026, 5, 14), date(2026, 5, 16))],
            ["A", "B"],
        )
        self.assertEqual(events.between(date(2026, 5, 17), date(2026, 5, 20)), [])


class CalendarEventAPITestCase(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.user = User.objects.create_user(username="maria", password="pw12345!")
        self.client.force_authenticate(user=self.user)
        self.url = reverse("calendar-event-list")

    def test_crud(self):
        response = self.client.post(
            self.url, {"title": "Wrap party", "date": "2026-07-01T20:00:00", "time": "20:00"}, format="json"
        )
        self.assertEqual(response.status_code, 201, response.data)
        self.assertEqual(response.data["type"], "other")
        self.assertFalse(response.data["provider"])

        detail = reverse("calendar-event-detail", args=[response.data["id"]])
        response = self.client.patch(detail, {"type": "delivery"}, format="json")
        self.assertEqual(response.data["type"], "delivery")

        self.assertEqual(self.client.delete(detail).status_code, 204)
        self.assertEqual(self.client.get(self.url).data, [])

    def test_invalid_time(self):
        response = self.client.post(
            self.url, {"title": "Wrap party", "date": "2026-07-01T20:00:00", "time": "25:00"}, format="json"
        )
        self.assertEqual(response.status_code, 400)

    def test_upcoming(self):
        soon = timezone.now() + timedelta(days=2)
        later = timezone.now() + timedelta(days=30)
        self.client.post(self.url, {"title": "Soon", "date": soon.isoformat()}, format="json")
        self.client.post(self.url, {"title": "Later", "date": later.isoformat()}, format="json")

        response = self.client.get(reverse("calendar-event-upcoming"), {"days": 7})

        self.assertEqual([e["title"] for e in response.data], ["Soon"])
