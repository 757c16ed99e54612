from datetime import date, datetime

from django.conf import settings
from django.contrib.auth import get_user_model
from django.test import SimpleTestCase, TestCase
from django.urls import reverse
from rest_framework.test import APIClient

from calendarx.providers import fetch_provider_events, get_calendar_provider, normalize_provider_event

User = get_user_model()


class StaticProvider:
    def list_events(self, user_id, start, end):
        return [
            {"id": "abc", "summary": "Tech scout", "start": {"dateTime": "2026-05-14T10:30:00"}},
            {"id": "def", "start": {"date": "2026-05-14"}},
            {"id": "ghi", "summary": "Next day", "start": {"date": "2026-05-15"}},
        ]


class BrokenProvider:
    def list_events(self, user_id, start, end):
        raise ConnectionError("calendar API down")


class NormalizeTestCase(SimpleTestCase):
    def test_timed_event(self):
        event = normalize_provider_event(
            {"id": "abc", "summary": "Tech scout", "start": {"dateTime": "2026-05-14T10:30:00"}}
        )

        self.assertEqual(event["id"], "google_abc")
        self.assertEqual(event["date"], datetime(2026, 5, 14, 10, 30))
        self.assertEqual(event["time"], "10:30")
        self.assertEqual(event["type"], "other")
        self.assertTrue(event["provider"])

    def test_all_day_event_without_title(self):
        event = normalize_provider_event({"id": "x", "start": {"date": "2026-05-14"}})

        self.assertEqual(event["title"], "Untitled Event")
        self.assertEqual(event["date"], datetime(2026, 5, 14))
        self.assertEqual(event["time"], "")

    def test_unavailable_provider_yields_nothing(self):
        with self.assertLogs("studio.calendar", level="WARNING"):
            events = fetch_provider_events(BrokenProvider(), "u1", date(2026, 5, 14), date(2026, 5, 15))
        self.assertEqual(events, [])

    def test_no_provider_configured(self):
        self.assertIsNone(get_calendar_provider())
        self.assertEqual(fetch_provider_events(None, "u1", date(2026, 5, 14), date(2026, 5, 15)), [])


class CalendarAPITestCase(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.user = User.objects.create_user(username="maria", password="pw12345!")
        self.client.force_authenticate(user=self.user)
        self.url = reverse("calendar-event-list")

    def test_day_view_merges_provider_events(self):
        self.client.post(
            self.url,
            {"title": "Read-through", "date": "2026-05-14T09:00:00", "time": "09:00", "type": "meeting"},
            format="json",
        )
        self.client.post(self.url, {"title": "Other day", "date": "2026-05-20T09:00:00"}, format="json")

        provider = "calendarx.tests.test_providers.StaticProvider"
        with self.settings(SYNC={**settings.SYNC, "CALENDAR_PROVIDER": provider}):
            response = self.client.get(self.url, {"date": "2026-05-14"})

        self.assertEqual(
            [e["title"] for e in response.data],
            ["Read-through", "Tech scout", "Untitled Event"],
        )
        self.assertEqual([e["provider"] for e in response.data], [False, True, True])

    def test_broken_provider_still_returns_own_events(self):
        self.client.post(self.url, {"title": "Read-through", "date": "2026-05-14T09:00:00"}, format="json")

        provider = "calendarx.tests.test_providers.BrokenProvider"
        with self.settings(SYNC={**settings.SYNC, "CALENDAR_PROVIDER": provider}):
            response = self.client.get(self.url, {"date": "2026-05-14"})

        self.assertEqual([e["title"] for e in response.data], ["Read-through"])

    def test_bad_date(self):
        self.assertEqual(self.client.get(self.url, {"date": "tomorrow"}).status_code, 400)
