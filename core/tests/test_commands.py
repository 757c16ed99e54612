import json
from io import StringIO

from django.conf import settings
from django.core.management import CommandError, call_command
from django.test import TestCase

from core.storage import get_local_store
from projects.models import Project


class SyncLocalDataCommandTestCase(TestCase):
    def setUp(self):
        self.store = get_local_store()
        self.store.set("projects_u1", json.dumps([{
            "id": "p1",
            "title": "El Camino",
            "createdAt": "2024-01-10T09:30:00.000Z",
            "updatedAt": "2024-01-10T09:30:00.000Z",
        }]))

    def test_migrates_once(self):
        out = StringIO()
        call_command("sync_local_data", "u1", stdout=out)

        self.assertIn("projects: 1 record(s) copied", out.getvalue())
        self.assertEqual(Project.objects.filter(owner_id="u1").count(), 1)

        call_command("sync_local_data", "u1", stdout=StringIO())
        self.assertEqual(Project.objects.filter(owner_id="u1").count(), 1)

    def test_clear(self):
        call_command("sync_local_data", "u1", "--clear", stdout=StringIO())

        self.assertIsNone(self.store.get("projects_u1"))
        self.assertFalse(Project.objects.exists())

    def test_requires_a_remote(self):
        with self.settings(SYNC={**settings.SYNC, "REMOTE_BACKEND": ""}):
            with self.assertRaises(CommandError):
                call_command("sync_local_data", "u1", stdout=StringIO())
