import json
from datetime import date
from unittest.mock import patch

from django.contrib.auth import get_user_model
from django.test import TestCase
from django.utils import timezone

from core.backends import OrmBackend
from core.constants import DOMAIN_FESTIVALS
from core.exceptions import BackendError
from core.storage import MemoryKeyValueStore
from core.tests.helpers import build_workspace
from festivals.models import Festival
from festivals.tasks import rollover_festivals

User = get_user_model()


class FestivalStoreTestCase(TestCase):
    def setUp(self):
        self.year = timezone.now().year

    def test_defaults_without_identity(self):
        festivals = build_workspace(OrmBackend())[DOMAIN_FESTIVALS]

        self.assertEqual(len(festivals), 12)
        self.assertEqual({f["year"] for f in festivals.all()}, {self.year, self.year + 1})
        self.assertFalse(Festival.objects.exists())

    def test_defaults_are_saved_for_a_new_user(self):
        festivals = build_workspace(OrmBackend(), user_id="u1")[DOMAIN_FESTIVALS]

        self.assertEqual(len(festivals), 12)
        self.assertEqual(Festival.objects.filter(owner_id="u1").count(), 12)

        # Loading again reads the saved rows instead of generating more
        build_workspace(OrmBackend(), user_id="u1")
        self.assertEqual(Festival.objects.filter(owner_id="u1").count(), 12)

    def test_read_failure_falls_back_to_unsaved_defaults(self):
        with patch.object(OrmBackend, "select_all", side_effect=BackendError("db down")):
            festivals = build_workspace(OrmBackend(), user_id="u1")[DOMAIN_FESTIVALS]

        self.assertEqual(len(festivals), 12)
        self.assertFalse(Festival.objects.exists())

    def test_device_festivals_are_migrated(self):
        device = MemoryKeyValueStore({
            "festivals_u1": json.dumps([{
                "id": "cannes-2030",
                "name": "Cannes Film Festival",
                "region": "europe",
                "year": 2030,
                "filmSubmissionDeadline": "2030-03-15",
                "producersHubDeadline": "2030-04-01",
                "festivalStartDate": "2030-05-14",
                "festivalEndDate": "2030-05-25",
                "numberOfDays": 12,
            }]),
        })

        build_workspace(OrmBackend(), local_store=device, user_id="u1")

        self.assertTrue(Festival.objects.filter(owner_id="u1", record_id="cannes-2030").exists())

    def test_roll_forward(self):
        festivals = build_workspace(OrmBackend(), user_id="u1")[DOMAIN_FESTIVALS]

        with self.assertLogs("studio.festivals", level="INFO"):
            added, dropped = festivals.roll_forward(today=date(self.year + 2, 1, 10))

        self.assertEqual((added, dropped), (12, 12))
        self.assertEqual({f["year"] for f in festivals.all()}, {self.year + 2, self.year + 3})
        self.assertEqual(Festival.objects.filter(owner_id="u1").count(), 12)

    def test_for_project(self):
        workspace = build_workspace(OrmBackend(), user_id="u1")
        festivals = workspace[DOMAIN_FESTIVALS]

        europe = festivals.for_project({"country": "España"})

        self.assertEqual(len(europe), 6)
        self.assertTrue(all(f["region"] == "europe" for f in europe))
        self.assertEqual(festivals.for_project({"country": "Atlantis"}), [])

    def test_ordered_by_start_date(self):
        festivals = build_workspace(OrmBackend())[DOMAIN_FESTIVALS]
        starts = [f["festival_start_date"] for f in festivals.all()]
        self.assertEqual(starts, sorted(starts))


class RolloverTaskTestCase(TestCase):
    def test_single_user(self):
        self.assertEqual(rollover_festivals(user_id="u9"), 1)
        self.assertEqual(Festival.objects.filter(owner_id="u9").count(), 12)

    def test_every_active_user(self):
        User.objects.create_user(username="ana", password="pw12345!")
        User.objects.create_user(username="luis", password="pw12345!", is_active=False)
        eva = User.objects.create_user(username="eva", password="pw12345!", supabase_id="sb-eva")

        self.assertEqual(rollover_festivals(), 2)
        self.assertTrue(Festival.objects.filter(owner_id=str(eva.pk)).exists())
