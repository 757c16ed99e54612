import json
from datetime import date, datetime
from decimal import Decimal
from unittest.mock import patch

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.test import SimpleTestCase, TestCase

from core.backends import LocalBackend, OrmBackend, SupabaseBackend, get_backends
from core.domains import registry
from core.exceptions import BackendError, CorruptPayload, IdentityRequired
from core.storage import MemoryKeyValueStore
from projects.models import Project
from .helpers import FakeSupabase


def project_record(record_id, title="Short film"):
    now = datetime(2024, 5, 1, 12, 0)
    return {
        "id": record_id,
        "title": title,
        "status": "pre-production",
        "category": "originals",
        "subcategory": "short-film",
        "created_at": now,
        "updated_at": now,
    }


def task_record(record_id, project_id="p1", **extra):
    record = {
        "id": record_id,
        "project_id": project_id,
        "description": "Location scouting",
        "assigned_to": ["c1"],
        "start_date": date(2024, 3, 1),
        "end_date": date(2024, 3, 5),
        "status": "pending",
    }
    record.update(extra)
    return record


class LocalBackendTestCase(SimpleTestCase):
    def setUp(self):
        self.store = MemoryKeyValueStore()
        self.backend = LocalBackend(self.store)
        self.tasks = registry.get("tasks")

    def test_project_scoped_payload_is_keyed_by_project(self):
        self.backend.insert(self.tasks, "u1", [task_record("t1"), task_record("t2", "p2")])

        payload = json.loads(self.store.get("tasks_u1"))
        self.assertEqual(sorted(payload), ["p1", "p2"])
        self.assertEqual(payload["p1"][0]["assignedTo"], ["c1"])
        self.assertEqual(payload["p1"][0]["endDate"], "2024-03-05")

        records = self.backend.select_all(self.tasks, "u1", project_id="p2")
        self.assertEqual([r["id"] for r in records], ["t2"])
        self.assertEqual(records[0]["end_date"], date(2024, 3, 5))

    def test_single_record_domain_keeps_one_per_project(self):
        directors = registry.get("directors")
        self.backend.insert(directors, "u1", [{"id": "d1", "project_id": "p1", "name": "Ana"}])
        self.backend.insert(directors, "u1", [{"id": "d2", "project_id": "p1", "name": "Luis"}])

        payload = json.loads(self.store.get("directors_u1"))
        self.assertEqual(payload["p1"]["name"], "Luis")
        self.assertEqual(len(self.backend.select_all(directors, "u1")), 1)

    def test_legacy_collaborator_payload(self):
        self.store.set("collaborators_u1", json.dumps({
            "p1": [{"id": "c1", "name": "Ana", "category": "studios", "language": ["es"], "phone": ""}],
        }))

        [collaborator] = self.backend.select_all(registry.get("collaborators"), "u1")

        self.assertEqual(collaborator["project_id"], "p1")
        self.assertEqual(collaborator["languages"], ["es"])
        self.assertNotIn("phone", collaborator)

    def test_legacy_task_values_are_upgraded(self):
        self.store.set("tasks_u1", json.dumps({
            "p1": [{
                "id": "t1",
                "description": "Scout",
                "assignedTo": "c1",
                "startDate": "2024-03-01T00:00:00.000Z",
                "endDate": "2024-03-05T00:00:00.000Z",
                "status": "pendiente",
            }],
        }))

        [task] = self.backend.select_all(self.tasks, "u1")

        self.assertEqual(task["assigned_to"], ["c1"])
        self.assertEqual(task["start_date"], date(2024, 3, 1))
        self.assertEqual(task["status"], "pending")

    def test_unparseable_payload_raises_corrupt_payload(self):
        self.store.set("projects_u1", "{not json")
        with self.assertRaises(CorruptPayload):
            self.backend.select_all(registry.get("projects"), "u1")

    def test_write_over_unparseable_payload_replaces_it(self):
        projects = registry.get("projects")
        self.store.set("projects_u1", "{not json")

        self.backend.insert(projects, "u1", [project_record("p1")])

        self.assertEqual([p["id"] for p in self.backend.select_all(projects, "u1")], ["p1"])

    def test_seed_creates_an_empty_partition(self):
        self.backend.seed(self.tasks, "u1", "p9")
        self.assertEqual(json.loads(self.store.get("tasks_u1")), {"p9": []})
        self.assertFalse(self.backend.exists(self.tasks, "u1"))

    def test_delete_where_drops_the_partition(self):
        self.backend.insert(self.tasks, "u1", [task_record("t1"), task_record("t2")])
        self.assertEqual(self.backend.delete_where(self.tasks, "u1", "p1"), 2)
        self.assertEqual(json.loads(self.store.get("tasks_u1")), {})


class OrmBackendTestCase(TestCase):
    def setUp(self):
        self.backend = OrmBackend()
        self.projects = registry.get("projects")

    def test_rows_are_isolated_per_owner(self):
        self.backend.insert(self.projects, "u1", [project_record("p1")])
        self.backend.insert(self.projects, "u2", [project_record("p1", "Other")])

        [mine] = self.backend.select_all(self.projects, "u1")
        self.assertEqual(mine["title"], "Short film")
        self.assertEqual(Project.objects.count(), 2)

    def test_requires_identity(self):
        with self.assertRaises(IdentityRequired):
            self.backend.select_all(self.projects, None)

    def test_update_and_delete(self):
        self.backend.insert(self.projects, "u1", [project_record("p1")])

        updated = self.backend.update(self.projects, "u1", "p1", {"title": "Feature"})
        self.assertEqual(updated["title"], "Feature")
        self.assertIsNone(self.backend.update(self.projects, "u1", "missing", {"title": "x"}))
        self.assertIsNone(self.backend.update(self.projects, "u2", "p1", {"title": "x"}))

        self.assertTrue(self.backend.delete(self.projects, "u1", "p1"))
        self.assertFalse(self.backend.exists(self.projects, "u1"))

    def test_delete_where_only_touches_the_project(self):
        tasks = registry.get("tasks")
        self.backend.insert(tasks, "u1", [task_record("t1"), task_record("t2", "p2")])

        self.assertEqual(self.backend.delete_where(tasks, "u1", "p1"), 1)
        self.assertEqual([t["id"] for t in self.backend.select_all(tasks, "u1")], ["t2"])


class SupabaseBackendTestCase(SimpleTestCase):
    def setUp(self):
        self.client = FakeSupabase()
        self.backend = SupabaseBackend(client=self.client)
        self.budgets = registry.get("budgets")

    def test_rows_are_flattened_and_decoded(self):
        item = {
            "id": "b1",
            "project_id": "p1",
            "category": "crew",
            "description": "",
            "amount": Decimal("100.50"),
            "status": "approved",
        }
        self.backend.insert(self.budgets, "u1", [item])

        row = self.client.tables["budget_items"][0]
        self.assertEqual(row["owner_id"], "u1")
        self.assertEqual(row["amount"], "100.50")

        [record] = self.backend.select_all(self.budgets, "u1")
        self.assertEqual(record["amount"], Decimal("100.50"))
        self.assertNotIn("owner_id", record)
        self.assertEqual(self.backend.select_all(self.budgets, "u2"), [])

    def test_update_and_delete_filter_by_owner(self):
        tasks = registry.get("tasks")
        self.backend.insert(tasks, "u1", [task_record("t1")])

        self.assertIsNone(self.backend.update(tasks, "u2", "t1", {"status": "completed"}))
        updated = self.backend.update(tasks, "u1", "t1", {"status": "completed"})
        self.assertEqual(updated["status"], "completed")

        self.assertFalse(self.backend.delete(tasks, "u2", "t1"))
        self.assertTrue(self.backend.delete(tasks, "u1", "t1"))

    def test_failure_becomes_backend_error(self):
        self.client.fail = True
        with self.assertRaises(BackendError):
            self.backend.exists(self.budgets, "u1")

    @patch("core.backends.get_supabase_client", return_value=None)
    def test_missing_client_is_a_backend_error(self, _client):
        with self.assertRaises(BackendError):
            SupabaseBackend().select_all(self.budgets, "u1")


class GetBackendsTestCase(SimpleTestCase):
    def test_local_only(self):
        with self.settings(SYNC={**settings.SYNC, "REMOTE_BACKEND": ""}):
            remote, local = get_backends()
        self.assertIsNone(remote)
        self.assertIsInstance(local, LocalBackend)

    def test_supabase(self):
        with self.settings(SYNC={**settings.SYNC, "REMOTE_BACKEND": "supabase"}):
            remote, _ = get_backends()
        self.assertIsInstance(remote, SupabaseBackend)

    def test_unknown_backend(self):
        with self.settings(SYNC={**settings.SYNC, "REMOTE_BACKEND": "ftp"}):
            with self.assertRaises(ImproperlyConfigured):
                get_backends()
