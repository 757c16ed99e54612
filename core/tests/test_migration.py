import json
from datetime import date
from decimal import Decimal
from unittest.mock import patch

from django.test import TestCase

from core.backends import LocalBackend, OrmBackend
from core.domains import registry
from core.exceptions import BackendError
from core.migration import MigrationCoordinator
from core.storage import MemoryKeyValueStore
from projects.models import BudgetItem, Project, Task
from .helpers import build_workspace

LEGACY_PROJECTS = [
    {
        "id": "p1",
        "title": "El Camino",
        "status": "pre-produccion",
        "category": "originals",
        "subcategory": "feature-film",
        "createdAt": "2024-01-10T09:30:00.000Z",
        "updatedAt": "2024-01-11T09:30:00.000Z",
    },
    {
        "id": "p2",
        "title": "La Playa",
        "status": "produccion",
        "category": "originals",
        "subcategory": "short-film",
        "createdAt": "2024-02-10T09:30:00.000Z",
        "updatedAt": "2024-02-10T09:30:00.000Z",
    },
]


class MigrationTestCase(TestCase):
    def setUp(self):
        self.device = MemoryKeyValueStore({
            "projects_u1": json.dumps(LEGACY_PROJECTS),
            "tasks_u1": json.dumps({
                "p1": [{
                    "id": "t1",
                    "description": "Casting",
                    "assignedTo": "c1",
                    "startDate": "2024-03-01T00:00:00.000Z",
                    "endDate": "2024-03-05T00:00:00.000Z",
                    "status": "en-progreso",
                }],
                "p2": [],
            }),
            "budgets_u1": json.dumps({
                "p1": [{"id": "b1", "category": "crew", "amount": 1200.5, "status": "aprobado"}],
            }),
        })

    def test_device_records_are_copied_once(self):
        workspace = build_workspace(OrmBackend(), local_store=self.device, user_id="u1")

        self.assertEqual(Project.objects.filter(owner_id="u1").count(), 2)
        self.assertEqual(
            sorted(p["status"] for p in workspace.projects.all()),
            ["pre-production", "production"],
        )

        # A device edit after migration must not be copied again
        self.device.set("projects_u1", json.dumps(LEGACY_PROJECTS + [dict(LEGACY_PROJECTS[0], id="p3")]))
        again = build_workspace(OrmBackend(), local_store=self.device, user_id="u1")

        self.assertEqual(Project.objects.filter(owner_id="u1").count(), 2)
        self.assertEqual(len(again.projects), 2)

    def test_legacy_values_are_upgraded(self):
        workspace = build_workspace(OrmBackend(), local_store=self.device, user_id="u1")

        [task] = workspace["tasks"].for_project("p1")
        self.assertEqual(task["assigned_to"], ["c1"])
        self.assertEqual(task["status"], "in-progress")
        self.assertEqual(task["start_date"], date(2024, 3, 1))

        row = Task.objects.get(owner_id="u1", record_id="t1")
        self.assertEqual(row.project_id, "p1")
        self.assertEqual(BudgetItem.objects.get(owner_id="u1").amount, Decimal("1200.50"))

    def test_legacy_task_without_assignees(self):
        self.device.set("tasks_u1", json.dumps({
            "p1": [{
                "id": "t2",
                "description": "Scout locations",
                "startDate": "2024-04-01T00:00:00.000Z",
                "endDate": "2024-04-02T00:00:00.000Z",
                "status": "pendiente",
            }],
        }))

        workspace = build_workspace(OrmBackend(), local_store=self.device, user_id="u1")

        [task] = workspace["tasks"].for_project("p1")
        self.assertEqual(task["assigned_to"], [])
        self.assertEqual(Task.objects.get(owner_id="u1", record_id="t2").assigned_to, [])

    def test_other_users_are_not_migrated(self):
        build_workspace(OrmBackend(), local_store=self.device, user_id="u2")
        self.assertFalse(Project.objects.filter(owner_id="u1").exists())

    def test_nothing_to_copy(self):
        coordinator = MigrationCoordinator(OrmBackend(), LocalBackend(MemoryKeyValueStore()))
        self.assertEqual(coordinator.migrate_if_needed("u1", registry.get("projects")), 0)

    def test_failed_copy_is_logged_and_retried_later(self):
        coordinator = MigrationCoordinator(OrmBackend(), LocalBackend(self.device))
        projects = registry.get("projects")

        with patch.object(OrmBackend, "insert", side_effect=BackendError("db down")):
            with self.assertLogs("studio.sync.migration", level="ERROR"):
                self.assertEqual(coordinator.migrate_if_needed("u1", projects), 0)

        self.assertEqual(coordinator.migrate_if_needed("u1", projects), 2)

    def test_migrate_all(self):
        coordinator = MigrationCoordinator(OrmBackend(), LocalBackend(self.device))
        counts = coordinator.migrate_all("u1", [registry.get("projects"), registry.get("tasks")])
        self.assertEqual(counts, {"projects": 2, "tasks": 1})
