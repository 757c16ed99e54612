from unittest.mock import patch

from django.contrib.auth import get_user_model
from django.test import TestCase
from django.urls import reverse
from rest_framework.test import APIClient

from core.backends import OrmBackend
from core.constants import DOMAIN_CONTACTS, DOMAIN_PROJECTS
from core.domains import registry
from core.exceptions import BackendError
from core.session import select_domains
from festivals.models import Festival

User = get_user_model()


class ApiErrorFormatTestCase(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.user = User.objects.create_user(username="ana", password="pw12345!")
        self.client.force_authenticate(user=self.user)

    def test_backend_failure_maps_to_503(self):
        with patch.object(OrmBackend, "insert", side_effect=BackendError("db down")):
            with self.assertLogs("studio.api", level="WARNING"):
                response = self.client.post(reverse("project-list"), {"title": "X"}, format="json")

        self.assertEqual(response.status_code, 503)
        self.assertFalse(response.data["success"])
        self.assertEqual(response.data["status_code"], 503)

    def test_validation_errors_are_wrapped(self):
        response = self.client.post(reverse("project-list"), {}, format="json")

        self.assertEqual(response.status_code, 400)
        self.assertFalse(response.data["success"])
        self.assertIn("title", response.data["errors"])

    def test_anonymous_requests_are_rejected(self):
        response = APIClient().get(reverse("project-list"))
        self.assertEqual(response.status_code, 403)


class WorkspaceScopeTestCase(TestCase):
    def test_projects_bring_their_dependent_domains(self):
        names = {d.name for d in select_domains([DOMAIN_PROJECTS])}
        self.assertEqual(
            names,
            {DOMAIN_PROJECTS} | {d.name for d in registry if d.project_scoped},
        )
        self.assertEqual([d.name for d in select_domains([DOMAIN_CONTACTS])], [DOMAIN_CONTACTS])
        self.assertEqual(len(select_domains()), len(registry))

    def test_contact_requests_load_only_contacts(self):
        client = APIClient()
        client.force_authenticate(user=User.objects.create_user(username="ana", password="pw12345!"))

        self.assertEqual(client.get(reverse("contact-list")).data, [])
        # Festival defaults are only written when festivals are loaded
        self.assertFalse(Festival.objects.exists())

        client.get(reverse("festival-list"))
        self.assertTrue(Festival.objects.exists())


class HealthCheckTestCase(TestCase):
    def test_health(self):
        response = APIClient().get(reverse("health-check"))

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["status"], "ok")
        self.assertEqual(response.data["sync_backend"], "orm")
