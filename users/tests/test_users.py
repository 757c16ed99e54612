import os
import time
from unittest.mock import patch

import jwt
from django.contrib.auth import get_user_model
from django.test import TestCase
from django.urls import reverse
from rest_framework.test import APIClient

from core.storage import get_local_store

User = get_user_model()

JWT_SECRET = "test-supabase-jwt-secret-with-enough-bytes"


def supabase_token(sub, email, expires_in=3600, **claims):
    payload = {
        "sub": sub,
        "email": email,
        "aud": "authenticated",
        "exp": int(time.time()) + expires_in,
    }
    payload.update(claims)
    return jwt.encode(payload, JWT_SECRET, algorithm="HS256")


class MeAPITestCase(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.user = User.objects.create_user(username="maria", email="maria@example.com", password="pw12345!")
        self.client.force_authenticate(user=self.user)

    def test_get_me(self):
        response = self.client.get(reverse("user-me"))

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["username"], "maria")
        self.assertEqual(response.data["role"], "member")
        self.assertEqual(response.data["identity"], str(self.user.pk))

    def test_patch_me(self):
        response = self.client.patch(reverse("user-me"), {"name": "María", "role": "admin"}, format="json")

        self.assertEqual(response.status_code, 200)
        self.user.refresh_from_db()
        self.assertEqual(self.user.name, "María")
        self.assertEqual(self.user.role, "member")


@patch.dict(os.environ, {"SUPABASE_JWT_SECRET": JWT_SECRET})
class SupabaseAuthTestCase(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.url = reverse("user-me")

    def authenticate(self, token):
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")

    def test_first_sign_in_creates_the_user(self):
        self.authenticate(supabase_token("sb-1", "new@example.com", user_metadata={"name": "New Person"}))

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["name"], "New Person")
        user = User.objects.get(supabase_id="sb-1")
        self.assertEqual(response.data["identity"], str(user.pk))

        # Same identity on the next request
        self.assertEqual(self.client.get(self.url).data["id"], response.data["id"])

    def test_existing_account_is_linked_by_email(self):
        user = User.objects.create_user(username="old", email="old@example.com", password="pw12345!")
        self.client.force_authenticate(user=user)
        self.client.post(reverse("project-list"), {"title": "Before link"}, format="json")
        self.client.force_authenticate(user=None)

        self.authenticate(supabase_token("sb-2", "old@example.com"))
        response = self.client.get(self.url)

        self.assertEqual(response.data["id"], user.pk)
        self.assertEqual(response.data["identity"], str(user.pk))
        user.refresh_from_db()
        self.assertEqual(user.supabase_id, "sb-2")

        # Data created before the link is still reachable
        titles = [p["title"] for p in self.client.get(reverse("project-list")).data]
        self.assertEqual(titles, ["Before link"])

    def test_expired_token_is_rejected(self):
        self.authenticate(supabase_token("sb-3", "late@example.com", expires_in=-60))
        self.assertEqual(self.client.get(self.url).status_code, 403)

    def test_identity_scopes_the_workspace(self):
        self.authenticate(supabase_token("sb-4", "prod@example.com"))
        self.client.post(reverse("project-list"), {"title": "Shared"}, format="json")

        self.authenticate(supabase_token("sb-5", "other@example.com"))
        self.assertEqual(self.client.get(reverse("project-list")).data, [])


class NewUserDeviceDataTestCase(TestCase):
    def test_new_user_starts_with_a_clean_device(self):
        store = get_local_store()
        store.set("projects_9009", "[]")
        store.set("projects_9010", "[]")

        User.objects.create_user(id=9009, username="fresh", password="pw12345!")

        self.assertIsNone(store.get("projects_9009"))
        self.assertEqual(store.get("projects_9010"), "[]")
