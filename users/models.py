# users/models.py
from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    ROLE_ADMIN = "admin"
    ROLE_MEMBER = "member"
    ROLE_VISITOR = "visitor"

    ROLE_CHOICES = (
        (ROLE_ADMIN, "Admin"),
        (ROLE_MEMBER, "Member"),
        (ROLE_VISITOR, "Visitor"),
    )

    role = models.CharField(
        max_length=30,
        choices=ROLE_CHOICES,
        default=ROLE_MEMBER,
    )
    name = models.CharField(max_length=255, blank=True, default="")

    # Supabase auth user id; when set it is the user's sync identity
    supabase_id = models.CharField(max_length=64, blank=True, null=True, unique=True)

    def __str__(self):
        return self.username
