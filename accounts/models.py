"""Accounts models: roles and the per-user account record.

Defines a `UserProfile` associated one-to-one with Django's `User`,
capturing the role (student/teacher) and the display name. The login
email is stored as the auth user's `username` (and `email`), which makes
the unique username column the email uniqueness constraint.
"""
from __future__ import annotations

from django.conf import settings
from django.db import models


class Role(models.TextChoices):
    """The two mutually exclusive account kinds.

    Checks compare roles for equality; a teacher is not implicitly a
    student or the other way round.
    """

    STUDENT = "student", "Student"
    TEACHER = "teacher", "Teacher"


class UserProfile(models.Model):
    """Account details linked to a Django auth user.

    - `role`: fixed at registration, used by the authorization guard
    - `display_name`: the name shown to teachers and used for ordering
    """

    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="profile")
    role = models.CharField(max_length=16, choices=Role.choices, default=Role.STUDENT)
    display_name = models.CharField(max_length=200, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:  # pragma: no cover (string repr convenience)
        return f"Profile<{self.user.username}:{self.role}>"
