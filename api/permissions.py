"""Custom permissions for REST API v1."""
from __future__ import annotations

from rest_framework.permissions import BasePermission

from accounts.models import Role


def role_of(user) -> str | None:
    profile = getattr(user, "profile", None)
    return getattr(profile, "role", None)


class IsTeacher(BasePermission):
    message = "Teacher access required."

    def has_permission(self, request, view):
        return bool(request.user and request.user.is_authenticated and role_of(request.user) == Role.TEACHER)
