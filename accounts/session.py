"""Session-held identity for the authenticated browser.

Django's session framework keeps the data server-side, keyed by the
opaque session cookie. On top of the auth user id stored by `login`, the
session carries a small identity record (id, email, display name, role)
so request handlers can authorise without re-reading the user row.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Optional

from django.contrib.auth import login, logout
from django.http import HttpRequest

from .models import Role

SESSION_KEY = "studentintro_identity"

@dataclass(frozen=True)
class Identity:
    user_id: int
    email: str
    display_name: str
    role: Role

    @classmethod
    def from_user(cls, user) -> "Identity":
        profile = getattr(user, "profile", None)
        return cls(
            user_id=user.pk,
            email=user.username,
            display_name=getattr(profile, "display_name", "") or user.username,
            role=Role(getattr(profile, "role", Role.STUDENT)),
        )

    def as_session_data(self) -> dict:
        data = asdict(self)
        data["role"] = str(self.role)
        return data

    @classmethod
    def from_session_data(cls, data: dict) -> "Identity":
        return cls(
            user_id=int(data["user_id"]),
            email=data["email"],
            display_name=data["display_name"],
            role=Role(data["role"]),
        )

def start_session(request: HttpRequest, user) -> Identity:
    """Log `user` in and record their identity in the session.

    `login` cycles the session key, so an anonymous session cannot be
    fixated onto the authenticated one.
    """
    login(request, user, backend="django.contrib.auth.backends.ModelBackend")
    identity = Identity.from_user(user)
    request.session[SESSION_KEY] = identity.as_session_data()
    request.identity = identity
    return identity

def end_session(request: HttpRequest) -> None:
    """Forget everything about the current browser session."""
    logout(request)
    request.identity = None

def current_identity(request: HttpRequest) -> Optional[Identity]:
    user = getattr(request, "user", None)
    if not getattr(user, "is_authenticated", False):
        return None
    data = request.session.get(SESSION_KEY)
    if data and data.get("user_id") == user.pk:
        return Identity.from_session_data(data)
    # Sessions started elsewhere (admin login, test client) lack the record.
    identity = Identity.from_user(user)
    request.session[SESSION_KEY] = identity.as_session_data()
    return identity
