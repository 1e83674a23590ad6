"""Credential store: registration and password verification.

Passwords are hashed by Django's configured hasher (salted and slow,
Argon2 in production) before they reach the database. Verification goes
through `ModelBackend`, which compares hashes in constant time and still
runs the hasher for unknown emails, so both failure modes look the same.
"""
from __future__ import annotations

import logging

from django.contrib import auth
from django.contrib.auth.models import User
from django.db import IntegrityError, transaction
from django.http import HttpRequest

from .exceptions import AlreadyExists, InvalidCredentials
from .models import Role

logger = logging.getLogger(__name__)


def register(email: str, raw_password: str, display_name: str, role: Role | str = Role.STUDENT) -> User:
    """Create a user with the given role.

    The email is stored as entered (surrounding whitespace removed) and
    compared case-sensitively. Raises `AlreadyExists` when the email is
    taken; the existing account is left untouched.
    """
    email = (email or "").strip()
    display_name = (display_name or "").strip()
    if not email or not raw_password:
        raise ValueError("email and password are required")
    role = Role(role)

    try:
        with transaction.atomic():
            # The unique username column is the serialization point.
            user = User.objects.create_user(username=email, email=email, password=raw_password)
            # Created by the post_save signal and cached on `user`.
            profile = user.profile
            profile.role = role
            profile.display_name = display_name or email
            profile.save(update_fields=["role", "display_name", "updated_at"])
    except IntegrityError:
        logger.info("registration rejected, email already registered")
        raise AlreadyExists()

    logger.info("registered user id=%s role=%s", user.pk, role)
    return user


def authenticate(email: str, raw_password: str, request: HttpRequest | None = None) -> User:
    """Return the user for a correct email/password pair.

    Raises `InvalidCredentials` for an unknown email and for a wrong
    password alike.
    """
    user = auth.authenticate(request, username=(email or "").strip(), password=raw_password or "")
    if user is None:
        logger.warning("failed login attempt")
        raise InvalidCredentials()
    logger.info("user id=%s authenticated", user.pk)
    return user
