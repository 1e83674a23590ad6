import logging

import pytest
from django.contrib.auth.models import User
from django.test import Client

from accounts.models import Role


@pytest.fixture(autouse=True)
def silence_django_request_logger():
    """Reduce noise from expected 4xx in passing tests.

    Many tests intentionally exercise 400/403/404 paths. Django logs these
    at WARNING via 'django.request'; lower that logger to ERROR during
    tests to avoid clutter.
    """
    logger = logging.getLogger("django.request")
    old = logger.level
    logger.setLevel(logging.ERROR)
    try:
        yield
    finally:
        logger.setLevel(old)


def make_user(email: str, role: str = Role.STUDENT, name: str = "", password: str = "pw") -> User:
    user = User.objects.create_user(username=email, email=email, password=password)
    user.profile.role = role
    user.profile.display_name = name or email
    user.profile.save(update_fields=["role", "display_name"])
    return user


@pytest.fixture
def teacher(db):
    return make_user("t@x.com", Role.TEACHER, "Teacher T")


@pytest.fixture
def student(db):
    return make_user("s@x.com", Role.STUDENT, "Student S")


@pytest.fixture
def teacher_client(teacher):
    c = Client()
    assert c.login(username="t@x.com", password="pw")
    return c


@pytest.fixture
def student_client(student):
    c = Client()
    assert c.login(username="s@x.com", password="pw")
    return c


@pytest.fixture
def user_factory(db):
    return make_user
