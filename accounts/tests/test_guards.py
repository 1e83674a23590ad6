from __future__ import annotations

import pytest
from django.test import Client, RequestFactory

from accounts.decorators import require_authenticated, require_role
from accounts.exceptions import Forbidden, Unauthenticated
from accounts.models import Role
from accounts.session import Identity


def _request(identity):
    request = RequestFactory().get("/")
    request.identity = identity
    return request


def test_require_authenticated_without_identity_raises():
    request = _request(None)
    request.user = type("Anon", (), {"is_authenticated": False})()
    with pytest.raises(Unauthenticated):
        require_authenticated(request)


def test_require_role_is_plain_equality():
    teacher = Identity(user_id=1, email="t@x.com", display_name="T", role=Role.TEACHER)
    assert require_role(_request(teacher), Role.TEACHER) == teacher
    with pytest.raises(Forbidden):
        require_role(_request(teacher), Role.STUDENT)

    student = Identity(user_id=2, email="s@x.com", display_name="S", role=Role.STUDENT)
    assert require_role(_request(student), "student") == student
    with pytest.raises(Forbidden):
        require_role(_request(student), Role.TEACHER)


@pytest.mark.django_db
def test_anonymous_dashboard_redirects_to_login():
    r = Client().get("/accounts/home/")
    assert r.status_code == 302
    assert r["Location"].startswith("/accounts/login/")
    assert "next=" in r["Location"]


def test_home_dispatches_by_role(teacher_client, student_client):
    r = teacher_client.get("/accounts/home/")
    assert r["Location"].endswith("/accounts/home/teacher/")
    r = student_client.get("/accounts/home/")
    assert r["Location"].endswith("/accounts/home/student/")


def test_student_on_teacher_page_goes_back_to_dashboard(student_client):
    r = student_client.get("/accounts/home/teacher/", follow=True)
    assert r.redirect_chain[0][0].endswith("/accounts/home/")
    assert r.redirect_chain[-1][0].endswith("/accounts/home/student/")
    assert b"You do not have access to that page." in r.content


def test_teacher_is_not_a_student(teacher_client):
    r = teacher_client.get("/accounts/home/student/")
    assert r.status_code == 302
    assert r["Location"].endswith("/accounts/home/")


def test_identity_is_rebuilt_for_sessions_started_outside_login_view(teacher_client, teacher):
    r = teacher_client.get("/accounts/home/teacher/")
    assert r.status_code == 200
    assert r.wsgi_request.identity == Identity(
        user_id=teacher.pk, email="t@x.com", display_name="Teacher T", role=Role.TEACHER
    )
