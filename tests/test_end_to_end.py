"""A teacher and a student walk through the whole classroom flow."""
import pytest
from django.test import Client

from courses.models import Course


@pytest.mark.django_db
def test_teacher_and_student_full_flow():
    teacher = Client()
    r = teacher.post(
        "/accounts/login/",
        {"email": "t@x.com", "password": "pw", "name": "Teacher T", "role": "teacher"},
    )
    assert r.status_code == 302

    r = teacher.post("/courses/create/", {"course_name": "CS101"}, follow=True)
    assert r.status_code == 200
    course = Course.objects.get(name="CS101")
    assert len(course.join_code) == 8
    assert course.join_code == course.join_code.upper()
    assert course.join_code in r.content.decode()

    student = Client()
    r = student.post(
        "/accounts/login/",
        {"email": "s@x.com", "password": "pw2", "name": "Sam Student", "role": "student"},
    )
    assert r.status_code == 302

    r = student.post("/courses/join/", {"join_code": course.join_code}, follow=True)
    assert b"Successfully joined course!" in r.content
    assert b"CS101" in r.content
    assert b"Teacher T" in r.content

    r = student.post(
        f"/courses/{course.pk}/profile/",
        {"major": "CS", "goals": "grad school"},
        follow=True,
    )
    assert b"Profile saved successfully!" in r.content

    r = teacher.get("/", {"page": "view_profiles", "course_id": course.pk, "search": "CS"}, follow=True)
    body = r.content.decode()
    assert "Sam Student" in body
    assert "grad school" in body


@pytest.mark.django_db
def test_returning_user_logs_in_without_name():
    c = Client()
    c.post("/accounts/login/", {"email": "s@x.com", "password": "pw2", "name": "Sam"})
    c.post("/accounts/logout/")

    r = c.post("/accounts/login/", {"email": "s@x.com", "password": "wrong"})
    assert r.status_code == 200
    assert b"Invalid login credentials." in r.content

    r = c.post("/accounts/login/", {"email": "s@x.com", "password": "pw2"})
    assert r.status_code == 302
    assert r["Location"] == "/accounts/home/"
