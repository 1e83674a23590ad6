from __future__ import annotations

import pytest
from django.test import Client

from courses import services
from courses.models import Course, Enrolment


def test_teacher_creates_course_and_sees_join_code(teacher_client, teacher):
    r = teacher_client.post("/courses/create/", {"course_name": "CS101"}, follow=True)
    assert r.status_code == 200
    course = Course.objects.get(owner=teacher)
    assert f"Join code: {course.join_code}" in r.content.decode()
    assert course.join_code in r.content.decode()


def test_student_cannot_create_course(student_client):
    r = student_client.post("/courses/create/", {"course_name": "Nope"})
    assert r.status_code == 302
    assert r["Location"].endswith("/accounts/home/")
    assert Course.objects.count() == 0


@pytest.mark.django_db
def test_anonymous_create_redirects_to_login():
    r = Client().post("/courses/create/", {"course_name": "Nope"})
    assert r.status_code == 302
    assert "/accounts/login/" in r["Location"]


def test_create_requires_post(teacher_client):
    assert teacher_client.get("/courses/create/").status_code == 405


def test_student_joins_course_once(student_client, student, teacher):
    course = services.create_course(teacher.pk, "CS101")

    r = student_client.post("/courses/join/", {"join_code": course.join_code.lower()}, follow=True)
    assert b"Successfully joined course!" in r.content
    assert b"CS101" in r.content
    assert b"Teacher T" in r.content

    r = student_client.post("/courses/join/", {"join_code": course.join_code}, follow=True)
    assert b"You are already enrolled in this course." in r.content
    assert Enrolment.objects.filter(student=student, course=course).count() == 1


def test_join_with_invalid_code(student_client):
    r = student_client.post("/courses/join/", {"join_code": "BADCODE1"}, follow=True)
    assert b"Invalid join code." in r.content
    assert Enrolment.objects.count() == 0
