"""Courses and enrolments models.

Defines a `Course` owned by a teacher and reachable through a short join
code, and an `Enrolment` linking a student to a course at most once.
Neither is updated or deleted by the application.
"""
from __future__ import annotations

from django.conf import settings
from django.db import models

class Course(models.Model):
    """A course created by a teacher user."""

    owner = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="owned_courses")
    name = models.CharField(max_length=200)
    join_code = models.CharField(max_length=8, unique=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["id"]

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.name} ({self.join_code})"

class Enrolment(models.Model):
    """Link a student to a course.

    Uniqueness of (course, student) is enforced by the database so that
    concurrent duplicate joins cannot both succeed.
    """

    course = models.ForeignKey(Course, on_delete=models.CASCADE, related_name="enrolments")
    student = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="enrolments")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["student", "course"], name="unique_enrolment_per_student"),
        ]
        ordering = ["id"]

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.student_id}->{self.course_id}"
