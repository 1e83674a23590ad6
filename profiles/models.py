"""Student "about me" profiles, one per student per course."""
from __future__ import annotations

from django.conf import settings
from django.db import models

from courses.models import Course


class StudentProfile(models.Model):
    """Free-text introduction a student writes for one course.

    Saved with upsert semantics on (user, course); every field may be
    empty, and empty fields are simply not displayed.
    """

    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="student_profiles")
    course = models.ForeignKey(Course, on_delete=models.CASCADE, related_name="student_profiles")
    preferred_name = models.CharField(max_length=200, blank=True, default="")
    pronouns = models.CharField(max_length=50, blank=True, default="")
    major = models.CharField(max_length=200, blank=True, default="")
    goals = models.TextField(blank=True, default="")
    fun_fact = models.TextField(blank=True, default="")
    learning_needs = models.TextField(blank=True, default="")
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["user", "course"], name="unique_profile_per_student_course"),
        ]

    def __str__(self) -> str:  # pragma: no cover
        return f"StudentProfile<{self.user_id}@{self.course_id}>"
