"""Forms for creating and joining courses."""
from __future__ import annotations

from django import forms


class CourseForm(forms.Form):
    """Teacher-facing form for creating a course."""

    course_name = forms.CharField(label="Course Name", max_length=200)


class JoinCourseForm(forms.Form):
    join_code = forms.CharField(
        label="Course Join Code",
        max_length=32,
        widget=forms.TextInput(attrs={"placeholder": "Enter join code", "autocomplete": "off"}),
    )
