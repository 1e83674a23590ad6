"""Course creation and join actions.

Both actions are POST-only and redirect back to the dashboard, reporting
the outcome as a flash message.
"""
from __future__ import annotations

from django.contrib import messages
from django.http import HttpRequest, HttpResponse
from django.shortcuts import redirect
from django.views.decorators.http import require_POST

from accounts.decorators import login_required, role_required
from accounts.models import Role

from . import services
from .exceptions import AlreadyEnrolled, CourseCreationFailed, CourseNotFound
from .forms import CourseForm, JoinCourseForm


@require_POST
@role_required(Role.TEACHER)
def course_create(request: HttpRequest) -> HttpResponse:
    """Teacher-only course creation; the join code is shown on success."""
    form = CourseForm(request.POST)
    if not form.is_valid():
        messages.error(request, "Course name is required.")
        return redirect("accounts:home")
    try:
        course = services.create_course(request.identity.user_id, form.cleaned_data["course_name"])
    except CourseCreationFailed as exc:
        messages.error(request, exc.message)
    else:
        messages.success(request, f"Course created successfully! Join code: {course.join_code}")
    return redirect("accounts:home")


@require_POST
@login_required
def course_join(request: HttpRequest) -> HttpResponse:
    """Enrol the current user through a join code."""
    form = JoinCourseForm(request.POST)
    if not form.is_valid():
        messages.error(request, CourseNotFound.message)
        return redirect("accounts:home")
    try:
        services.join_by_code(request.identity.user_id, form.cleaned_data["join_code"])
    except (CourseNotFound, AlreadyEnrolled) as exc:
        messages.error(request, exc.message)
    else:
        messages.success(request, "Successfully joined course!")
    return redirect("accounts:home")
