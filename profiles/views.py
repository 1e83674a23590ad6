"""Student profile editing and the teacher's profile browser."""
from __future__ import annotations

from django.contrib import messages
from django.http import HttpRequest, HttpResponse
from django.shortcuts import redirect, render

from accounts.decorators import login_required, role_required
from accounts.models import Role
from courses import services as course_services
from courses.exceptions import CourseNotFound

from . import services
from .forms import StudentProfileForm


@login_required
def profile_edit(request: HttpRequest, course_id: int) -> HttpResponse:
    """Show and save the caller's profile for one of their courses."""
    user_id = request.identity.user_id
    try:
        course = course_services.get_course(course_id)
    except CourseNotFound:
        return redirect("accounts:home")
    if not course_services.is_enrolled(user_id, course.pk):
        messages.error(request, "Join this course before writing a profile.")
        return redirect("accounts:home")

    if request.method == "POST":
        form = StudentProfileForm(request.POST)
        if form.is_valid():
            services.upsert_profile(user_id, course.pk, **form.cleaned_data)
            messages.success(request, "Profile saved successfully!")
            return redirect("profiles:edit", course_id=course.pk)
    else:
        existing = services.get_profile(user_id, course.pk)
        initial = {name: getattr(existing, name) for name in services.PROFILE_FIELDS} if existing else {}
        form = StudentProfileForm(initial=initial)
    return render(request, "profiles/edit.html", {"course": course, "form": form})


@role_required(Role.TEACHER)
def profile_list(request: HttpRequest, course_id: int) -> HttpResponse:
    """Owner-only list of profiles in a course, with optional search."""
    try:
        course = course_services.get_owned_course(request.identity.user_id, course_id)
    except CourseNotFound:
        return redirect("accounts:home")
    search = request.GET.get("search") or ""
    profiles = services.search_profiles(course.pk, search)
    return render(request, "profiles/list.html", {"course": course, "profiles": profiles, "search": search})
