"""Accounts views: login/registration, logout, and role dashboards."""
from __future__ import annotations

import time

from django.conf import settings
from django.contrib import messages
from django.http import HttpRequest, HttpResponse
from django.shortcuts import redirect, render
from django.utils.http import url_has_allowed_host_and_scheme

from courses.forms import CourseForm, JoinCourseForm
from courses import services as course_services

from . import services
from .decorators import login_required, role_required
from .exceptions import AlreadyExists, InvalidCredentials
from .forms import AuthForm
from .models import Role
from .session import end_session, start_session


def _throttled(request: HttpRequest) -> bool:
    """Per-session login throttle to slow down password guessing."""
    limit = settings.STUDENTINTRO["LOGIN_ATTEMPTS_PER_MINUTE"]
    now = time.time()
    ts = [t for t in request.session.get("login_ts", []) if now - t < 60]
    if len(ts) >= limit:
        request.session["login_ts"] = ts
        return True
    ts.append(now)
    request.session["login_ts"] = ts
    return False


def _next_url(request: HttpRequest) -> str:
    target = request.POST.get("next") or request.GET.get("next") or ""
    if target and url_has_allowed_host_and_scheme(target, allowed_hosts={request.get_host()}):
        return target
    return settings.LOGIN_REDIRECT_URL


def login_view(request: HttpRequest) -> HttpResponse:
    """Log in, or register and log in when a name is supplied.

    A failed login with a name falls through to registration; a failed
    login without one reports invalid credentials.
    """
    if request.identity is not None:
        return redirect("accounts:home")

    next_target = request.POST.get("next") or request.GET.get("next", "")
    if request.method == "POST":
        form = AuthForm(request.POST)
        context = {"form": form, "next": next_target}
        if _throttled(request):
            messages.error(request, "Too many login attempts. Please wait a minute and try again.")
            return render(request, "accounts/login.html", context)
        if form.is_valid():
            email = form.cleaned_data["email"]
            password = form.cleaned_data["password"]
            name = form.cleaned_data["name"].strip()
            try:
                user = services.authenticate(email, password, request)
            except InvalidCredentials as exc:
                if not name:
                    messages.error(request, exc.message)
                    return render(request, "accounts/login.html", context)
                try:
                    user = services.register(email, password, name, form.cleaned_data["role"])
                except AlreadyExists as reg_exc:
                    messages.error(request, reg_exc.message)
                    return render(request, "accounts/login.html", context)
                messages.success(request, f"Welcome to StudentIntro, {name}!")
            start_session(request, user)
            return redirect(_next_url(request))
    else:
        form = AuthForm()
    return render(request, "accounts/login.html", {"form": form, "next": next_target})


def logout_view(request: HttpRequest) -> HttpResponse:
    # GET is accepted as well so a plain link works.
    end_session(request)
    return redirect("accounts:login")


@login_required
def home(request: HttpRequest) -> HttpResponse:
    """Dispatch to a role-specific dashboard."""
    if request.identity.role == Role.TEACHER:
        return redirect("accounts:home-teacher")
    return redirect("accounts:home-student")


@role_required(Role.TEACHER)
def home_teacher(request: HttpRequest) -> HttpResponse:
    courses = course_services.list_for_teacher(request.identity.user_id)
    return render(request, "accounts/home_teacher.html", {"courses": courses, "form": CourseForm()})


@role_required(Role.STUDENT)
def home_student(request: HttpRequest) -> HttpResponse:
    courses = course_services.list_for_student(request.identity.user_id)
    return render(request, "accounts/home_student.html", {"courses": courses, "form": JoinCourseForm()})
