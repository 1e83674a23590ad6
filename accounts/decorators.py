"""Authorization guard: authentication and role checks for views."""
from __future__ import annotations

from functools import wraps

from django.contrib import messages
from django.contrib.auth.views import redirect_to_login
from django.http import HttpRequest
from django.shortcuts import redirect

from .exceptions import Forbidden, Unauthenticated
from .models import Role
from .session import Identity, current_identity


def require_authenticated(request: HttpRequest) -> Identity:
    """Return the caller's identity or raise `Unauthenticated`."""
    identity = getattr(request, "identity", None) or current_identity(request)
    if identity is None:
        raise Unauthenticated()
    return identity


def require_role(request: HttpRequest, role: Role | str) -> Identity:
    """Like `require_authenticated`, and the role must match exactly."""
    identity = require_authenticated(request)
    if identity.role != role:
        raise Forbidden()
    return identity


def _guarded(check):
    def decorator(view_func):
        @wraps(view_func)
        def _wrapped(request: HttpRequest, *args, **kwargs):
            try:
                check(request)
            except Unauthenticated:
                return redirect_to_login(request.get_full_path())
            except Forbidden as exc:
                messages.error(request, exc.message)
                return redirect("accounts:home")
            return view_func(request, *args, **kwargs)

        return _wrapped

    return decorator


def login_required(view_func):
    """Send anonymous visitors to the login page."""
    return _guarded(require_authenticated)(view_func)


def role_required(role: Role | str):
    """Require the current user to have exactly `role`.

    Anonymous visitors go to the login page; authenticated users with the
    other role go back to their dashboard.
    """
    return _guarded(lambda request: require_role(request, role))
