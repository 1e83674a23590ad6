from django.http import HttpRequest, HttpResponse
from django.shortcuts import redirect
from django.urls import reverse
from urllib.parse import urlencode


def _with_query(url: str, **params) -> str:
    params = {k: v for k, v in params.items() if v}
    return f"{url}?{urlencode(params)}" if params else url


def index(request: HttpRequest) -> HttpResponse:
    """Entry point; also understands the old `?page=` style links.

    Known pages map onto their routes. Anything else, or a course page
    without `course_id`, lands on the dashboard (or on the login page for
    anonymous visitors, via the dashboard's guard).
    """
    page = request.GET.get("page") or ("dashboard" if request.identity else "login")
    course_id = (request.GET.get("course_id") or "").strip()

    if page == "login":
        return redirect("accounts:login")
    if page == "profile" and course_id.isdigit():
        return redirect("profiles:edit", course_id=int(course_id))
    if page == "view_profiles" and course_id.isdigit():
        url = reverse("profiles:list", kwargs={"course_id": int(course_id)})
        return redirect(_with_query(url, search=request.GET.get("search", "")))
    return redirect("accounts:home")
