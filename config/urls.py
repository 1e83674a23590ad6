"""URL routing for StudentIntro.

HTML pages live under the `accounts` and `courses` prefixes; the JSON API
and its schema are mounted by the `api` app.
"""
from django.contrib import admin
from django.urls import include, path
from django.http import HttpResponsePermanentRedirect


def _favicon(request):  # redirect to static SVG favicon to avoid 404s
    return HttpResponsePermanentRedirect("/static/favicon.svg")


urlpatterns = [
    path("favicon.ico", _favicon),
    path("admin/", admin.site.urls),
    path("accounts/", include("accounts.urls")),
    path("courses/", include("courses.urls")),
    path("courses/", include("profiles.urls")),
    path("", include("ui.urls")),
    path("", include("api.urls")),
]
