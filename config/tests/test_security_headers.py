import pytest
from django.test import Client
from django.urls import reverse


pytestmark = pytest.mark.security


@pytest.mark.django_db
def test_csp_header_forbids_inline_scripts(client):
    r = client.get(reverse("accounts:login"))
    assert r.status_code == 200
    csp = r["Content-Security-Policy"]
    assert "script-src 'self'" in csp
    assert "'unsafe-inline'" not in csp
    assert "frame-ancestors 'none'" in csp


@pytest.mark.django_db
def test_login_form_requires_csrf_token():
    c = Client(enforce_csrf_checks=True)
    r = c.post(reverse("accounts:login"), {"email": "t@x.com", "password": "pw", "name": "T"})
    assert r.status_code == 403


@pytest.mark.django_db
def test_session_cookie_is_httponly_and_lax(student):
    c = Client()
    r = c.post(reverse("accounts:login"), {"email": "s@x.com", "password": "pw"})
    assert r.status_code == 302
    cookie = r.cookies["sessionid"]
    assert cookie["httponly"]
    assert cookie["samesite"] == "Lax"


@pytest.mark.django_db
def test_favicon_redirects_to_static_svg(client):
    r = client.get("/favicon.ico")
    assert r.status_code == 301
    assert r["Location"] == "/static/favicon.svg"
