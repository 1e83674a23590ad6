import pytest
from django.urls import reverse


@pytest.mark.django_db
def test_root_sends_anonymous_visitors_to_login(client):
    r = client.get("/")
    assert r.status_code == 302
    assert r["Location"] == reverse("accounts:login")


@pytest.mark.django_db
def test_root_sends_signed_in_users_to_dashboard(student_client):
    r = student_client.get("/")
    assert r["Location"] == reverse("accounts:home")


@pytest.mark.django_db
@pytest.mark.parametrize(
    "params,expected",
    [
        ({"page": "login"}, "/accounts/login/"),
        ({"page": "dashboard"}, "/accounts/home/"),
        ({"page": "profile", "course_id": "7"}, "/courses/7/profile/"),
        ({"page": "profile"}, "/accounts/home/"),
        ({"page": "view_profiles", "course_id": "7"}, "/courses/7/profiles/"),
        ({"page": "view_profiles", "course_id": "7", "search": "CS"}, "/courses/7/profiles/?search=CS"),
        ({"page": "view_profiles", "course_id": "abc"}, "/accounts/home/"),
        ({"page": "nonsense"}, "/accounts/home/"),
    ],
)
def test_old_page_links_are_redirected(client, params, expected):
    r = client.get("/", params)
    assert r.status_code == 302
    assert r["Location"] == expected
