import pytest
from django.urls import reverse

from courses import services as course_services
from profiles import services
from profiles.models import StudentProfile


@pytest.fixture
def course(teacher):
    return course_services.create_course(teacher.pk, "CS101")


@pytest.fixture
def enrolled(student, course):
    course_services.enroll(student.pk, course.pk)
    return course


@pytest.mark.django_db
def test_enrolled_student_sees_empty_form(student_client, enrolled):
    r = student_client.get(reverse("profiles:edit", kwargs={"course_id": enrolled.pk}))
    assert r.status_code == 200
    assert b"About Me Profile - CS101" in r.content


@pytest.mark.django_db
def test_student_saves_profile_and_sees_it_prefilled(student_client, student, enrolled):
    url = reverse("profiles:edit", kwargs={"course_id": enrolled.pk})
    r = student_client.post(url, {"preferred_name": "Sam", "major": "CS", "goals": "grad school"})
    assert r.status_code == 302
    assert r["Location"] == url

    r = student_client.get(url)
    assert b"Profile saved successfully!" in r.content
    assert b'value="Sam"' in r.content
    assert b"grad school" in r.content
    assert StudentProfile.objects.get(user=student, course=enrolled).major == "CS"


@pytest.mark.django_db
def test_resaving_replaces_profile(student_client, student, enrolled):
    url = reverse("profiles:edit", kwargs={"course_id": enrolled.pk})
    student_client.post(url, {"major": "Math"})
    student_client.post(url, {"major": "CS"})
    assert StudentProfile.objects.filter(user=student).count() == 1
    assert services.get_profile(student.pk, enrolled.pk).major == "CS"


@pytest.mark.django_db
def test_not_enrolled_student_is_sent_home(student_client, student, course):
    url = reverse("profiles:edit", kwargs={"course_id": course.pk})
    r = student_client.post(url, {"major": "CS"})
    assert r.status_code == 302
    assert r["Location"] == reverse("accounts:home")
    assert not StudentProfile.objects.filter(user=student).exists()


@pytest.mark.django_db
def test_unknown_course_is_sent_home(student_client):
    r = student_client.get(reverse("profiles:edit", kwargs={"course_id": 999}))
    assert r.status_code == 302
    assert r["Location"] == reverse("accounts:home")


@pytest.mark.django_db
def test_anonymous_profile_edit_redirects_to_login(client, course):
    r = client.get(reverse("profiles:edit", kwargs={"course_id": course.pk}))
    assert r.status_code == 302
    assert r["Location"].startswith(reverse("accounts:login"))


@pytest.mark.django_db
def test_owner_lists_and_searches_profiles(teacher_client, user_factory, course):
    alice = user_factory("alice@x.com", name="Alice Smith")
    bob = user_factory("bob@x.com", name="Bob Jones")
    for user, major in [(alice, "CS"), (bob, "History")]:
        course_services.enroll(user.pk, course.pk)
        services.upsert_profile(user.pk, course.pk, major=major)

    url = reverse("profiles:list", kwargs={"course_id": course.pk})
    r = teacher_client.get(url)
    assert r.status_code == 200
    assert b"Alice Smith" in r.content and b"Bob Jones" in r.content

    r = teacher_client.get(url, {"search": "hist"})
    assert b"Bob Jones" in r.content
    assert b"Alice Smith" not in r.content

    r = teacher_client.get(url, {"search": "nobody"})
    assert b"No student profiles found matching your search" in r.content


@pytest.mark.django_db
def test_profile_values_are_html_escaped(teacher_client, student, enrolled):
    services.upsert_profile(student.pk, enrolled.pk, fun_fact="<script>alert(1)</script>")
    r = teacher_client.get(reverse("profiles:list", kwargs={"course_id": enrolled.pk}))
    assert b"<script>alert(1)</script>" not in r.content
    assert b"&lt;script&gt;" in r.content


@pytest.mark.django_db
def test_other_teacher_cannot_list_profiles(user_factory, client, course):
    user_factory("t2@x.com", role="teacher", name="Other")
    assert client.login(username="t2@x.com", password="pw")
    r = client.get(reverse("profiles:list", kwargs={"course_id": course.pk}))
    assert r.status_code == 302
    assert r["Location"] == reverse("accounts:home")


@pytest.mark.django_db
def test_student_cannot_list_profiles(student_client, enrolled):
    r = student_client.get(reverse("profiles:list", kwargs={"course_id": enrolled.pk}))
    assert r.status_code == 302
    assert r["Location"] == reverse("accounts:home")
