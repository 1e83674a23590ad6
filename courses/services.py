"""Course registry and enrolment manager.

All writes are single inserts guarded by unique constraints. Each insert
runs in its own savepoint so a constraint violation can be reported to
the caller without breaking the surrounding request transaction.
"""
from __future__ import annotations

import logging

from django.conf import settings
from django.db import IntegrityError, transaction
from django.db.models import F, QuerySet

from .exceptions import AlreadyEnrolled, CourseCreationFailed, CourseNotFound
from .join_codes import generate_join_code, normalise_join_code
from .models import Course, Enrolment

logger = logging.getLogger(__name__)


def create_course(teacher_id: int, name: str) -> Course:
    """Create a course owned by `teacher_id` with a fresh join code.

    A join-code collision is retried with a new code, up to
    ``STUDENTINTRO["JOIN_CODE_ATTEMPTS"]`` inserts in total. When every
    attempt collides, `CourseCreationFailed` is raised.
    """
    name = (name or "").strip()
    if not name:
        raise CourseCreationFailed("Course name is required.")

    attempts = max(1, settings.STUDENTINTRO["JOIN_CODE_ATTEMPTS"])
    for attempt in range(1, attempts + 1):
        code = generate_join_code()
        try:
            with transaction.atomic():
                course = Course.objects.create(owner_id=teacher_id, name=name, join_code=code)
        except IntegrityError:
            logger.warning("join code collision on attempt %s/%s", attempt, attempts)
            continue
        logger.info("teacher id=%s created course id=%s", teacher_id, course.pk)
        return course
    raise CourseCreationFailed()


def resolve_join_code(code: str) -> Course:
    try:
        return Course.objects.get(join_code=normalise_join_code(code))
    except Course.DoesNotExist:
        raise CourseNotFound()


def get_owned_course(teacher_id: int, course_id) -> Course:
    """Return the course only when `teacher_id` owns it."""
    try:
        return Course.objects.get(pk=course_id, owner_id=teacher_id)
    except (Course.DoesNotExist, ValueError, TypeError):
        raise CourseNotFound("Course not found.")


def get_course(course_id) -> Course:
    try:
        return Course.objects.get(pk=course_id)
    except (Course.DoesNotExist, ValueError, TypeError):
        raise CourseNotFound("Course not found.")


def list_for_teacher(teacher_id: int) -> QuerySet[Course]:
    return Course.objects.filter(owner_id=teacher_id).order_by("id")


def list_for_student(student_id: int) -> QuerySet[Course]:
    """Courses the student joined, in join order, with `teacher_name`."""
    return (
        Course.objects.filter(enrolments__student_id=student_id)
        .annotate(teacher_name=F("owner__profile__display_name"))
        .order_by("enrolments__id")
    )


def is_enrolled(user_id: int, course_id) -> bool:
    return Enrolment.objects.filter(student_id=user_id, course_id=course_id).exists()


def enroll(user_id: int, course_id) -> Enrolment:
    """Enrol `user_id` in the course.

    Raises `CourseNotFound` for an unknown course and `AlreadyEnrolled`
    when the pair already exists.
    """
    course = get_course(course_id)
    try:
        with transaction.atomic():
            enrolment = Enrolment.objects.create(student_id=user_id, course=course)
    except IntegrityError:
        raise AlreadyEnrolled()
    logger.info("user id=%s enrolled in course id=%s", user_id, course.pk)
    return enrolment


def join_by_code(user_id: int, code: str) -> Enrolment:
    course = resolve_join_code(code)
    return enroll(user_id, course.pk)
