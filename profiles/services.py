"""Profile store: per-course student introductions.

Saving is a single ``INSERT ... ON CONFLICT (user, course) DO UPDATE``
statement, so two concurrent saves for the same student and course can
never produce two rows; the last write wins.
"""
from __future__ import annotations

import logging
from typing import Optional

from django.db.models import Q, QuerySet

from .models import StudentProfile

logger = logging.getLogger(__name__)

PROFILE_FIELDS = ("preferred_name", "pronouns", "major", "goals", "fun_fact", "learning_needs")


def upsert_profile(user_id: int, course_id: int, **fields: Optional[str]) -> StudentProfile:
    """Create or overwrite the profile for (user_id, course_id).

    All six fields are written on every save. Missing or ``None`` values
    are stored as empty strings; everything is stripped.
    """
    unknown = set(fields) - set(PROFILE_FIELDS)
    if unknown:
        raise TypeError(f"unknown profile fields: {', '.join(sorted(unknown))}")
    values = {name: (fields.get(name) or "").strip() for name in PROFILE_FIELDS}

    StudentProfile.objects.bulk_create(
        [StudentProfile(user_id=user_id, course_id=course_id, **values)],
        update_conflicts=True,
        unique_fields=["user", "course"],
        update_fields=[*PROFILE_FIELDS, "updated_at"],
    )
    logger.info("saved profile for user id=%s course id=%s", user_id, course_id)
    return StudentProfile.objects.get(user_id=user_id, course_id=course_id)


def get_profile(user_id: int, course_id: int) -> Optional[StudentProfile]:
    return StudentProfile.objects.filter(user_id=user_id, course_id=course_id).first()


def filter_by_query(qs: QuerySet[StudentProfile], query: str) -> QuerySet[StudentProfile]:
    """Narrow `qs` to profiles matching `query`; an empty query matches everything.

    Matches case-insensitive substrings of the owner's display name or
    email, or of the profile's preferred name or major.
    """
    if not query:
        return qs
    return qs.filter(
        Q(user__profile__display_name__icontains=query)
        | Q(user__username__icontains=query)
        | Q(preferred_name__icontains=query)
        | Q(major__icontains=query)
    )


def search_profiles(course_id: int, query: str = "") -> QuerySet[StudentProfile]:
    """Profiles of one course matching `query`, ordered by owner display name."""
    qs = StudentProfile.objects.filter(course_id=course_id).select_related("user", "user__profile")
    return filter_by_query(qs, query).order_by("user__profile__display_name", "id")
