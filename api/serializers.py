"""Serializers for REST API v1.

Writes go through the service layer; serializers only validate input
shape and render output.
"""
from __future__ import annotations

from rest_framework import serializers

from courses.models import Course, Enrolment
from profiles.models import StudentProfile
from profiles.services import PROFILE_FIELDS


class CourseSerializer(serializers.ModelSerializer):
    teacher_name = serializers.SerializerMethodField()

    class Meta:
        model = Course
        fields = ("id", "name", "join_code", "teacher_name", "created_at")
        read_only_fields = ("join_code", "created_at")

    def get_teacher_name(self, obj) -> str:
        annotated = getattr(obj, "teacher_name", None)
        if annotated is not None:
            return annotated
        profile = getattr(obj.owner, "profile", None)
        return getattr(profile, "display_name", "") or obj.owner.username


class JoinCourseSerializer(serializers.Serializer):
    join_code = serializers.CharField(max_length=32)


class EnrolmentSerializer(serializers.ModelSerializer):
    course = CourseSerializer(read_only=True)

    class Meta:
        model = Enrolment
        fields = ("id", "course", "created_at")


class StudentProfileSerializer(serializers.ModelSerializer):
    class Meta:
        model = StudentProfile
        fields = ("id", "course", *PROFILE_FIELDS, "updated_at")
        read_only_fields = ("id", "course", "updated_at")
        extra_kwargs = {name: {"required": False, "allow_blank": True, "trim_whitespace": True} for name in PROFILE_FIELDS}


class ProfileWithOwnerSerializer(StudentProfileSerializer):
    name = serializers.SerializerMethodField()
    email = serializers.CharField(source="user.username", read_only=True)

    class Meta(StudentProfileSerializer.Meta):
        fields = ("id", "name", "email", *PROFILE_FIELDS, "updated_at")

    def get_name(self, obj) -> str:
        profile = getattr(obj.user, "profile", None)
        return getattr(profile, "display_name", "") or obj.user.username
