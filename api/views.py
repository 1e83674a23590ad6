"""REST API v1 viewsets and endpoints."""
from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from accounts.exceptions import Forbidden
from accounts.models import Role
from courses import services as course_services
from courses.models import Course, Enrolment
from profiles import services as profile_services

from .filters import StudentProfileFilter
from .permissions import IsTeacher, role_of
from .serializers import (
    CourseSerializer,
    EnrolmentSerializer,
    JoinCourseSerializer,
    ProfileWithOwnerSerializer,
    StudentProfileSerializer,
)


class CourseViewSet(mixins.ListModelMixin, mixins.RetrieveModelMixin, mixins.CreateModelMixin, viewsets.GenericViewSet):
    """Teachers see the courses they own; students the ones they joined."""

    serializer_class = CourseSerializer
    permission_classes = [IsAuthenticated]

    def get_permissions(self):
        if self.action == "create":
            return [IsTeacher()]
        return super().get_permissions()

    def get_queryset(self):
        user = self.request.user
        role = role_of(user)
        if role == Role.TEACHER:
            return course_services.list_for_teacher(user.id).select_related("owner__profile")
        if role == Role.STUDENT:
            return course_services.list_for_student(user.id).select_related("owner__profile")
        return Course.objects.none()

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        course = course_services.create_course(request.user.id, serializer.validated_data["name"])
        return Response(self.get_serializer(course).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=StudentProfileSerializer, responses=StudentProfileSerializer)
    @action(detail=True, methods=["get", "put"], url_path="profile", serializer_class=StudentProfileSerializer)
    def profile(self, request, pk=None):
        """The caller's own profile for an enrolled course."""
        course = course_services.get_course(pk)
        if not course_services.is_enrolled(request.user.id, course.pk):
            raise Forbidden("Join this course before writing a profile.")
        if request.method == "GET":
            existing = profile_services.get_profile(request.user.id, course.pk)
            if existing is None:
                return Response({"detail": "No profile yet."}, status=status.HTTP_404_NOT_FOUND)
            return Response(StudentProfileSerializer(existing).data)
        serializer = StudentProfileSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        saved = profile_services.upsert_profile(request.user.id, course.pk, **serializer.validated_data)
        return Response(StudentProfileSerializer(saved).data)

    @extend_schema(
        parameters=[OpenApiParameter("search", str, description="Name, email, preferred name or major")],
        responses=ProfileWithOwnerSerializer(many=True),
    )
    @action(detail=True, methods=["get"], url_path="profiles", serializer_class=ProfileWithOwnerSerializer)
    def profiles(self, request, pk=None):
        """Owner-only, searchable list of profiles in the course."""
        course = course_services.get_owned_course(request.user.id, pk)
        qs = profile_services.search_profiles(course.pk)
        qs = StudentProfileFilter(request.query_params, queryset=qs).qs
        page = self.paginate_queryset(qs)
        if page is not None:
            return self.get_paginated_response(ProfileWithOwnerSerializer(page, many=True).data)
        return Response(ProfileWithOwnerSerializer(qs, many=True).data)

class EnrolmentViewSet(mixins.ListModelMixin, viewsets.GenericViewSet):
    """The caller's enrolments; POST a join code to enrol."""

    serializer_class = EnrolmentSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        return (
            Enrolment.objects.filter(student=self.request.user)
            .select_related("course__owner__profile")
            .order_by("id")
        )

    @extend_schema(request=JoinCourseSerializer, responses={201: EnrolmentSerializer})
    def create(self, request, *args, **kwargs):
        serializer = JoinCourseSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        enrolment = course_services.join_by_code(request.user.id, serializer.validated_data["join_code"])
        return Response(EnrolmentSerializer(enrolment).data, status=status.HTTP_201_CREATED)
