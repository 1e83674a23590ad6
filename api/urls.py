"""API routes for StudentIntro.

Exposes the OpenAPI schema and the versioned REST endpoints under
/api/v1/.
"""
from django.urls import path, include
from rest_framework.routers import DefaultRouter
from drf_spectacular.views import SpectacularAPIView

from .views import CourseViewSet, EnrolmentViewSet

router = DefaultRouter()
router.register(r"api/v1/courses", CourseViewSet, basename="courses")
router.register(r"api/v1/enrolments", EnrolmentViewSet, basename="enrolments")

urlpatterns = [
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("", include(router.urls)),
]
