"""Map service-layer errors onto API responses."""
from __future__ import annotations

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from accounts.exceptions import (
    AlreadyExists,
    Forbidden,
    InvalidCredentials,
    ServiceError,
    Unauthenticated,
)
from courses.exceptions import AlreadyEnrolled, CourseCreationFailed, CourseNotFound

STATUS_BY_ERROR = {
    InvalidCredentials: status.HTTP_401_UNAUTHORIZED,
    Unauthenticated: status.HTTP_401_UNAUTHORIZED,
    Forbidden: status.HTTP_403_FORBIDDEN,
    CourseNotFound: status.HTTP_404_NOT_FOUND,
    AlreadyEnrolled: status.HTTP_400_BAD_REQUEST,
    AlreadyExists: status.HTTP_400_BAD_REQUEST,
    CourseCreationFailed: status.HTTP_400_BAD_REQUEST,
}


def exception_handler(exc, context):
    if isinstance(exc, ServiceError):
        code = STATUS_BY_ERROR.get(type(exc), status.HTTP_400_BAD_REQUEST)
        return Response({"detail": exc.message}, status=code)
    return drf_exception_handler(exc, context)
