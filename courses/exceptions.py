from __future__ import annotations

from accounts.exceptions import ServiceError


class CourseNotFound(ServiceError):
    message = "Invalid join code."


class CourseCreationFailed(ServiceError):
    message = "Failed to create course."


class AlreadyEnrolled(ServiceError):
    message = "You are already enrolled in this course."
