"""Error taxonomy shared by the service layer.

Services raise these; views turn them into redirects or flash messages
and the API turns them into error responses. Each class carries a
default user-visible message.
"""
from __future__ import annotations


class ServiceError(Exception):
    """Base class for expected, recoverable failures."""

    message = "The request could not be completed."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.message
        super().__init__(self.message)


class InvalidCredentials(ServiceError):
    # Same message for unknown email and wrong password.
    message = "Invalid login credentials."


class AlreadyExists(ServiceError):
    message = "Registration failed. Email may already exist."


class Unauthenticated(ServiceError):
    message = "Please log in to continue."


class Forbidden(ServiceError):
    message = "You do not have access to that page."
