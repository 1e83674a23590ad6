from __future__ import annotations

from .session import current_identity


class IdentityMiddleware:
    """Attach the session identity to the request as `request.identity`.

    Must run after `AuthenticationMiddleware`. The identity is `None` for
    anonymous visitors.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.identity = current_identity(request)
        return self.get_response(request)
