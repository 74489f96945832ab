# backend/common/exceptions.py
from __future__ import annotations

import logging
from typing import Any, Optional

from django.core.exceptions import PermissionDenied as DjangoPermissionDenied
from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


# --------------------------
# Error taxonomy
# --------------------------
class InvalidInput(exceptions.APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid input"
    default_code = "invalid_input"

    def __init__(self, detail: Optional[str] = None, errors: Optional[dict] = None):
        super().__init__(detail)
        self.errors = errors


class Conflict(exceptions.APIException):
    # Uniqueness violations are reported as a client error, not 409
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Resource already exists"
    default_code = "conflict"


class Unauthenticated(exceptions.APIException):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Not authorized, no token"
    default_code = "unauthenticated"


class InvalidCredentials(exceptions.APIException):
    """
    Login failure. Deliberately not an AuthenticationFailed: login views
    have no authenticator, and DRF would downgrade that to a 403.
    """
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Invalid credentials"
    default_code = "invalid_credentials"


class NotFound(exceptions.APIException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found"
    default_code = "not_found"


# --------------------------
# Handler
# --------------------------
def _first_message(detail: Any) -> Optional[str]:
    if isinstance(detail, dict):
        for value in detail.values():
            msg = _first_message(value)
            if msg:
                return msg
        return None
    if isinstance(detail, (list, tuple)):
        for value in detail:
            msg = _first_message(value)
            if msg:
                return msg
        return None
    return str(detail) if detail else None


def api_exception_handler(exc, context):
    """
    Every error leaves the API as {"message": "..."}.
    Anything DRF does not recognise is logged and answered with a bare 500.
    """
    auth_header = getattr(exc, "auth_header", None)
    if isinstance(exc, exceptions.NotAuthenticated):
        exc = Unauthenticated()
    elif isinstance(exc, exceptions.AuthenticationFailed):
        # simplejwt's InvalidToken is an AuthenticationFailed
        exc = Unauthenticated("Token invalid or expired")
    if auth_header and isinstance(exc, Unauthenticated):
        exc.auth_header = auth_header

    response = exception_handler(exc, context)
    if response is None:
        view = context.get("view")
        logger.exception("Unhandled error in %s", view.__class__.__name__ if view else "view", exc_info=exc)
        return Response({"message": "Server error"}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    if isinstance(exc, exceptions.ValidationError):
        body = {"message": _first_message(exc.detail) or InvalidInput.default_detail, "errors": exc.detail}
    elif isinstance(exc, (Http404, exceptions.NotFound)):
        body = {"message": str(getattr(exc, "detail", "")) or NotFound.default_detail}
    elif isinstance(exc, DjangoPermissionDenied):
        body = {"message": "Forbidden"}
    else:
        body = {"message": str(exc.detail) if isinstance(exc, exceptions.APIException) else str(exc)}
        errors = getattr(exc, "errors", None)
        if errors:
            body["errors"] = errors

    response.data = body
    return response
