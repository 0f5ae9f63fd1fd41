"""DRF exception handler mapping domain errors to HTTP responses.

Handlers raise domain errors and let this module pick the status code.
Unexpected exceptions are logged and reported without internal details.
"""

import logging

from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from common.errors import DomainError, ErrorCode

logger = logging.getLogger(__name__)

STATUS_BY_CODE = {
    ErrorCode.VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.DUPLICATE_EMAIL: status.HTTP_409_CONFLICT,
    ErrorCode.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.INVALID_SUBJECT: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.INVALID_TOKEN: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.TOKEN_EXPIRED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorCode.ALREADY_REGISTERED: status.HTTP_409_CONFLICT,
    ErrorCode.REGISTRATION_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_response(message: str, status_code: int, **extra) -> Response:
    return Response({"success": False, "message": message, **extra}, status=status_code)


def domain_exception_handler(exc, context):
    """Render domain errors, DRF errors and unexpected failures uniformly."""
    if isinstance(exc, DomainError):
        status_code = STATUS_BY_CODE[exc.code]
        if status_code >= 500:
            logger.error("Request failed with %s", exc.code.value, exc_info=exc)
            return error_response("Internal server error", status_code)
        if exc.code is ErrorCode.VALIDATION_FAILED:
            return error_response(exc.message, status_code, errors=list(exc.details))
        return error_response(exc.message, status_code)

    response = drf_exception_handler(exc, context)
    if response is not None:
        if isinstance(exc, exceptions.APIException):
            detail = exc.detail if isinstance(exc.detail, str) else "Request failed"
            response.data = {"success": False, "message": str(detail)}
        return response

    view = context.get("view")
    logger.exception("Unhandled error in %s", type(view).__name__ if view else "request")
    return error_response("Internal server error", status.HTTP_500_INTERNAL_SERVER_ERROR)
