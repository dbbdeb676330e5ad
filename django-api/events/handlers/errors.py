"""Mapping of domain errors to HTTP responses."""

import logging

from rest_framework import status
from rest_framework.response import Response

from events.domain.errors import (
    DomainError,
    InvalidRequestError,
    NotFoundError,
    ServiceFailureError,
)

logger = logging.getLogger(__name__)

_STATUS_BY_FAMILY = (
    (InvalidRequestError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ServiceFailureError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def status_for(error: DomainError) -> int:
    for family, code in _STATUS_BY_FAMILY:
        if isinstance(error, family):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(error: DomainError) -> Response:
    """Build a response that carries only the code and user-safe message."""
    response_status = status_for(error)
    if response_status >= 500:
        logger.error("Request failed: %s", error)
    return Response(
        {"error": {"code": error.code.value, "message": error.message}},
        status=response_status,
    )
