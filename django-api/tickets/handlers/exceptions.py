"""Map domain errors to HTTP responses.

Registered as ``REST_FRAMEWORK["EXCEPTION_HANDLER"]``. Only the error code and
the user-safe message reach the client.
"""

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from tickets.domain.errors import DomainError, NotFoundError

logger = logging.getLogger(__name__)


def domain_exception_handler(exc, context):
    if isinstance(exc, DomainError):
        status_code = (
            status.HTTP_404_NOT_FOUND
            if isinstance(exc, NotFoundError)
            else status.HTTP_400_BAD_REQUEST
        )
        logger.info("Request rejected: %s", exc)
        return Response(
            {"code": exc.code.value, "message": exc.message}, status=status_code
        )
    return exception_handler(exc, context)
