"""
Errors raised by the hire desk services, and the DRF handler that turns
them into HTTP responses.
"""
import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class HireDeskError(Exception):
    """Base exception for hire desk service errors"""
    status_code = status.HTTP_400_BAD_REQUEST


class RecordNotFound(HireDeskError):
    """Raised when a requested record does not exist"""
    status_code = status.HTTP_404_NOT_FOUND


class InvalidTransition(HireDeskError):
    """Raised when a record is not in a state that allows the operation"""
    pass


class InvalidStatus(HireDeskError):
    """Raised when an unknown status value is requested"""
    pass


def hire_desk_exception_handler(exc, context):
    if isinstance(exc, HireDeskError):
        logger.warning("%s: %s", type(exc).__name__, exc)
        return Response({"detail": str(exc)}, status=exc.status_code)
    return exception_handler(exc, context)
