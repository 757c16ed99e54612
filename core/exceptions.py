from rest_framework.views import exception_handler as drf_exception_handler
from rest_framework.response import Response
from rest_framework import status
import logging

logger = logging.getLogger("studio.api")


class SyncError(Exception):
    """Base class for every error raised by the sync layer."""


class BackendError(SyncError):
    """A backend could not complete a read or a write."""


class CorruptPayload(BackendError):
    """A persisted local payload could not be decoded."""


class IdentityRequired(SyncError):
    """A remote backend was used without an active user identity."""


def custom_exception_handler(exc, context):
    """
    Wrap DRF + sync exceptions into a consistent response format.

    Success responses (2xx) are not touched.
    Only errors come through here.
    """
    response = drf_exception_handler(exc, context)

    # If DRF handled it, wrap it
    if response is not None:
        return Response(
            {
                "success": False,
                "status_code": response.status_code,
                "errors": response.data,
            },
            status=response.status_code,
        )

    # Backend unavailable -> the client may retry
    if isinstance(exc, BackendError):
        logger.warning("Backend failure during request: %s", exc)
        return Response(
            {
                "success": False,
                "status_code": status.HTTP_503_SERVICE_UNAVAILABLE,
                "errors": {"detail": "Storage backend unavailable, please retry."},
            },
            status=status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    # Unhandled exceptions -> 500
    logger.exception("Unhandled API exception", exc_info=exc)

    return Response(
        {
            "success": False,
            "status_code": status.HTTP_500_INTERNAL_SERVER_ERROR,
            "errors": {"detail": "Internal server error."},
        },
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
