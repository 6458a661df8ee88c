"""DRF exception handler for errors that escape a view.

Store faults never get here: they come back from the service as
``StoreFault`` results.  What does arrive is either a DRF ``APIException``
(malformed JSON, unsupported media type, method not allowed), rendered by
DRF as usual, or an unexpected error, which is logged with its traceback
and rendered as a 500 carrying the error message.
"""

from __future__ import annotations

import structlog
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = structlog.get_logger(__name__)


def api_exception_handler(exc, context):
    response = exception_handler(exc, context)
    if response is not None:
        return response

    view = context.get("view")
    logger.error(
        "request.unhandled_exception",
        view=type(view).__name__ if view is not None else None,
        error=str(exc),
        exc_info=exc,
    )
    return Response(
        {"detail": f"An unexpected error occurred: {exc}"},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
