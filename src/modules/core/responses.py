"""Translate service result kinds into DRF responses.

Views call ``failure_response`` for any result whose ``ok`` is False, so
the status code and body shape for each failure kind live in one place.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.response import Response

from shared.domain.results import Failure, NotFound, StoreFault, ValidationFailed

VALIDATION_TITLE = "One or more validation errors occurred."


def not_found_message(id: int) -> str:
    return f"Product with ID: {id} not found"


def failure_response(result: Failure, action: str) -> Response:
    """Render ``result`` as an error response.

    ``action`` completes the sentence "An error occurred while ..." for
    store faults, e.g. ``"retrieving products"``.
    """
    if isinstance(result, ValidationFailed):
        return Response(
            {
                "title": VALIDATION_TITLE,
                "status": status.HTTP_400_BAD_REQUEST,
                "errors": result.errors,
            },
            status=status.HTTP_400_BAD_REQUEST,
        )
    if isinstance(result, NotFound):
        return Response(
            {"detail": not_found_message(result.id)},
            status=status.HTTP_404_NOT_FOUND,
        )
    if isinstance(result, StoreFault):
        return Response(
            {"detail": f"An error occurred while {action}: {result.message}"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    raise TypeError(f"Not a failure result: {result!r}")
