"""Translation of use case outcomes into HTTP responses."""

import logging
from typing import Any

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response

from pokemon_review.core.outcomes import Outcome, OutcomeKind

logger = logging.getLogger(__name__)


def outcome_response(
    outcome: Outcome[Any], created_location: str | None = None
) -> Response:
    """Build the HTTP response for an outcome.

    Args:
        outcome: The use case outcome
        created_location: URL of the created resource. When given, a successful
            outcome is answered with 201 and a ``Location`` header.

    Returns:
        A response whose status follows the outcome kind. Not-found answers
        carry an empty body, business rejections carry their message as a
        plain JSON string and invalid requests carry ``{"detail": ...}``.
    """
    if outcome.kind is OutcomeKind.SUCCESS:
        content = jsonable_encoder(outcome.value)
        if created_location is not None:
            return JSONResponse(
                status_code=status.HTTP_201_CREATED,
                content=content,
                headers={"Location": created_location},
            )
        return JSONResponse(status_code=status.HTTP_200_OK, content=content)

    if outcome.kind is OutcomeKind.NOT_FOUND:
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    if outcome.kind is OutcomeKind.INVALID_REQUEST:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": outcome.detail},
        )

    return JSONResponse(status_code=outcome.status_code, content=outcome.detail)


async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Answer malformed bodies and parameters with 400 instead of 422.

    422 is reserved for business rule rejections such as duplicate names.
    """
    logger.info("Rejected malformed request to %s", request.url.path)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )
