"""Global exception middleware.

Wraps the rest of the request pipeline. A request whose processing raises
an unhandled exception gets a uniform JSON body with status 500 instead of
the fault reaching the server; every other response passes through
untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse, Response
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from global_exception_api.models.errors import (
    GENERIC_ERROR_MESSAGE,
    ErrorResponse,
    describe_fault,
)
from global_exception_api.models.outcome import Failed, Outcome, PassedThrough

logger = logging.getLogger(__name__)

CallNext = Callable[[Request], Awaitable[Response]]

REQUEST_ID_HEADER = "x-request-id"


async def delegate(request: Request, call_next: CallNext) -> Outcome:
    """Invoke the rest of the pipeline and capture how it settled."""
    try:
        response = await call_next(request)
    except Exception as exc:
        return Failed(description=describe_fault(exc), exception=exc)
    return PassedThrough(response)


def _log_context(request: Request, exc: BaseException) -> dict[str, Any]:
    return {
        "method": request.method,
        "path": request.url.path,
        "request_id": request.headers.get(REQUEST_ID_HEADER),
        "exception_type": type(exc).__name__,
        "status_code": HTTP_500_INTERNAL_SERVER_ERROR,
    }


def render_error(failed: Failed) -> Response:
    """Serialize the error body for a failed delegation.

    Falls back to a plain-text body holding the generic message when the
    JSON body cannot be rendered (e.g. details with lone surrogates that
    UTF-8 cannot encode).
    """
    try:
        body = ErrorResponse(details=failed.description)
        return JSONResponse(
            status_code=HTTP_500_INTERNAL_SERVER_ERROR,
            content=body.model_dump(),
        )
    except (TypeError, ValueError):
        logger.error(
            "Error body could not be serialized; sending plain-text fallback",
            exc_info=True,
            extra={"exception_type": type(failed.exception).__name__},
        )
        return PlainTextResponse(
            GENERIC_ERROR_MESSAGE,
            status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        )


async def translate_errors(request: Request, call_next: CallNext) -> Response:
    """Return the downstream response, or a JSON 500 if the pipeline raised.

    Args:
        request: The inbound request.
        call_next: Continuation running the rest of the pipeline.

    Returns:
        The continuation's own response on success; otherwise a 500
        response whose body is an ``ErrorResponse``.
    """
    outcome = await delegate(request, call_next)
    if isinstance(outcome, PassedThrough):
        return outcome.response

    logger.error(
        "Unhandled exception while processing request",
        exc_info=outcome.exception,
        extra=_log_context(request, outcome.exception),
    )
    return render_error(outcome)


class GlobalExceptionMiddleware(BaseHTTPMiddleware):
    """Translate unhandled exceptions from downstream into JSON 500 responses."""

    async def dispatch(self, request: Request, call_next: CallNext) -> Response:
        return await translate_errors(request, call_next)
