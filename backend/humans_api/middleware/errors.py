"""
Humans API — Unhandled Error Middleware
=========================================

What:  Turns any exception that no handler claimed into a JSON 500.
Why:   Starlette runs the `Exception` handler in its outermost middleware,
       above CORS and Request ID, so that response would go out without
       Access-Control-Allow-Origin or X-Request-ID. Catching here keeps the
       500 inside both layers.
"""

import logging

from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from humans_api.middleware.request_id import request_id_var

logger = logging.getLogger(__name__)


def error_response(status_code: int, error: str, message: str) -> JSONResponse:
    """JSON error body shared by every failure path."""
    return JSONResponse(
        status_code=status_code,
        content={
            "error": error,
            "message": message,
            "request_id": request_id_var.get(""),
        },
    )


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """Last line of defense below CORS; never leaks exception details."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            logger.error(
                "[%s] Unexpected error on %s %s: %s",
                request_id_var.get(""),
                request.method,
                request.url.path,
                str(exc),
                exc_info=True,
            )
            return error_response(
                500,
                "internal_server_error",
                "An unexpected error occurred. Please try again later.",
            )
