"""Error Handlers: global exception handlers for the Roman numeral API.

Invariants:
    - RomanApiError 4xx -> plain-text body with the error message
    - RomanApiError 5xx and any other Exception -> plain-text "Internal server error"
    - 404 -> JSON with error, traceId, availableEndpoints
    - Every error response carries X-Trace-Id when a trace id exists
    - Conversion errors and unhandled exceptions increment metrics.error_count

Design Decisions:
    - Three-layer handler: domain (RomanApiError), HTTP (404/405), catch-all (Exception)
    - Catch-all never leaks internal details
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from roman_api.api.dependencies import get_metrics, get_trace_id
from roman_api.api.routes.info import AVAILABLE_ENDPOINTS
from roman_api.api.tracing import TRACE_HEADER
from roman_api.core.errors import RomanApiError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _trace_headers(trace_id: str | None) -> dict[str, str] | None:
    return {TRACE_HEADER: trace_id} if trace_id else None


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register conversion domain error handler."""

    @app.exception_handler(RomanApiError)
    async def roman_api_error_handler(request: Request, exc: RomanApiError):
        trace_id = get_trace_id(request)
        get_metrics(request).record_error()
        extra = {
            "trace_id": trace_id,
            "error_code": exc.code,
            "path": request.url.path,
        }
        if exc.is_client_error:
            logger.warning(f"ERROR: {exc.message}", extra=extra)
            body = exc.message
        else:
            logger.error(f"ERROR: {exc.message}", extra=extra, exc_info=exc)
            body = INTERNAL_ERROR_MESSAGE
        return PlainTextResponse(
            body, status_code=exc.http_status,
            headers=_trace_headers(trace_id),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register 404 handler; other HTTP errors keep FastAPI's default shape."""

    @app.exception_handler(StarletteHTTPException)
    async def not_found_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        if exc.status_code != status.HTTP_404_NOT_FOUND:
            return await http_exception_handler(request, exc)
        trace_id = get_trace_id(request)
        logger.info(
            f"404 - Route not found: {request.method} {request.url.path}",
            extra={"trace_id": trace_id, "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={
                "error": "Route not found",
                "traceId": trace_id,
                "availableEndpoints": AVAILABLE_ENDPOINTS,
            },
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        trace_id = get_trace_id(request)
        get_metrics(request).record_error()
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            extra={"trace_id": trace_id, "path": request.url.path},
            exc_info=True,
        )
        return PlainTextResponse(
            INTERNAL_ERROR_MESSAGE,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            headers=_trace_headers(trace_id),
        )
