"""Tracing Middleware: per-request trace id, request counting, timing logs.

Invariants:
    - Every request gets request.state.trace_id before any route runs
    - Every request increments metrics.total_requests
    - Every response that passes through carries the X-Trace-Id header
"""

import logging
import time

from fastapi import FastAPI, Request

from roman_api.infrastructure.observability import new_trace_id

logger = logging.getLogger(__name__)

TRACE_HEADER = "X-Trace-Id"


def register_tracing(app: FastAPI) -> None:
    """Install the tracing middleware on the app."""

    @app.middleware("http")
    async def trace_requests(request: Request, call_next):
        trace_id = new_trace_id()
        request.state.trace_id = trace_id
        started = time.perf_counter()
        logger.info(
            f"{request.method} {request.url.path}",
            extra={
                "trace_id": trace_id,
                "method": request.method,
                "path": request.url.path,
            },
        )
        request.app.state.metrics.record_request()

        response = await call_next(request)

        duration_ms = round((time.perf_counter() - started) * 1000, 2)
        response.headers[TRACE_HEADER] = trace_id
        logger.info(
            f"Request completed in {duration_ms}ms - Status: {response.status_code}",
            extra={
                "trace_id": trace_id,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
            },
        )
        return response
