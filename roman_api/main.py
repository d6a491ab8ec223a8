"""Roman Numeral API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Each app owns its MetricsCollector (app.state.metrics) and Settings
    - Global error handlers map RomanApiError -> plain-text 4xx/5xx responses
    - CORS configured from settings (not hardcoded)

Design Decisions:
    - create_app() factory: tests build isolated apps with fresh counters
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - Static client mounted at /ui so GET / stays the JSON info endpoint
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from roman_api.api.error_handlers import register_error_handlers
from roman_api.api.routes import conversion, health, info
from roman_api.api.tracing import register_tracing
from roman_api.config import Settings, get_settings
from roman_api.core.metrics import MetricsCollector
from roman_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"Roman Numeral API started on port {settings.port}")
    yield
    logger.info("Roman Numeral API shutting down")


def create_app(
    settings: Settings | None = None,
    metrics: MetricsCollector | None = None,
) -> FastAPI:
    """Build a fully wired application with its own metrics collector."""
    settings = settings or get_settings()
    app = FastAPI(
        title="Roman Numeral Converter API",
        version=settings.version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.metrics = metrics or MetricsCollector()

    register_tracing(app)
    # outermost: CORS preflight is answered before tracing runs
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Trace-Id"],
    )

    app.include_router(info.router)
    app.include_router(health.router)
    app.include_router(conversion.router)

    app.mount(
        "/ui", StaticFiles(directory=STATIC_DIR, html=True), name="ui",
    )

    register_error_handlers(app)
    return app


app = create_app()
