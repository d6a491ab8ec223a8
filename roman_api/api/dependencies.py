"""Request-scoped dependencies: metrics collector and trace id."""

from fastapi import Request

from roman_api.config import Settings
from roman_api.core.metrics import MetricsCollector


def get_metrics(request: Request) -> MetricsCollector:
    return request.app.state.metrics


def get_trace_id(request: Request) -> str | None:
    return getattr(request.state, "trace_id", None)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
