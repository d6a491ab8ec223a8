"""Health & Metrics: liveness probe and counter snapshot.

Invariants:
    - GET /health always returns 200 if process is up
    - GET /metrics reads the app-owned collector, never a module global
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status

from roman_api.api.dependencies import get_metrics, get_trace_id
from roman_api.core.metrics import MetricsCollector
from roman_api.schemas.conversion import HealthResponse, MetricsResponse

router = APIRouter(tags=["health"])


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get(
    "/health", response_model=HealthResponse, status_code=status.HTTP_200_OK,
)
async def health_check(trace_id: str | None = Depends(get_trace_id)):
    """Basic liveness probe. Returns 200 if the process is up."""
    return HealthResponse(timestamp=_now(), trace_id=trace_id)


@router.get("/metrics", response_model=MetricsResponse)
async def read_metrics(
    metrics: MetricsCollector = Depends(get_metrics),
    trace_id: str | None = Depends(get_trace_id),
):
    return MetricsResponse(
        **metrics.snapshot(), timestamp=_now(), trace_id=trace_id,
    )
