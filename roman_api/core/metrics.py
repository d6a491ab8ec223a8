"""Metrics Collector: request/success/error counters owned by one application.

Invariants:
    - One collector per FastAPI app (app.state.metrics), never module-level
    - Counters only grow; uptime is floored to whole seconds
    - Updates are best-effort, not synchronized (approximate telemetry)

Design Decisions:
    - Injectable clock: uptime is testable without sleeping
"""

import time
from typing import Callable


class MetricsCollector:
    """In-memory counters for the /metrics endpoint."""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._started_at = clock()
        self.total_requests = 0
        self.successful_conversions = 0
        self.error_count = 0

    def record_request(self) -> None:
        self.total_requests += 1

    def record_success(self) -> None:
        self.successful_conversions += 1

    def record_error(self) -> None:
        self.error_count += 1

    def uptime_seconds(self) -> int:
        return int(self._clock() - self._started_at)

    def snapshot(self) -> dict:
        """Current counters plus uptime, as a flat dict of ints."""
        return {
            "uptime": self.uptime_seconds(),
            "total_requests": self.total_requests,
            "successful_conversions": self.successful_conversions,
            "error_count": self.error_count,
        }
