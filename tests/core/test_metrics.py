"""MetricsCollector tests: counters, uptime, independence between instances."""

from roman_api.core.metrics import MetricsCollector


class _FakeClock:
    def __init__(self, now: float = 100.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


def test_starts_at_zero():
    snap = MetricsCollector(clock=_FakeClock()).snapshot()
    assert snap == {
        "uptime": 0,
        "total_requests": 0,
        "successful_conversions": 0,
        "error_count": 0,
    }


def test_counters_increment():
    m = MetricsCollector()
    m.record_request()
    m.record_request()
    m.record_success()
    m.record_error()
    assert m.total_requests == 2
    assert m.successful_conversions == 1
    assert m.error_count == 1


def test_uptime_floors_to_whole_seconds():
    clock = _FakeClock(10.0)
    m = MetricsCollector(clock=clock)
    clock.now = 12.9
    assert m.uptime_seconds() == 2


def test_instances_do_not_share_counters():
    a, b = MetricsCollector(), MetricsCollector()
    a.record_request()
    assert b.total_requests == 0
