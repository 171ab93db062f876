"""Testing fakes – in-memory doubles for kernel and observability ports."""
from harmony_cache.testing.fakes.clock import DEFAULT_START, FakeClock
from harmony_cache.testing.fakes.metrics import FakeMetricsRegistry

__all__ = ["DEFAULT_START", "FakeClock", "FakeMetricsRegistry"]
