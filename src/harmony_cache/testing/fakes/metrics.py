"""Testing fakes – FakeMetricsRegistry."""
from __future__ import annotations

from harmony_cache.observability.metrics.ports import Counter, Gauge, Metrics


class _FakeCounter(Counter):
    """In-memory counter that records all add() calls."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._calls: list[tuple[float, dict[str, str] | None]] = []
        self.total: float = 0.0

    def add(self, value: float = 1.0, labels: dict[str, str] | None = None) -> None:
        self._calls.append((value, labels))
        self.total += value

    @property
    def call_count(self) -> int:
        return len(self._calls)

    def total_for(self, **labels: str) -> float:
        """Sum of values recorded with labels containing *labels*."""
        return sum(
            value for value, recorded in self._calls
            if all((recorded or {}).get(k) == v for k, v in labels.items())
        )


class _FakeGauge(Gauge):
    """In-memory gauge keeping the last value per label set."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.current: float = 0.0
        self._by_labels: dict[tuple[tuple[str, str], ...], float] = {}

    def set(self, value: float, labels: dict[str, str] | None = None) -> None:
        self.current = value
        self._by_labels[tuple(sorted((labels or {}).items()))] = value

    def value_for(self, **labels: str) -> float | None:
        return self._by_labels.get(tuple(sorted(labels.items())))


class FakeMetricsRegistry(Metrics):
    """In-memory :class:`Metrics` double that records all instrument calls.

    Usage::

        metrics = FakeMetricsRegistry()
        cache = TagIndexedCache(metrics=metrics)
        cache.get("missing")
        metrics.assert_counter_total("cache.misses", 1)
    """

    def __init__(self) -> None:
        self._counters: dict[str, _FakeCounter] = {}
        self._gauges: dict[str, _FakeGauge] = {}

    def counter(self, name: str, description: str = "", unit: str = "") -> _FakeCounter:
        if name not in self._counters:
            self._counters[name] = _FakeCounter(name)
        return self._counters[name]

    def gauge(self, name: str, description: str = "", unit: str = "") -> _FakeGauge:
        if name not in self._gauges:
            self._gauges[name] = _FakeGauge(name)
        return self._gauges[name]

    def assert_counter_total(self, name: str, total: float) -> None:
        """Assert the cumulative total for *name* counter equals *total*."""
        counter = self._counters.get(name)
        assert counter is not None, f"Counter '{name}' was never created"
        assert counter.total == total, (
            f"Counter '{name}' total is {counter.total}, expected {total}"
        )

    def reset(self) -> None:
        self._counters.clear()
        self._gauges.clear()


__all__ = ["FakeMetricsRegistry"]
