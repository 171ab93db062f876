"""Observability – Counter, Gauge, Metrics ports.

The cache reports ``cache.hits``/``cache.misses``/``cache.expirations``/
``cache.evictions`` counters and a ``cache.entries`` gauge, each labelled
with ``{"cache": <name>}``.
"""
from __future__ import annotations

import abc


class Counter(abc.ABC):
    """Monotonically increasing counter."""

    @abc.abstractmethod
    def add(self, value: float = 1.0, labels: dict[str, str] | None = None) -> None: ...


class Gauge(abc.ABC):
    """Last-value gauge."""

    @abc.abstractmethod
    def set(self, value: float, labels: dict[str, str] | None = None) -> None: ...


class Metrics(abc.ABC):
    """Port: factory for metric instruments."""

    @abc.abstractmethod
    def counter(self, name: str, description: str = "", unit: str = "") -> Counter: ...

    @abc.abstractmethod
    def gauge(self, name: str, description: str = "", unit: str = "") -> Gauge: ...


__all__ = ["Counter", "Gauge", "Metrics"]
