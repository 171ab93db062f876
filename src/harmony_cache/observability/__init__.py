"""Observability – structured logging and metrics ports."""

from harmony_cache.observability.logging import JsonLoggerFactory, SensitiveFieldsFilter, get_logger
from harmony_cache.observability.metrics import Counter, Gauge, Metrics, NoopMetrics

__all__ = [
    "Counter",
    "Gauge",
    "JsonLoggerFactory",
    "Metrics",
    "NoopMetrics",
    "SensitiveFieldsFilter",
    "get_logger",
]
