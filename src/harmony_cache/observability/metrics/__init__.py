"""Observability – metrics ports."""
from harmony_cache.observability.metrics.ports import Counter, Gauge, Metrics
from harmony_cache.observability.metrics.noop import NoopMetrics

__all__ = ["Counter", "Gauge", "Metrics", "NoopMetrics"]
