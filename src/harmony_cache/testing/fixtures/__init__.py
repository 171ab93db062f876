"""Testing fixtures – pytest fixtures for fake doubles and caches."""
from harmony_cache.testing.fixtures.clock import fake_clock
from harmony_cache.testing.fixtures.cache import fake_metrics, tag_cache

__all__ = ["fake_clock", "fake_metrics", "tag_cache"]
