"""Shared pytest fixtures: fake_clock, fake_metrics, tag_cache."""
from harmony_cache.testing.fixtures import fake_clock, fake_metrics, tag_cache  # noqa: F401
