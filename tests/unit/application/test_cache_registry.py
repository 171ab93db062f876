"""Unit tests for CacheRegistry."""

from __future__ import annotations

import pytest

from harmony_cache.application.cache import (
    PATIENT_CACHE,
    QUERY_CACHE,
    USER_CACHE,
    CacheRegistry,
    CacheSweeper,
    CacheTag,
    TagIndexedCache,
)
from harmony_cache.config.settings import CacheSettings
from harmony_cache.kernel.errors import ConflictError, NotFoundError
from harmony_cache.testing.fakes import FakeMetricsRegistry


class TestCacheRegistry:
    def test_register_and_get(self, fake_clock) -> None:
        registry = CacheRegistry(clock=fake_clock)
        cache = registry.register("wards", default_ttl=30)
        assert isinstance(cache, TagIndexedCache)
        assert registry.get("wards") is cache
        assert registry["wards"] is cache
        assert "wards" in registry
        assert cache.default_ttl == 30
        assert cache.name == "wards"

    def test_registry_default_ttl(self) -> None:
        registry = CacheRegistry(default_ttl=42)
        assert registry.register("x").default_ttl == 42

    def test_duplicate_name(self) -> None:
        registry = CacheRegistry()
        registry.register("x")
        with pytest.raises(ConflictError):
            registry.register("x")

    def test_unknown_name(self) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            CacheRegistry().get("nope")
        assert exc_info.value.identifier == "nope"

    def test_from_settings(self, fake_clock) -> None:
        settings = CacheSettings(query_ttl=60, user_ttl=120, patient_ttl=30)
        registry = CacheRegistry.from_settings(settings, clock=fake_clock)
        assert registry.names == [QUERY_CACHE, USER_CACHE, PATIENT_CACHE]
        assert registry[QUERY_CACHE].default_ttl == 60
        assert registry[USER_CACHE].default_ttl == 120
        assert registry[PATIENT_CACHE].default_ttl == 30

    def test_caches_are_independent(self, fake_clock) -> None:
        registry = CacheRegistry.from_settings(CacheSettings(), clock=fake_clock)
        registry[USER_CACHE].set("k", "user")
        registry[PATIENT_CACHE].set("k", "patient")
        registry[USER_CACHE].delete("k")
        assert registry[PATIENT_CACHE].get("k") == "patient"

    def test_invalidator_spans_all_caches(self, fake_clock) -> None:
        registry = CacheRegistry.from_settings(CacheSettings(), clock=fake_clock)
        tag = CacheTag.for_record("patients", 42)
        registry[QUERY_CACHE].set("q", 1, tags=[tag])
        registry[PATIENT_CACHE].set("p", 2, tags=[tag])
        event = registry.invalidator().invalidate("patients", 42, strategy="exact")
        assert event.keys_removed == 2

    def test_clear_all_and_iteration(self, fake_clock) -> None:
        registry = CacheRegistry.from_settings(CacheSettings(), clock=fake_clock)
        for cache in registry:
            cache.set("k", "v")
        registry.clear_all()
        assert all(len(c) == 0 for c in registry.caches())

    def test_shared_metrics_labelled_per_cache(self, fake_clock) -> None:
        metrics = FakeMetricsRegistry()
        registry = CacheRegistry.from_settings(CacheSettings(), clock=fake_clock, metrics=metrics)
        registry[QUERY_CACHE].get("missing")
        registry[USER_CACHE].get("missing")
        registry[USER_CACHE].get("missing")
        misses = metrics.counter("cache.misses")
        assert misses.total_for(cache=QUERY_CACHE) == 1
        assert misses.total_for(cache=USER_CACHE) == 2


class TestRegistrySweeper:
    def test_no_sweeper_by_default(self, fake_clock) -> None:
        assert CacheRegistry.from_settings(CacheSettings(), clock=fake_clock).sweeper() is None

    def test_no_sweeper_without_settings(self) -> None:
        registry = CacheRegistry()
        registry.register("x")
        assert registry.sweeper() is None

    def test_sweeper_follows_settings(self, fake_clock) -> None:
        settings = CacheSettings(sweep_interval=30, sweep_batch_size=2)
        registry = CacheRegistry.from_settings(settings, clock=fake_clock)
        for i in range(3):
            registry[QUERY_CACHE].set(f"q{i}", i, ttl=1)
            registry[USER_CACHE].set(f"u{i}", i, ttl=1)
        fake_clock.advance(seconds=2)
        sweeper = registry.sweeper()
        assert isinstance(sweeper, CacheSweeper)
        assert sweeper.running is False
        # two per cache per pass
        assert sweeper.sweep_once() == 4
        assert sweeper.sweep_once() == 2
        assert sweeper.sweep_once() == 0
