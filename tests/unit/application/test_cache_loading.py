"""Unit tests for get_or_load, @cached and CacheWarmupService."""

from __future__ import annotations

import asyncio

import pytest

from harmony_cache.application.cache import (
    CacheKey,
    CacheTag,
    CacheWarmupService,
    TagIndexedCache,
    cached,
    get_or_load,
)
from harmony_cache.kernel.errors import NotFoundError


class TestGetOrLoad:
    def test_loads_on_miss_then_serves_from_cache(self, tag_cache: TagIndexedCache) -> None:
        calls: list[int] = []

        def loader() -> dict:
            calls.append(1)
            return {"id": 42}

        first = get_or_load(tag_cache, "patients:42", loader, ttl=60, tags=["patient-42"])
        second = get_or_load(tag_cache, "patients:42", loader)
        assert first == second == {"id": 42}
        assert len(calls) == 1
        assert tag_cache.keys_for_tag("patient-42") == {"patients:42"}

    def test_reloads_after_invalidation(self, tag_cache: TagIndexedCache) -> None:
        values = iter(["v1", "v2"])
        get_or_load(tag_cache, "k", lambda: next(values), tags=["t"])
        tag_cache.invalidate_by_tag("t")
        assert get_or_load(tag_cache, "k", lambda: next(values)) == "v2"

    def test_none_not_cached(self, tag_cache: TagIndexedCache) -> None:
        assert get_or_load(tag_cache, "k", lambda: None) is None
        assert tag_cache.get_stats().size == 0

    def test_loader_error_propagates(self, tag_cache: TagIndexedCache) -> None:
        def boom() -> str:
            raise RuntimeError("backend down")

        with pytest.raises(RuntimeError, match="backend down"):
            get_or_load(tag_cache, "k", boom)
        assert tag_cache.get_stats().size == 0


class TestCachedDecorator:
    def test_result_cached_second_call(self, tag_cache: TagIndexedCache) -> None:
        calls: list[int] = []

        @cached(
            tag_cache,
            ttl=60,
            key_fn=lambda pid: CacheKey.for_resource("patients", pid),
            tags=lambda pid: [CacheTag.for_record("patient", pid)],
        )
        async def fetch_patient(pid: int) -> dict:
            calls.append(pid)
            return {"id": pid}

        asyncio.run(fetch_patient(5))
        asyncio.run(fetch_patient(5))
        assert calls == [5]
        assert tag_cache.keys_for_tag("patient-5") == {"patients:5"}
        assert fetch_patient.cache is tag_cache

    def test_different_keys_not_shared(self, tag_cache: TagIndexedCache) -> None:
        calls: list[int] = []

        @cached(tag_cache, tags=["patients-list"])
        async def compute(x: int) -> int:
            calls.append(x)
            return x * 2

        assert asyncio.run(compute(1)) == 2
        assert asyncio.run(compute(2)) == 4
        assert len(calls) == 2
        assert len(tag_cache.keys_for_tag("patients-list")) == 2

    def test_expired_result_refetched(self, tag_cache: TagIndexedCache, fake_clock) -> None:
        calls: list[int] = []

        @cached(tag_cache, ttl=1, key_fn=lambda: "k")
        async def fetch() -> str:
            calls.append(1)
            return "v"

        asyncio.run(fetch())
        fake_clock.advance(seconds=2)
        asyncio.run(fetch())
        assert len(calls) == 2


class TestCacheWarmupService:
    def test_warm_loads_and_stores(self, tag_cache: TagIndexedCache) -> None:
        warmer = CacheWarmupService(tag_cache)

        async def _dashboard() -> list[str]:
            return ["admissions", "discharges"]

        warmer.register("dashboard", _dashboard, ttl=30, tags=["dashboard"])
        result = asyncio.run(warmer.warm("dashboard"))
        assert result == ["admissions", "discharges"]
        assert tag_cache.get("dashboard") == result
        assert tag_cache.get_stats().entry("dashboard").ttl_remaining == pytest.approx(30)

    def test_warm_unknown_key(self, tag_cache: TagIndexedCache) -> None:
        with pytest.raises(NotFoundError):
            asyncio.run(CacheWarmupService(tag_cache).warm("nope"))

    def test_warm_all(self, tag_cache: TagIndexedCache) -> None:
        warmer = CacheWarmupService(tag_cache)

        async def _one() -> int:
            return 1

        async def _two() -> int:
            return 2

        warmer.register("a", _one)
        warmer.register("b", _two)
        assert warmer.keys == ["a", "b"]
        assert asyncio.run(warmer.warm_all()) == {"a": 1, "b": 2}
        assert tag_cache.get_stats().size == 2
