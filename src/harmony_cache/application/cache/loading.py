"""Application cache – cache-aside helpers and CacheWarmupService.

A data-fetching collaborator reads the cache first, falls back to the
backend on a miss and stores the fetched result with its TTL and tags.
"""
from __future__ import annotations

import dataclasses
import functools
from typing import Any, Awaitable, Callable, Iterable, TypeVar

from harmony_cache.application.cache.store import TaggedCacheStore
from harmony_cache.kernel.errors import NotFoundError
from harmony_cache.observability.logging import get_logger

__all__ = ["CacheWarmupService", "cached", "get_or_load"]

T = TypeVar("T")

logger = get_logger(__name__)

TagsArg = Iterable[str] | Callable[..., Iterable[str]] | None


def get_or_load(
    cache: TaggedCacheStore,
    key: str,
    loader: Callable[[], T],
    ttl: float | None = None,
    tags: Iterable[str] | None = None,
) -> T:
    """Return the cached value for *key* or load, store and return it.

    ``None`` results are returned but not stored. Loader exceptions propagate.
    """
    value = cache.get(key)
    if value is not None:
        return value  # type: ignore[no-any-return]
    value = loader()
    if value is not None:
        cache.set(key, value, ttl=ttl, tags=tags)
    return value


def cached(
    cache: TaggedCacheStore,
    ttl: float | None = None,
    key_fn: Callable[..., str] | None = None,
    tags: TagsArg = None,
) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
    """Decorator: caches an async fetch function's result in *cache*.

    *key_fn* and a callable *tags* receive the same args/kwargs as the
    wrapped function, so a per-record tag can be derived from the call::

        @cached(patient_cache, ttl=60,
                key_fn=lambda pid: CacheKey.for_resource("patients", pid),
                tags=lambda pid: [CacheTag.for_record("patient", pid)])
        async def fetch_patient(pid): ...
    """

    def decorator(fn: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @functools.wraps(fn)
        async def wrapper(*args: Any, **kwargs: Any) -> T:
            key = key_fn(*args, **kwargs) if key_fn else f"{fn.__qualname__}:{args}:{sorted(kwargs.items())}"
            cached_val = cache.get(key)
            if cached_val is not None:
                return cached_val  # type: ignore[no-any-return]
            result = await fn(*args, **kwargs)
            if result is not None:
                entry_tags = tags(*args, **kwargs) if callable(tags) else tags
                cache.set(key, result, ttl=ttl, tags=entry_tags)
            return result

        wrapper.cache = cache  # type: ignore[attr-defined]
        return wrapper

    return decorator


@dataclasses.dataclass(frozen=True)
class _Loader:
    fn: Callable[[], Awaitable[Any]]
    ttl: float | None
    tags: tuple[str, ...]


class CacheWarmupService:
    """Pre-populates cache entries, e.g. dashboard queries at start-up."""

    def __init__(self, cache: TaggedCacheStore) -> None:
        self._cache = cache
        self._loaders: dict[str, _Loader] = {}

    def register(
        self,
        key: str,
        loader: Callable[[], Awaitable[Any]],
        ttl: float | None = None,
        tags: Iterable[str] | None = None,
    ) -> None:
        self._loaders[key] = _Loader(loader, ttl, tuple(tags or ()))

    @property
    def keys(self) -> list[str]:
        return list(self._loaders)

    async def warm(self, key: str) -> Any:
        if key not in self._loaders:
            raise NotFoundError("Warm-up loader", key)
        registered = self._loaders[key]
        value = await registered.fn()
        self._cache.set(key, value, ttl=registered.ttl, tags=registered.tags)
        return value

    async def warm_all(self) -> dict[str, Any]:
        results = {key: await self.warm(key) for key in self._loaders}
        logger.info("cache.warmed", keys=len(results))
        return results
