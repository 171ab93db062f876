"""Application cache – CacheRegistry, the owner of named cache instances.

Built once by the application's composition root and passed to whoever needs
a cache; nothing in this package keeps module-level cache instances.
"""
from __future__ import annotations

from typing import Iterator

from harmony_cache.application.cache.invalidation import CacheInvalidator
from harmony_cache.application.cache.store import DEFAULT_TTL, TagIndexedCache
from harmony_cache.application.cache.sweeper import CacheSweeper
from harmony_cache.config.settings import CacheSettings
from harmony_cache.kernel.errors import ConflictError, NotFoundError
from harmony_cache.kernel.time import Clock, SystemClock
from harmony_cache.observability.metrics import Metrics, NoopMetrics

__all__ = ["QUERY_CACHE", "PATIENT_CACHE", "USER_CACHE", "CacheRegistry"]

QUERY_CACHE = "query"
USER_CACHE = "user"
PATIENT_CACHE = "patient"


class CacheRegistry:
    """Named, independent :class:`TagIndexedCache` instances sharing a clock."""

    def __init__(
        self,
        clock: Clock | None = None,
        metrics: Metrics | None = None,
        default_ttl: float = DEFAULT_TTL,
    ) -> None:
        self._clock = clock or SystemClock()
        self._metrics = metrics or NoopMetrics()
        self._default_ttl = default_ttl
        self._caches: dict[str, TagIndexedCache] = {}
        self.settings: CacheSettings | None = None

    @classmethod
    def from_settings(
        cls,
        settings: CacheSettings,
        clock: Clock | None = None,
        metrics: Metrics | None = None,
    ) -> "CacheRegistry":
        registry = cls(clock=clock, metrics=metrics, default_ttl=settings.default_ttl)
        registry.settings = settings
        registry.register(QUERY_CACHE, default_ttl=settings.query_ttl)
        registry.register(USER_CACHE, default_ttl=settings.user_ttl)
        registry.register(PATIENT_CACHE, default_ttl=settings.patient_ttl)
        return registry

    def register(self, name: str, default_ttl: float | None = None) -> TagIndexedCache:
        if name in self._caches:
            raise ConflictError(f"Cache '{name}' is already registered", detail={"cache": name})
        cache = TagIndexedCache(
            name=name,
            default_ttl=self._default_ttl if default_ttl is None else default_ttl,
            clock=self._clock,
            metrics=self._metrics,
        )
        self._caches[name] = cache
        return cache

    def get(self, name: str) -> TagIndexedCache:
        try:
            return self._caches[name]
        except KeyError:
            raise NotFoundError("Cache", name) from None

    def __getitem__(self, name: str) -> TagIndexedCache:
        return self.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._caches

    def __iter__(self) -> Iterator[TagIndexedCache]:
        return iter(self._caches.values())

    @property
    def names(self) -> list[str]:
        return list(self._caches)

    def caches(self) -> list[TagIndexedCache]:
        return list(self._caches.values())

    def sweeper(self) -> CacheSweeper | None:
        """Sweeper over every registered cache, or ``None`` when sweeping is off.

        Sweeping is on only for registries built by :meth:`from_settings`
        with a positive ``sweep_interval``.
        """
        if self.settings is None or not self.settings.sweep_enabled:
            return None
        return CacheSweeper(
            self.caches(),
            interval=self.settings.sweep_interval,
            batch_size=self.settings.sweep_batch_size,
        )

    def invalidator(self) -> CacheInvalidator:
        return CacheInvalidator(self.caches())

    def clear_all(self) -> None:
        for cache in self._caches.values():
            cache.clear()
