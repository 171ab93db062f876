"""Application cache – TaggedCacheStore port and the in-memory TagIndexedCache.

Expiry is lazy: an entry past its deadline is dropped the next time it is
read through :meth:`TagIndexedCache.get` / :meth:`TagIndexedCache.has`, or by
an explicit :meth:`TagIndexedCache.purge_expired` sweep. ``get_stats`` never
purges.
"""
from __future__ import annotations

from typing import Any, Iterable, Protocol, runtime_checkable

from harmony_cache.application.cache.entry import CacheEntry, CacheEntryInfo, CacheStats
from harmony_cache.kernel.time import Clock, SystemClock
from harmony_cache.observability.logging import get_logger
from harmony_cache.observability.metrics import Metrics, NoopMetrics

__all__ = ["DEFAULT_TTL", "TagIndexedCache", "TaggedCacheStore"]

DEFAULT_TTL: float = 300.0  # seconds

logger = get_logger(__name__)


@runtime_checkable
class TaggedCacheStore(Protocol):
    def set(self, key: str, value: Any, ttl: float | None = None, tags: Iterable[str] | None = None) -> None: ...
    def get(self, key: str) -> Any: ...
    def has(self, key: str) -> bool: ...
    def delete(self, key: str) -> None: ...
    def invalidate_by_tag(self, tag: str) -> int: ...  # returns number of removed keys
    def clear(self) -> None: ...
    def get_stats(self) -> CacheStats: ...


class TagIndexedCache:
    """Process-local key/value cache with per-entry TTL and tag invalidation.

    Every operation runs to completion synchronously; there are no timers or
    background threads. One instance per concern (query results, users,
    patients) is the intended usage, see :class:`CacheRegistry`.

    Parameters
    ----------
    name:
        Label used in log events and metric labels.
    default_ttl:
        Seconds an entry lives when :meth:`set` is called without ``ttl``.
    clock:
        Time source; defaults to :class:`SystemClock`.
    metrics:
        Metrics backend for hit/miss/expiry/eviction counters and the
        ``cache.entries`` size gauge.
    """

    def __init__(
        self,
        name: str = "default",
        default_ttl: float = DEFAULT_TTL,
        clock: Clock | None = None,
        metrics: Metrics | None = None,
    ) -> None:
        self.name = name
        self.default_ttl = default_ttl
        self._clock: Clock = clock or SystemClock()
        self._entries: dict[str, CacheEntry] = {}
        self._tag_index: dict[str, set[str]] = {}  # tag -> {keys}
        self._labels = {"cache": name}
        metrics = metrics or NoopMetrics()
        self._hits = metrics.counter("cache.hits", "Cache reads served from memory")
        self._misses = metrics.counter("cache.misses", "Cache reads that found nothing live")
        self._expirations = metrics.counter("cache.expirations", "Entries dropped after their TTL")
        self._evictions = metrics.counter("cache.evictions", "Entries dropped by tag invalidation")
        self._size = metrics.gauge("cache.entries", "Entries currently stored, expired or not")

    def __repr__(self) -> str:
        return f"TagIndexedCache(name={self.name!r}, size={len(self._entries)})"

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has(key)

    # ------------------------------------------------------------------
    # Core operations
    # ------------------------------------------------------------------

    def set(
        self,
        key: str,
        value: Any,
        ttl: float | None = None,
        tags: Iterable[str] | None = None,
    ) -> None:
        """Store *value* under *key*, replacing any previous entry and its tags."""
        if key in self._entries:
            self._unlink(key, self._entries[key].tags)
        ttl = self.default_ttl if ttl is None else ttl
        # a bare string is one tag, not an iterable of characters
        tag_set = frozenset((tags,) if isinstance(tags, str) else (tags or ()))
        self._entries[key] = CacheEntry(value, self._clock.timestamp() + ttl, tag_set)
        for tag in tag_set:
            self._tag_index.setdefault(tag, set()).add(key)
        self._size.set(len(self._entries), self._labels)

    def get(self, key: str) -> Any:
        """Return the live value for *key*, or ``None``."""
        entry = self._entries.get(key)
        if entry is None:
            self._misses.add(1, self._labels)
            return None
        if entry.is_expired(self._clock.timestamp()):
            self._remove(key)
            self._expirations.add(1, self._labels)
            self._misses.add(1, self._labels)
            logger.debug("cache.expired", cache=self.name, key=key)
            return None
        self._hits.add(1, self._labels)
        return entry.value

    def has(self, key: str) -> bool:
        return self.get(key) is not None

    def delete(self, key: str) -> None:
        if key in self._entries:
            self._remove(key)

    def invalidate_by_tag(self, tag: str) -> int:
        """Drop every entry indexed under *tag*; returns how many were removed."""
        keys = self._tag_index.pop(tag, None)
        if not keys:
            return 0
        for key in list(keys):
            self._remove(key)
        self._evictions.add(len(keys), self._labels)
        logger.debug("cache.tag_invalidated", cache=self.name, tag=tag, keys_removed=len(keys))
        return len(keys)

    def clear(self) -> None:
        size = len(self._entries)
        self._entries.clear()
        self._tag_index.clear()
        self._size.set(0, self._labels)
        logger.info("cache.cleared", cache=self.name, keys_removed=size)

    def get_stats(self) -> CacheStats:
        """Report every stored entry without checking or purging expiry."""
        now = self._clock.timestamp()
        return CacheStats(
            size=len(self._entries),
            entries=tuple(
                CacheEntryInfo(key=key, tags=entry.tags, ttl_remaining=entry.ttl_remaining(now))
                for key, entry in self._entries.items()
            ),
        )

    # ------------------------------------------------------------------
    # Extras
    # ------------------------------------------------------------------

    @property
    def tags(self) -> set[str]:
        return set(self._tag_index)

    def keys_for_tag(self, tag: str) -> set[str]:
        return set(self._tag_index.get(tag, ()))

    def purge_expired(self, limit: int | None = None) -> int:
        """Remove up to *limit* expired entries (all of them when ``None``)."""
        now = self._clock.timestamp()
        expired: list[str] = []
        for key, entry in self._entries.items():
            if limit is not None and len(expired) >= limit:
                break
            if entry.is_expired(now):
                expired.append(key)
        for key in expired:
            self._remove(key)
        if expired:
            self._expirations.add(len(expired), self._labels)
            logger.info("cache.purged", cache=self.name, keys_removed=len(expired))
        return len(expired)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _remove(self, key: str) -> None:
        entry = self._entries.pop(key)
        self._unlink(key, entry.tags)
        self._size.set(len(self._entries), self._labels)

    def _unlink(self, key: str, tags: Iterable[str]) -> None:
        for tag in tags:
            keys = self._tag_index.get(tag)
            if keys is None:
                continue
            keys.discard(key)
            if not keys:
                del self._tag_index[tag]
