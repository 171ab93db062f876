"""Application cache – CacheEntry and the read-only stats snapshot."""
from __future__ import annotations

import dataclasses
from typing import Any

__all__ = ["CacheEntry", "CacheEntryInfo", "CacheStats"]


@dataclasses.dataclass(slots=True)
class CacheEntry:
    """Internal record held by :class:`TagIndexedCache`; never handed out."""
    value: Any
    expires_at: float
    tags: frozenset[str] = frozenset()

    def is_expired(self, now: float) -> bool:
        return now > self.expires_at

    def ttl_remaining(self, now: float) -> float:
        return max(0.0, self.expires_at - now)


@dataclasses.dataclass(frozen=True)
class CacheEntryInfo:
    """Stats view of one entry: key, tags and seconds left to live."""
    key: str
    tags: frozenset[str]
    ttl_remaining: float


@dataclasses.dataclass(frozen=True)
class CacheStats:
    """Snapshot returned by :meth:`TagIndexedCache.get_stats`.

    ``size`` counts every stored entry, including ones that are past their
    expiry but have not been read since.
    """
    size: int
    entries: tuple[CacheEntryInfo, ...] = ()

    def keys(self) -> list[str]:
        return [e.key for e in self.entries]

    def entry(self, key: str) -> CacheEntryInfo | None:
        for e in self.entries:
            if e.key == key:
                return e
        return None
