"""Application – caching building blocks (framework-agnostic)."""

from harmony_cache.application.cache import (
    CacheInvalidator,
    CacheKey,
    CacheRegistry,
    CacheTag,
    TagIndexedCache,
    TaggedCacheStore,
)

__all__ = [
    "CacheInvalidator",
    "CacheKey",
    "CacheRegistry",
    "CacheTag",
    "TagIndexedCache",
    "TaggedCacheStore",
]
