"""Application cache – tag-indexed TTL cache and the helpers around it."""
from harmony_cache.application.cache.entry import CacheEntry, CacheEntryInfo, CacheStats
from harmony_cache.application.cache.store import DEFAULT_TTL, TagIndexedCache, TaggedCacheStore
from harmony_cache.application.cache.keys import RECORD_TAG_PREFIXES, CacheKey, CacheTag
from harmony_cache.application.cache.ttl import DEFAULT_ENTITY_TTLS, TtlPolicy
from harmony_cache.application.cache.invalidation import (
    ENTITY_RELATIONSHIPS,
    CacheInvalidationEvent,
    CacheInvalidator,
    InvalidationStrategy,
    InvalidationTarget,
    MutationKind,
)
from harmony_cache.application.cache.loading import CacheWarmupService, cached, get_or_load
from harmony_cache.application.cache.sweeper import CacheSweeper
from harmony_cache.application.cache.registry import (
    PATIENT_CACHE,
    QUERY_CACHE,
    USER_CACHE,
    CacheRegistry,
)

__all__ = [
    "DEFAULT_ENTITY_TTLS",
    "DEFAULT_TTL",
    "ENTITY_RELATIONSHIPS",
    "PATIENT_CACHE",
    "QUERY_CACHE",
    "RECORD_TAG_PREFIXES",
    "USER_CACHE",
    "CacheEntry",
    "CacheEntryInfo",
    "CacheInvalidationEvent",
    "CacheInvalidator",
    "CacheKey",
    "CacheRegistry",
    "CacheStats",
    "CacheSweeper",
    "CacheTag",
    "CacheWarmupService",
    "InvalidationStrategy",
    "InvalidationTarget",
    "MutationKind",
    "TagIndexedCache",
    "TaggedCacheStore",
    "TtlPolicy",
    "cached",
    "get_or_load",
]
