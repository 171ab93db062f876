"""Application cache – cross-entity invalidation on top of tags.

Readers tag each cached query with the entity tag, the collection tag and,
for single records, the record tag (see :class:`CacheTag`). Writers then call
:meth:`CacheInvalidator.invalidate_after_mutation` and every affected read in
every registered cache is dropped without the writer knowing any key.
"""
from __future__ import annotations

import dataclasses
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping, Sequence

from harmony_cache.application.cache.keys import CacheTag
from harmony_cache.application.cache.store import TaggedCacheStore
from harmony_cache.kernel.errors import ValidationError
from harmony_cache.observability.logging import get_logger

__all__ = [
    "ENTITY_RELATIONSHIPS",
    "CacheInvalidationEvent",
    "CacheInvalidator",
    "InvalidationStrategy",
    "InvalidationTarget",
    "MutationKind",
]

logger = get_logger(__name__)

ENTITY_RELATIONSHIPS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "patients": ("appointments", "prescriptions", "lab_orders", "invoices", "consultations"),
    "appointments": ("patients", "consultations", "patient_queue"),
    "prescriptions": ("patients", "medications"),
    "lab_orders": ("patients", "lab_results"),
    "invoices": ("patients", "payments"),
    "staff": ("appointments", "consultations", "departments"),
    "departments": ("staff", "appointments", "patient_queue"),
})


class InvalidationStrategy(str, Enum):
    EXACT = "exact"      # the record tag only
    PREFIX = "prefix"    # everything cached for the entity
    RELATED = "related"  # the entity plus its related entities
    ALL = "all"          # every cache, unconditionally


class MutationKind(str, Enum):
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


@dataclasses.dataclass(frozen=True)
class CacheInvalidationEvent:
    """Outcome of one invalidation call."""
    tags: tuple[str, ...] = ()
    keys_removed: int = 0
    cleared: bool = False


@dataclasses.dataclass(frozen=True)
class InvalidationTarget:
    entity: str
    record_id: str | int | None = None
    strategy: InvalidationStrategy = InvalidationStrategy.RELATED


class CacheInvalidator:
    """Applies entity-level invalidation strategies to a set of caches."""

    def __init__(
        self,
        caches: Iterable[TaggedCacheStore],
        relationships: Mapping[str, Sequence[str]] | None = None,
    ) -> None:
        self._caches = list(caches)
        self._relationships = ENTITY_RELATIONSHIPS if relationships is None else relationships

    def related_entities(self, entity: str) -> tuple[str, ...]:
        return tuple(self._relationships.get(entity, ()))

    def tags_for(
        self,
        entity: str,
        record_id: str | int | None = None,
        strategy: InvalidationStrategy | str = InvalidationStrategy.RELATED,
    ) -> tuple[str, ...]:
        """Return the tags *strategy* would invalidate, in a stable order."""
        strategy = InvalidationStrategy(strategy)
        tags: list[str] = []
        if strategy is InvalidationStrategy.EXACT:
            if record_id is not None:
                tags.append(CacheTag.for_record(entity, record_id))
        elif strategy in (InvalidationStrategy.PREFIX, InvalidationStrategy.RELATED):
            entities = [entity]
            if strategy is InvalidationStrategy.RELATED:
                entities.extend(self.related_entities(entity))
            for name in entities:
                tags.append(CacheTag.for_entity(name))
                tags.append(CacheTag.for_collection(name))
        return tuple(dict.fromkeys(tags))

    def invalidate(
        self,
        entity: str,
        record_id: str | int | None = None,
        hospital_id: str | int | None = None,
        strategy: InvalidationStrategy | str = InvalidationStrategy.RELATED,
    ) -> CacheInvalidationEvent:
        strategy = InvalidationStrategy(strategy)
        if strategy is InvalidationStrategy.ALL:
            self.clear_all()
            return CacheInvalidationEvent(cleared=True)

        tags = list(self.tags_for(entity, record_id, strategy))
        if hospital_id is not None:
            tags.append(CacheTag.for_hospital(hospital_id))
        return self._invalidate_tags(tags, entity=entity, strategy=strategy.value)

    def invalidate_after_mutation(
        self,
        entity: str,
        mutation: MutationKind | str,
        record_id: str | int | None = None,
        hospital_id: str | int | None = None,
    ) -> CacheInvalidationEvent:
        """Deletes cascade to related entities; creates and updates do not."""
        try:
            mutation = MutationKind(mutation)
        except ValueError as exc:
            raise ValidationError.for_field("mutation", mutation, "must be create, update or delete") from exc
        strategy = InvalidationStrategy.RELATED if mutation is MutationKind.DELETE else InvalidationStrategy.PREFIX
        tags = list(self.tags_for(entity, record_id, strategy))
        if record_id is not None:
            tags.append(CacheTag.for_record(entity, record_id))
        if hospital_id is not None:
            tags.append(CacheTag.for_hospital(hospital_id))
        return self._invalidate_tags(tags, entity=entity, mutation=mutation.value)

    def invalidate_multiple(
        self,
        targets: Iterable[InvalidationTarget],
        hospital_id: str | int | None = None,
    ) -> list[CacheInvalidationEvent]:
        return [
            self.invalidate(t.entity, t.record_id, hospital_id=hospital_id, strategy=t.strategy)
            for t in targets
        ]

    def clear_all(self) -> None:
        for cache in self._caches:
            cache.clear()

    def _invalidate_tags(self, tags: Sequence[str], **context: str) -> CacheInvalidationEvent:
        unique = tuple(dict.fromkeys(tags))
        removed = 0
        for cache in self._caches:
            for tag in unique:
                removed += cache.invalidate_by_tag(tag)
        logger.debug("cache.invalidated", tags=list(unique), keys_removed=removed, **context)
        return CacheInvalidationEvent(tags=unique, keys_removed=removed)
