"""Application cache – per-entity TTL policy."""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from harmony_cache.kernel.errors import ValidationError

__all__ = ["DEFAULT_ENTITY_TTLS", "TtlPolicy"]

DEFAULT_ENTITY_TTLS: Mapping[str, float] = MappingProxyType({
    "patients": 5 * 60.0,
    "appointments": 2 * 60.0,
    "prescriptions": 10 * 60.0,
    "lab_results": 30 * 60.0,
    "billing": 15 * 60.0,
})


class TtlPolicy:
    """Maps an entity name to the TTL its cached reads should use.

    Frequently changing data (appointments) lives briefly; lab results,
    which rarely change once released, live longer.
    """

    def __init__(self, overrides: Mapping[str, float] | None = None, default: float = 300.0) -> None:
        errors = [
            {"field": name, "value": ttl}
            for name, ttl in {**(overrides or {}), "default": default}.items()
            if ttl < 0
        ]
        if errors:
            raise ValidationError("TTL values must be >= 0", errors=errors)
        self._ttls = {**DEFAULT_ENTITY_TTLS, **(overrides or {})}
        self._default = default

    @property
    def default(self) -> float:
        return self._default

    def ttl_for(self, entity: str) -> float:
        return self._ttls.get(entity, self._default)

    def as_dict(self) -> dict[str, float]:
        return dict(self._ttls)
