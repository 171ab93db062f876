"""Domain errors – rejected arguments and failed lookups around the cache."""

from __future__ import annotations

from typing import Any

from harmony_cache.kernel.errors.base import BaseError


class DomainError(BaseError):
    default_code = "domain_error"


class ValidationError(DomainError):
    """An argument was rejected.

    ``errors`` lists one ``{"field": ..., "value": ...}`` dict per rejected
    argument, so a TTL table with several bad rows reports all of them.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    @classmethod
    def for_field(cls, field: str, value: Any, reason: str) -> ValidationError:
        """``ValidationError.for_field("interval", 0, "must be > 0")``."""
        return cls(f"{field} {reason}, got {value!r}", errors=[{"field": field, "value": value}])

    @property
    def fields(self) -> list[str]:
        return [e["field"] for e in self.errors if "field" in e]

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class NotFoundError(DomainError):
    """A named cache or warm-up loader is not registered."""

    default_code = "not_found"

    def __init__(self, resource: str, identifier: Any = None, **kwargs: Any) -> None:
        msg = f"{resource} not found" if identifier is None else f"{resource} '{identifier}' not found"
        kwargs.setdefault("detail", {"resource": resource, "identifier": identifier})
        super().__init__(msg, **kwargs)
        self.resource = resource
        self.identifier = identifier


class ConflictError(DomainError):
    """A name is already taken, e.g. registering the same cache twice."""

    default_code = "conflict"


__all__ = [
    "ConflictError",
    "DomainError",
    "NotFoundError",
    "ValidationError",
]
