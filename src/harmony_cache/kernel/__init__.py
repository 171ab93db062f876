"""Kernel – framework-agnostic building blocks (errors, time)."""

from harmony_cache.kernel.errors import (
    ApplicationError,
    BaseError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from harmony_cache.kernel.time import Clock, FrozenClock, SystemClock

__all__ = [
    "ApplicationError",
    "BaseError",
    "Clock",
    "ConflictError",
    "DomainError",
    "FrozenClock",
    "NotFoundError",
    "SystemClock",
    "ValidationError",
]
