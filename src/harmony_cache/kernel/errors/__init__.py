"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── ValidationError
    │   ├── NotFoundError
    │   └── ConflictError
    └── ApplicationError     (application.py)
        └── ConfigError      (harmony_cache.config.validation)

Cache operations never raise; these errors belong to the layers around the
cache (settings, registry, warm-up, invalidation input checks).
"""

from harmony_cache.kernel.errors.application import ApplicationError
from harmony_cache.kernel.errors.base import BaseError
from harmony_cache.kernel.errors.domain import (
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConflictError",
    "DomainError",
    "NotFoundError",
    "ValidationError",
]
