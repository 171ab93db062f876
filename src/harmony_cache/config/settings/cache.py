"""Config settings – CacheSettings.

Read from ``HARMONY_CACHE_*`` environment variables, e.g.
``HARMONY_CACHE_DEFAULT_TTL=120`` or ``HARMONY_CACHE_SWEEP_INTERVAL=30``.
"""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from harmony_cache.config.settings.base import Settings


@dataclasses.dataclass
class CacheSettings(Settings):
    """Settings for the application's cache instances.

    TTLs are in seconds. ``sweep_interval == 0`` disables the background
    sweeper (see :meth:`CacheRegistry.sweeper`); expiry is then enforced only
    on read. ``log_level``/``log_json`` feed
    :meth:`JsonLoggerFactory.configure_from_settings`.
    """

    _prefix: ClassVar[str] = "HARMONY_CACHE"

    default_ttl: float = 300.0
    query_ttl: float = 300.0
    user_ttl: float = 600.0
    patient_ttl: float = 300.0
    sweep_interval: float = 0.0
    sweep_batch_size: int = 1000
    log_level: str = "INFO"
    log_json: bool = True

    def _validate(self) -> None:
        self._require_at_least(0, "default_ttl", "query_ttl", "user_ttl", "patient_ttl", "sweep_interval")
        self._require_at_least(1, "sweep_batch_size")
        self._require_log_level("log_level")

    @property
    def sweep_enabled(self) -> bool:
        return self.sweep_interval > 0


__all__ = ["CacheSettings"]
