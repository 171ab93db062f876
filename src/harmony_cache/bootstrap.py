"""Composition root helper – settings, logging and caches in one call.

Typical application start-up::

    registry = build_cache_registry()
    sweeper = registry.sweeper()
    if sweeper is not None:
        await sweeper.start()
"""
from __future__ import annotations

from harmony_cache.application.cache import CacheRegistry
from harmony_cache.config.settings import CacheSettings, EnvSettingsLoader
from harmony_cache.config.validation import ConfigError
from harmony_cache.kernel.time import Clock
from harmony_cache.observability.logging import JsonLoggerFactory, get_logger
from harmony_cache.observability.metrics import Metrics

__all__ = ["build_cache_registry"]

logger = get_logger(__name__)


def build_cache_registry(
    settings: CacheSettings | None = None,
    clock: Clock | None = None,
    metrics: Metrics | None = None,
    configure_logging: bool = True,
) -> CacheRegistry:
    """Build the application's :class:`CacheRegistry`.

    *settings* default to ``HARMONY_CACHE_*`` environment variables. With
    *configure_logging* the root logger is set up from ``log_level`` and
    ``log_json`` before any cache is created.
    """
    if settings is None:
        try:
            settings = EnvSettingsLoader().load(CacheSettings)
        except ConfigError as exc:
            logger.error("cache.settings_invalid", **exc.log_fields())
            raise
    if configure_logging:
        JsonLoggerFactory.configure_from_settings(settings)
    return CacheRegistry.from_settings(settings, clock=clock, metrics=metrics)
