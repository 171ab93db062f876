"""Application cache – optional periodic sweep of expired entries.

Reads keep enforcing expiry on their own; the sweeper only reclaims memory
held by entries nobody reads any more. Each pass removes at most
``batch_size`` entries per cache.
"""
from __future__ import annotations

import asyncio
import contextlib
from typing import Iterable

from harmony_cache.application.cache.store import TagIndexedCache
from harmony_cache.kernel.errors import ValidationError
from harmony_cache.observability.logging import get_logger

__all__ = ["CacheSweeper"]

logger = get_logger(__name__)


class CacheSweeper:
    """Background task that calls :meth:`TagIndexedCache.purge_expired`.

    Typical usage::

        sweeper = CacheSweeper(registry.caches(), interval=30)
        await sweeper.start()
        ...
        await sweeper.stop()
    """

    def __init__(
        self,
        caches: Iterable[TagIndexedCache],
        interval: float = 60.0,
        batch_size: int = 1000,
    ) -> None:
        if interval <= 0:
            raise ValidationError.for_field("interval", interval, "must be > 0")
        if batch_size < 1:
            raise ValidationError.for_field("batch_size", batch_size, "must be >= 1")
        self._caches = list(caches)
        self._interval = interval
        self._batch_size = batch_size
        self._task: asyncio.Task[None] | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def sweep_once(self) -> int:
        """Run one pass over every cache; returns the number of entries removed."""
        return sum(cache.purge_expired(limit=self._batch_size) for cache in self._caches)

    async def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.create_task(self._run())
        logger.info("cache.sweeper_started", interval=self._interval, batch_size=self._batch_size)

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None
        logger.info("cache.sweeper_stopped")

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            self.sweep_once()
