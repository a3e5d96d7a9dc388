from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Callable

from heartbeat.config import DEFAULT_INTERVAL
from heartbeat.models.metrics import MetricsRecord

logger = logging.getLogger(__name__)

Sink = Callable[[MetricsRecord], None]


class BaseCollector(ABC):
    """Abstract base for the sampling loop.

    Subclasses implement ``collect()`` which builds one record from fresh
    reads. The base class handles the sample/sleep loop, interval timing,
    and cancellation via ``stop()``.
    """

    name: str = "base"
    interval: float = DEFAULT_INTERVAL  # seconds between samples

    def __init__(self, sink: Sink, interval: float | None = None) -> None:
        self._sink = sink
        if interval is not None:
            self.interval = interval
        self._running = False
        self._task: asyncio.Task | None = None

    # ── lifecycle ────────────────────────────────────────

    async def start(self) -> None:
        if self._running:
            return
        self._running = True
        self._task = asyncio.create_task(self._loop())
        logger.info("Collector [%s] started (interval=%.1fs)", self.name, self.interval)

    async def stop(self) -> None:
        if not self._running:
            return
        self._running = False
        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None
        logger.info("Collector [%s] stopped", self.name)

    async def run_forever(self) -> None:
        """Run the loop until ``stop()`` is called or this task is cancelled.

        Returns normally after ``stop()``; re-raises when cancelled from outside.
        """
        if self._running:
            return
        await self.start()
        task = self._task
        try:
            await task
        except asyncio.CancelledError:
            if task.cancelled() and not self._running:
                return
            raise
        finally:
            await self.stop()

    # ── abstract method ─────────────────────────────────

    @abstractmethod
    async def collect(self) -> MetricsRecord:
        """Read every source and return a freshly built record."""
        ...

    # ── sampling ────────────────────────────────────────

    async def sample_once(self) -> MetricsRecord:
        record = await self.collect()
        self._sink(record)
        return record

    # ── internals ───────────────────────────────────────

    async def _loop(self) -> None:
        while self._running:
            try:
                await self.sample_once()
            except asyncio.CancelledError:
                raise
            except Exception:
                logger.exception("Collector [%s] error during sample", self.name)
            await asyncio.sleep(self.interval)

    @property
    def running(self) -> bool:
        return self._running
