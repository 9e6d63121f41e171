"""Background task that refreshes the snapshot on a fixed interval."""

import asyncio
import logging
from typing import Optional

from flood_watch.errors import FloodWatchError
from flood_watch.flood.aggregator import AggregationEngine

logger = logging.getLogger(__name__)


class PeriodicRefresher:
    """Runs `engine.refresh()` every `interval` seconds until stopped."""

    def __init__(self, engine: AggregationEngine, interval: float):
        if interval <= 0:
            raise ValueError(f"Refresh interval must be positive, got {interval}")
        self.engine = engine
        self.interval = interval
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self):
        """Start the refresh loop on the running event loop."""
        if self.running:
            return
        logger.info(f"Starting periodic refresh every {self.interval}s")
        self._task = asyncio.create_task(self._run())

    async def stop(self):
        """Cancel the refresh loop and wait for it to finish."""
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info("Periodic refresh stopped")

    async def _run(self):
        while True:
            await asyncio.sleep(self.interval)
            try:
                await self.engine.refresh()
            except FloodWatchError as e:
                logger.error(f"Periodic refresh failed: {e}")
            except Exception:
                logger.exception("Unexpected error during periodic refresh")
