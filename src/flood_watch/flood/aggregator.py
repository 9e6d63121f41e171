"""Aggregation of per-location forecasts into published snapshots."""

import asyncio
import itertools
import logging
import math
import threading
from datetime import datetime, timezone
from typing import List, Optional

from flood_watch.config import FETCH_TIMEOUT_SECONDS
from flood_watch.errors import EmptyRegistryError
from flood_watch.flood.client import FetchOutcome, FloodForecastClient
from flood_watch.flood.models import (
    FailureCause, ForecastFailure, Location, LocationResult, RawForecast, Snapshot
)
from flood_watch.flood.registry import LocationRegistry
from flood_watch.flood.risk import classify
from flood_watch.flood.store import SnapshotStore

logger = logging.getLogger(__name__)


def _is_present(value: Optional[float]) -> bool:
    """A reading counts when it is a real, non-negative number."""
    return value is not None and not math.isnan(value) and value >= 0


def reduce_forecast(forecast: RawForecast) -> LocationResult:
    """Reduce a raw forecast to summary statistics and a risk tier.

    Two separate transformations are applied to the series:
    statistics (max, average) use only present, non-NaN, non-negative
    values, while the displayed series keeps every day and shows the
    remaining values as 0.

    Args:
        forecast: Raw forecast for one location

    Returns:
        LocationResult for the location
    """
    present = [value for value in forecast.discharge if _is_present(value)]
    displayed = tuple(value if _is_present(value) else 0.0 for value in forecast.discharge)

    if present:
        max_discharge = max(present)
        avg_discharge = sum(present) / len(present)
    else:
        max_discharge = 0.0
        avg_discharge = 0.0

    return LocationResult(
        location=forecast.location,
        dates=forecast.dates,
        discharge=displayed,
        max_discharge=max_discharge,
        avg_discharge=avg_discharge,
        risk_level=classify(max_discharge),
        has_data=bool(present),
    )


def failed_result(failure: ForecastFailure) -> LocationResult:
    """Degraded result for a location whose fetch failed."""
    return LocationResult(location=failure.location, failure=failure.cause)


class AggregationEngine:
    """Fans out one forecast fetch per location and publishes the batch."""

    def __init__(
        self,
        registry: Optional[LocationRegistry] = None,
        client: Optional[FloodForecastClient] = None,
        store: Optional[SnapshotStore] = None,
        fetch_timeout: Optional[float] = FETCH_TIMEOUT_SECONDS
    ):
        """Initialize the engine.

        Args:
            registry: Locations to monitor (creates default if None)
            client: Forecast client (creates default if None)
            store: Store that receives published snapshots (creates one if None)
            fetch_timeout: Upper bound in seconds for a single fetch, None to disable
        """
        self.registry = registry if registry is not None else LocationRegistry()
        self.client = client or FloodForecastClient()
        self.store = store or SnapshotStore()
        self.fetch_timeout = fetch_timeout
        self._generations = itertools.count(1)
        self._generation_lock = threading.Lock()

    def _next_generation(self) -> int:
        with self._generation_lock:
            return next(self._generations)

    async def refresh(self) -> Snapshot:
        """Fetch every location, build a snapshot and publish it.

        The snapshot is returned even when the store drops it because a
        later refresh already published.

        Returns:
            Snapshot with one result per registered location, in registry order

        Raises:
            EmptyRegistryError: If no locations are registered
        """
        locations = list(self.registry)
        if not locations:
            raise EmptyRegistryError("No locations registered, nothing to refresh")

        generation = self._next_generation()
        logger.info(f"Refresh generation {generation} started for {len(locations)} locations")

        outcomes = await asyncio.gather(*(self._fetch(location) for location in locations))
        results = self._build_results(outcomes)

        snapshot = Snapshot(
            results=tuple(results),
            generation=generation,
            completed_at=datetime.now(timezone.utc)
        )

        failed = sum(1 for result in results if result.failure is not None)
        logger.info(f"Refresh generation {generation} completed: {len(results) - failed} ok, {failed} failed")

        self.store.publish(snapshot)
        return snapshot

    async def _fetch(self, location: Location) -> FetchOutcome:
        """Fetch one location, turning a timeout into a network failure."""
        if self.fetch_timeout is None:
            return await self.client.fetch(location)

        try:
            return await asyncio.wait_for(self.client.fetch(location), timeout=self.fetch_timeout)
        except asyncio.TimeoutError:
            logger.warning(f"Forecast fetch for {location.name} timed out after {self.fetch_timeout}s")
            return ForecastFailure(
                location=location,
                cause=FailureCause.NETWORK,
                message=f"Timed out after {self.fetch_timeout}s"
            )

    def _build_results(self, outcomes: List[FetchOutcome]) -> List[LocationResult]:
        results = []
        for outcome in outcomes:
            if isinstance(outcome, ForecastFailure):
                results.append(failed_result(outcome))
            else:
                results.append(reduce_forecast(outcome))
        return results

    def current(self) -> Optional[Snapshot]:
        """Latest published snapshot."""
        return self.store.current()

    async def aclose(self):
        """Close the forecast client."""
        try:
            await self.client.aclose()
        except Exception as e:
            logger.error(f"Error closing forecast client: {e}")

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()
