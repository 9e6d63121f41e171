"""API endpoints for the flood watch service."""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from flood_watch.config import (
    FLOOD_API_BASE_URL, DAILY_METRIC, FORECAST_DAYS, FORECAST_TIMEZONE,
    REFRESH_INTERVAL_SECONDS
)
from flood_watch.errors import EmptyRegistryError
from flood_watch.flood.aggregator import AggregationEngine
from flood_watch.flood.facilities import FacilityRegistry
from flood_watch.flood.models import (
    ErrorResponse, Facility, FacilityStats, FacilityStatus, FacilityType,
    Location, LocationResult, RiskSummary, Snapshot
)
from flood_watch.flood.summary import summarize

logger = logging.getLogger(__name__)

# Create router
router = APIRouter(prefix="/flood", tags=["flood"])

NOT_READY = {503: {"model": ErrorResponse, "description": "No snapshot published yet"}}

facility_registry = FacilityRegistry()


def get_engine(request: Request) -> AggregationEngine:
    """Dependency to get the aggregation engine created at startup."""
    return request.app.state.engine


def get_facility_registry() -> FacilityRegistry:
    """Dependency to get the facility registry."""
    return facility_registry


def require_snapshot(engine: AggregationEngine) -> Snapshot:
    """Return the current snapshot or fail with 503 before the first publish."""
    snapshot = engine.current()
    if snapshot is None:
        raise HTTPException(status_code=503, detail="Flood data not available yet, try again shortly")
    return snapshot


@router.get("/snapshot", response_model=Snapshot, responses=NOT_READY)
async def get_snapshot(engine: AggregationEngine = Depends(get_engine)) -> Snapshot:
    """Get the latest published flood risk snapshot.

    Returns:
        Snapshot with one result per monitored location
    """
    return require_snapshot(engine)


@router.post("/refresh", response_model=Snapshot, responses=NOT_READY)
async def refresh_snapshot(engine: AggregationEngine = Depends(get_engine)) -> Snapshot:
    """Fetch fresh forecasts for every location.

    Returns:
        The snapshot produced by this refresh

    Raises:
        HTTPException: If no locations are configured
    """
    try:
        snapshot = await engine.refresh()
    except EmptyRegistryError as e:
        logger.error(f"Refresh failed: {e}")
        raise HTTPException(status_code=503, detail=str(e))

    logger.info(f"Refresh generation {snapshot.generation} served")
    return snapshot


@router.get("/summary", response_model=RiskSummary, responses=NOT_READY)
async def get_summary(engine: AggregationEngine = Depends(get_engine)) -> RiskSummary:
    """Get risk tier counts, province breakdown and elevated locations.

    Returns:
        RiskSummary of the current snapshot
    """
    return summarize(require_snapshot(engine))


@router.get("/locations", response_model=List[Location])
async def list_locations(engine: AggregationEngine = Depends(get_engine)) -> List[Location]:
    """List monitored locations in display order."""
    return list(engine.registry)


@router.get(
    "/locations/{name}",
    response_model=LocationResult,
    responses={404: {"model": ErrorResponse}, **NOT_READY}
)
async def get_location_result(name: str, engine: AggregationEngine = Depends(get_engine)) -> LocationResult:
    """Get the current result for one location.

    Args:
        name: Location name, e.g. Lahore

    Raises:
        HTTPException: If the location is unknown or no snapshot exists yet
    """
    if engine.registry.get(name) is None:
        raise HTTPException(status_code=404, detail=f"Unknown location '{name}'")

    result = require_snapshot(engine).get(name)
    if result is None:
        # Registry changed after the snapshot was built
        raise HTTPException(status_code=503, detail=f"No result for '{name}' in the current snapshot")
    return result


@router.get("/facilities", response_model=List[Facility])
async def list_facilities(
    facility_type: Optional[FacilityType] = Query(
        None,
        alias="type",
        description="Only facilities of this type, e.g. hand-pump"
    ),
    status: Optional[FacilityStatus] = Query(
        None,
        description="Only facilities in this status, e.g. needs-repair"
    ),
    registry: FacilityRegistry = Depends(get_facility_registry)
) -> List[Facility]:
    """List WASH facilities, optionally filtered by type and status."""
    return registry.filter(facility_type=facility_type, status=status)


@router.get("/facilities/stats", response_model=FacilityStats)
async def get_facility_stats(registry: FacilityRegistry = Depends(get_facility_registry)) -> FacilityStats:
    """Get facility counts by status and total beneficiaries."""
    return registry.stats()


@router.get("/health")
async def health_check(engine: AggregationEngine = Depends(get_engine)) -> dict:
    """Health check endpoint.

    Returns:
        Health status and the current snapshot generation
    """
    return {
        "status": "healthy",
        "service": "flood-watch",
        "generation": engine.store.generation
    }


@router.get("/info")
async def get_service_info(engine: AggregationEngine = Depends(get_engine)) -> dict:
    """Get service information."""
    return {
        "service": "Flood Watch Service",
        "version": "0.1.0",
        "locations": len(engine.registry),
        "forecast": {
            "metric": DAILY_METRIC,
            "days": FORECAST_DAYS,
            "timezone": FORECAST_TIMEZONE
        },
        "refresh_interval_seconds": REFRESH_INTERVAL_SECONDS,
        "data_source": FLOOD_API_BASE_URL
    }
