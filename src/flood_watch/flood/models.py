"""Data models for the flood watch service."""

from datetime import date, datetime
from enum import Enum
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Province(str, Enum):
    """Provinces covered by the location registry."""
    PUNJAB = "Punjab"
    KPK = "KPK"
    BALOCHISTAN = "Balochistan"


class RiskLevel(str, Enum):
    """Flood risk tier derived from peak forecast discharge."""
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    EXTREME = "extreme"


class FailureCause(str, Enum):
    """Why a location's forecast fetch failed."""
    NETWORK = "network"
    HTTP_STATUS = "http-status"
    DECODE = "decode"


class FacilityType(str, Enum):
    """Kind of WASH facility."""
    WATER_FILTRATION = "water-filtration"
    HAND_PUMP = "hand-pump"
    LATRINE = "latrine"
    SHOWER = "shower"


class FacilityStatus(str, Enum):
    """Operating state of a facility."""
    OPERATIONAL = "operational"
    NEEDS_REPAIR = "needs-repair"
    REQUESTED = "requested"


class Location(BaseModel):
    """Monitored location."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Unique location name")
    province: Province = Field(..., description="Province the location belongs to")
    latitude: float = Field(..., ge=-90, le=90, description="Latitude in decimal degrees")
    longitude: float = Field(..., ge=-180, le=180, description="Longitude in decimal degrees")


class RawForecast(BaseModel):
    """Raw daily discharge forecast for one location."""
    model_config = ConfigDict(frozen=True)

    location: Location
    dates: Tuple[date, ...] = Field(..., description="Forecast days in order")
    discharge: Tuple[Optional[float], ...] = Field(..., description="Daily max discharge in m³/s, None when absent")


class ForecastFailure(BaseModel):
    """Outcome of a fetch that did not produce a forecast."""
    model_config = ConfigDict(frozen=True)

    location: Location
    cause: FailureCause
    message: str = ""
    status_code: Optional[int] = None


class LocationResult(BaseModel):
    """Reduced forecast and risk tier for one location."""
    model_config = ConfigDict(frozen=True)

    location: Location
    dates: Tuple[date, ...] = ()
    discharge: Tuple[float, ...] = Field((), description="Displayed series, absent values replaced by 0")
    max_discharge: float = Field(0.0, ge=0)
    avg_discharge: float = Field(0.0, ge=0, description="Mean over present values only")
    risk_level: RiskLevel = RiskLevel.LOW
    has_data: bool = Field(False, description="False when the fetch failed or returned no valid values")
    failure: Optional[FailureCause] = None


class Snapshot(BaseModel):
    """Published set of results, one per registered location."""
    model_config = ConfigDict(frozen=True)

    results: Tuple[LocationResult, ...]
    generation: int = Field(..., ge=1)
    completed_at: datetime

    def get(self, name: str) -> Optional[LocationResult]:
        """Return the result for a location name, or None."""
        for result in self.results:
            if result.location.name == name:
                return result
        return None


class Facility(BaseModel):
    """Water, sanitation or hygiene facility serving flood-affected people."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Unique facility id, e.g. wf-001")
    name: str
    type: FacilityType
    status: FacilityStatus
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    beneficiaries: Optional[int] = Field(None, ge=0, description="People served, unknown for requested sites")
    installed_date: Optional[date] = None
    description: Optional[str] = None


class FacilityStats(BaseModel):
    """Facility counts by status and total people served."""
    total: int
    operational: int
    needs_repair: int
    requested: int
    total_beneficiaries: int


class ProvinceSummary(BaseModel):
    """Risk counts for one province."""
    province: Province
    elevated: int = 0
    moderate: int = 0
    low: int = 0
    no_data: int = 0


class ElevatedLocation(BaseModel):
    """Location with high or extreme risk."""
    name: str
    province: Province
    risk_level: RiskLevel
    max_discharge: float
    weight: float = Field(..., description="Map overlay intensity for the risk tier")


class RiskSummary(BaseModel):
    """Aggregate risk view of a snapshot."""
    generation: int
    completed_at: datetime
    counts: Dict[RiskLevel, int]
    provinces: List[ProvinceSummary]
    elevated: List[ElevatedLocation]
    warning: bool = Field(..., description="True when any location shows elevated risk")


class FloodApiDaily(BaseModel):
    """`daily` block of the Open-Meteo flood API response."""
    time: List[date]
    river_discharge_max: List[Optional[float]]


class FloodApiResponse(BaseModel):
    """Raw response from the Open-Meteo flood API."""
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    timezone: Optional[str] = None
    daily: FloodApiDaily


class ErrorResponse(BaseModel):
    """Error response model."""
    error: str = Field(..., description="Error message")
    detail: Optional[str] = Field(None, description="Additional error details")
