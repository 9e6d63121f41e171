"""HTTP client for the Open-Meteo flood API."""

import logging
import zoneinfo
from datetime import date, datetime, timedelta
from typing import Any, Dict, Optional, Union

import httpx
from pydantic import ValidationError

from flood_watch.config import (
    FLOOD_API_BASE_URL, USER_AGENT, DAILY_METRIC,
    FORECAST_TIMEZONE, FORECAST_DAYS, FETCH_TIMEOUT_SECONDS
)
from flood_watch.errors import (
    DecodeFailure, ForecastFetchError, NetworkFailure, ProtocolFailure
)
from flood_watch.flood.models import (
    FailureCause, FloodApiResponse, ForecastFailure, Location, RawForecast
)

logger = logging.getLogger(__name__)

FetchOutcome = Union[RawForecast, ForecastFailure]


def forecast_window(today: Optional[date] = None) -> tuple:
    """Return the (start_date, end_date) of the forecast window.

    Args:
        today: Start day; defaults to the current date in the forecast time zone

    Returns:
        Tuple of (start_date, end_date), FORECAST_DAYS apart
    """
    if today is None:
        today = datetime.now(zoneinfo.ZoneInfo(FORECAST_TIMEZONE)).date()
    return today, today + timedelta(days=FORECAST_DAYS)


class FloodForecastClient:
    """Async client for fetching river discharge forecasts.

    `fetch` never raises for transport, status or payload problems; it
    returns a ForecastFailure instead.
    """

    def __init__(
        self,
        base_url: str = FLOOD_API_BASE_URL,
        user_agent: str = USER_AGENT,
        timeout: float = FETCH_TIMEOUT_SECONDS,
        http_client: Optional[httpx.AsyncClient] = None
    ):
        """Initialize the forecast client.

        Args:
            base_url: Flood API endpoint
            user_agent: User-Agent header for API requests
            timeout: HTTP timeout in seconds
            http_client: Preconfigured httpx client (creates one if None)
        """
        self.base_url = base_url
        self.user_agent = user_agent
        self.timeout = timeout
        self.client = http_client or httpx.AsyncClient(
            headers={"User-Agent": self.user_agent},
            timeout=timeout
        )

    def build_params(self, location: Location, today: Optional[date] = None) -> Dict[str, str]:
        """Build query parameters for one location's forecast request."""
        start_date, end_date = forecast_window(today)
        return {
            "latitude": str(location.latitude),
            "longitude": str(location.longitude),
            "daily": DAILY_METRIC,
            "timezone": FORECAST_TIMEZONE,
            "start_date": start_date.isoformat(),
            "end_date": end_date.isoformat(),
        }

    async def fetch(self, location: Location) -> FetchOutcome:
        """Fetch the discharge forecast for a location.

        Args:
            location: Location to fetch

        Returns:
            RawForecast on success, ForecastFailure otherwise
        """
        params = self.build_params(location)
        logger.info(f"Fetching flood forecast for {location.name} ({location.latitude}, {location.longitude})")

        try:
            data = await self._request(params)
            forecast = self._parse_forecast(location, data)
        except ForecastFetchError as e:
            logger.warning(f"Forecast fetch failed for {location.name} [{e.cause}]: {e}")
            return ForecastFailure(
                location=location,
                cause=FailureCause(e.cause),
                message=str(e),
                status_code=e.status_code
            )
        except Exception as e:
            logger.error(f"Unexpected error fetching forecast for {location.name}: {e}")
            return ForecastFailure(
                location=location,
                cause=FailureCause.NETWORK,
                message=f"Unexpected error: {e}"
            )

        logger.info(f"Fetched {len(forecast.dates)} forecast days for {location.name}")
        return forecast

    async def _request(self, params: Dict[str, str]) -> Any:
        """GET the flood API and decode the JSON body.

        Raises:
            NetworkFailure: On connection errors and timeouts
            ProtocolFailure: On non-success status codes
            DecodeFailure: If the body is not valid JSON
        """
        try:
            response = await self.client.get(self.base_url, params=params)
            response.raise_for_status()
            return response.json()

        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            raise ProtocolFailure(f"HTTP error {status_code} from flood API", status_code=status_code) from e
        except httpx.TimeoutException as e:
            raise NetworkFailure(f"Request timeout after {self.timeout}s") from e
        except httpx.RequestError as e:
            raise NetworkFailure(f"Network error: {e}") from e
        except ValueError as e:
            raise DecodeFailure(f"Invalid JSON response: {e}") from e

    def _parse_forecast(self, location: Location, data: Any) -> RawForecast:
        """Validate the payload and pair discharge values with dates.

        Values are aligned to the date sequence by index: missing trailing
        values are treated as absent and surplus values are dropped.

        Raises:
            DecodeFailure: If the payload shape is unexpected
        """
        try:
            response = FloodApiResponse.model_validate(data)
        except ValidationError as e:
            raise DecodeFailure(f"Invalid flood API response format: {e}") from e

        dates = response.daily.time
        values = response.daily.river_discharge_max
        if len(values) != len(dates):
            logger.warning(
                f"Discharge series for {location.name} has {len(values)} values for {len(dates)} dates"
            )
        discharge = [values[i] if i < len(values) else None for i in range(len(dates))]

        return RawForecast(location=location, dates=tuple(dates), discharge=tuple(discharge))

    async def aclose(self):
        """Close the async HTTP client."""
        await self.client.aclose()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.aclose()
