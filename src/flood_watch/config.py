"""Configuration settings for the flood watch service."""

import os
from typing import Final
from dotenv import load_dotenv

load_dotenv()

# Forecast API configuration
FLOOD_API_BASE_URL: Final[str] = os.getenv("FLOOD_API_BASE_URL", "https://flood-api.open-meteo.com/v1/flood")
USER_AGENT: Final[str] = "FloodWatchService/0.1 (user@example.com)"
DAILY_METRIC: Final[str] = "river_discharge_max"

# Forecast window
FORECAST_TIMEZONE: Final[str] = "Asia/Karachi"
FORECAST_DAYS: Final[int] = 30

# Refresh configuration
FETCH_TIMEOUT_SECONDS: float = float(os.getenv("FETCH_TIMEOUT_SECONDS", "30"))
REFRESH_INTERVAL_SECONDS: float = float(os.getenv("REFRESH_INTERVAL_SECONDS", "0"))  # 0 disables periodic refresh
REFRESH_ON_STARTUP: bool = os.getenv("REFRESH_ON_STARTUP", "true").lower() == "true"

# Server configuration
HOST: str = os.getenv("HOST", "0.0.0.0")
PORT: int = int(os.getenv("PORT", "8000"))
DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
