"""
Exceptions for flood watch operations.
"""

from typing import Optional


class FloodWatchError(Exception):
    """Base exception for flood watch errors."""

    pass


class ForecastFetchError(FloodWatchError):
    """A single location's forecast could not be retrieved."""

    cause = "network"

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class NetworkFailure(ForecastFetchError):
    """Connection error or timeout talking to the forecast API."""

    cause = "network"


class ProtocolFailure(ForecastFetchError):
    """Forecast API answered with a non-success status code."""

    cause = "http-status"


class DecodeFailure(ForecastFetchError):
    """Forecast API payload was not JSON or had an unexpected shape."""

    cause = "decode"


class EmptyRegistryError(FloodWatchError):
    """No locations are configured, so a refresh cannot produce a snapshot."""

    pass
