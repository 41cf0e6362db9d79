"""Error types raised by the provider services and rendered by the API routes."""
from typing import Optional


class DashboardError(Exception):
    """Base class for errors that map onto an HTTP error response."""

    status_code: int = 500

    def __init__(self, message: str, detail: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.detail = detail


class WeatherError(DashboardError):
    """Raised when current conditions cannot be fetched for a city."""


class CityNotFoundError(WeatherError):
    status_code = 404

    def __init__(self, city: str):
        super().__init__("City not found. Please check the city name.")
        self.city = city


class InvalidApiKeyError(WeatherError):
    status_code = 401

    def __init__(self):
        super().__init__("Invalid API key. Please check your Weather API key.")


class WeatherUpstreamError(WeatherError):
    """Network, timeout, unexpected status or malformed body from the provider."""

    def __init__(self, detail: str):
        super().__init__("Failed to fetch weather data", detail=detail)


class AggregationError(DashboardError):
    """Raised when the combined weather and news response cannot be built."""

    def __init__(self, message: str = "Weather data unavailable"):
        super().__init__(message)
