from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Literal


class Coordinates(BaseModel):
    lat: float = Field(..., description="Latitude of the resolved city")
    lon: float = Field(..., description="Longitude of the resolved city")


class WeatherResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    success: bool = Field(True, description="Always true for a successful weather lookup")
    city: str = Field(..., description="City name as resolved by the weather provider")
    temperature: float = Field(..., description="Current temperature (°C)")
    feelsLike: float = Field(..., description="Perceived temperature (°C)")
    description: str = Field(..., description="Short text description of the conditions")
    icon: str = Field(..., description="Provider icon code for the conditions")
    coordinates: Coordinates = Field(..., description="Location of the resolved city")
    windSpeed: float = Field(..., description="Wind speed (m/s)")
    countryCode: str = Field(..., description="Two-letter country code reported by the provider")
    humidity: float = Field(..., description="Relative humidity (%)")
    pressure: float = Field(..., description="Atmospheric pressure (hPa)")
    rainVolume: float = Field(0, description="Rain volume for the last 3 hours (mm), 0 when absent")
    timestamp: str = Field(..., description="ISO-8601 time the result was built (UTC)")


class NewsArticle(BaseModel):
    title: str = Field("No title", description="Article headline")
    description: str = Field("No description available", description="Short article summary")
    url: str = Field("#", description="Canonical article URL")
    source: str = Field("Unknown", description="Source or publication name")
    publishedAt: str = Field(..., description="ISO-8601 publication time")
    image: Optional[str] = Field(None, description="Article image URL, if any")


class NewsResult(BaseModel):
    success: bool = Field(True, description="News lookups never fail towards the caller")
    totalResults: int = Field(0, description="Number of articles returned by the provider before truncation")
    articles: List[NewsArticle] = Field(default_factory=list, description="Up to five articles in provider order")


class CombinedResult(BaseModel):
    success: bool = Field(True, description="True whenever the weather lookup succeeded")
    weather: WeatherResult = Field(..., description="Current conditions for the city")
    news: NewsResult = Field(..., description="Headlines for the city's country, possibly empty")


class ApiKeyStatus(BaseModel):
    weather: Literal["Configured", "Missing"] = Field(..., description="Weather provider key presence")
    news: Literal["Configured", "Missing"] = Field(..., description="News provider key presence")


class StatusResult(BaseModel):
    success: bool = Field(True, description="Always true")
    status: str = Field("Server is running", description="Human readable server state")
    timestamp: str = Field(..., description="ISO-8601 time of the status check (UTC)")
    apis: ApiKeyStatus = Field(..., description="Presence (not validity) of each provider key")


class ErrorResponse(BaseModel):
    success: bool = Field(False, description="Always false for an error")
    message: str = Field(..., description="Error message returned from the server")
    error: Optional[str] = Field(None, description="Raw upstream error text, for generic failures only")
