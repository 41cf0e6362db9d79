from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse
import logging
from typing import Optional

from ..models.schemas import (
    WeatherResult, NewsResult, CombinedResult,
    StatusResult, ErrorResponse
)
from ..core.config import Settings
from ..core.exceptions import DashboardError
from ..services.aggregator import DashboardAggregator
from ..services.news_service import NewsService, empty_news_result
from ..services.status_service import get_status
from ..services.weather_service import WeatherService

logger = logging.getLogger(__name__)
router = APIRouter()


# Services are created once by the application factory and stored on
# ``app.state``; these dependencies hand them to the route handlers.
def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_weather_service(request: Request) -> WeatherService:
    return request.app.state.weather_service


def get_news_service(request: Request) -> NewsService:
    return request.app.state.news_service


def get_aggregator(request: Request) -> DashboardAggregator:
    return request.app.state.aggregator


def error_response(error: DashboardError) -> JSONResponse:
    body = ErrorResponse(success=False, message=error.message, error=error.detail)
    return JSONResponse(status_code=error.status_code, content=body.model_dump(exclude_none=True))


@router.get(
    "/weather",
    response_model=WeatherResult,
    responses={401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_weather(
    city: Optional[str] = Query(None, description="City name, defaults to the configured city"),
    weather_service: WeatherService = Depends(get_weather_service),
):
    """Current weather for a city"""
    try:
        return await weather_service.fetch_weather(city)
    except DashboardError as e:
        return error_response(e)


@router.get("/news", response_model=NewsResult)
async def get_news(
    city: Optional[str] = Query(None, description="City name, used for logging"),
    country: str = Query("", description="Country name or code to pick headlines for"),
    news_service: NewsService = Depends(get_news_service),
):
    """Top headlines for a country, falling back to technology news"""
    try:
        return await news_service.fetch_news(city, country)
    except Exception as e:
        logger.error(f"❌ News API Error: {e!r}")
        return empty_news_result()


@router.get("/all", response_model=CombinedResult, responses={500: {"model": ErrorResponse}})
async def get_all(
    city: Optional[str] = Query(None, description="City name, defaults to the configured city"),
    aggregator: DashboardAggregator = Depends(get_aggregator),
):
    """Weather and headlines for a city in one response"""
    try:
        return await aggregator.fetch_all(city)
    except DashboardError as e:
        logger.error(f"❌ Combined API Error: {e.message}")
        return error_response(e)


@router.get("/status", response_model=StatusResult)
async def status(settings: Settings = Depends(get_settings)):
    """Server status and provider key presence"""
    return get_status(settings)
