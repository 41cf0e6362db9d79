import asyncio
import logging
from typing import Optional

from ..core.config import Settings
from ..core.exceptions import AggregationError
from ..models.schemas import CombinedResult, NewsResult
from .news_service import NewsService, empty_news_result
from .weather_service import WeatherService

logger = logging.getLogger(__name__)


class DashboardAggregator:
    """
    Combines current weather and local headlines for one city.

    Weather is required: any weather failure fails the whole request.  The
    headlines are looked up for the country the weather provider reported
    and any news failure is replaced by an empty result.
    """

    def __init__(self, settings: Settings, weather_service: WeatherService, news_service: NewsService):
        self.settings = settings
        self.weather_service = weather_service
        self.news_service = news_service

    async def fetch_all(self, city: Optional[str] = None) -> CombinedResult:
        city = (city or "").strip() or self.settings.DEFAULT_CITY
        timeout = self.settings.AGGREGATE_TIMEOUT_SECONDS
        logger.info(f"📦 Fetching all data for: {city}")

        try:
            weather = await asyncio.wait_for(self.weather_service.fetch_weather(city), timeout=timeout)
        except Exception as e:
            logger.error(f"⚠️ Weather fetch failed: {getattr(e, 'message', None) or e!r}")
            raise AggregationError("Weather data unavailable") from e

        try:
            news: NewsResult = await asyncio.wait_for(
                self.news_service.fetch_news(city, weather.countryCode or ""), timeout=timeout
            )
        except Exception as e:
            logger.error(f"⚠️ News fetch failed, using empty data: {e!r}")
            news = empty_news_result()

        return CombinedResult(success=True, weather=weather, news=news)
