"""
Current-conditions lookup against the OpenWeatherMap ``/data/2.5/weather`` API.

The provider response is remapped into ``WeatherResult`` and provider errors
are classified into the ``WeatherError`` hierarchy so that the API layer can
answer with a matching status code.
"""
import asyncio
import logging
from typing import Any, Dict, Optional

import aiohttp

from ..core.config import Settings
from ..core.exceptions import (
    CityNotFoundError,
    InvalidApiKeyError,
    WeatherError,
    WeatherUpstreamError,
)
from ..models.schemas import Coordinates, WeatherResult
from ..utils.timestamps import utc_timestamp

logger = logging.getLogger(__name__)


class WeatherService:
    def __init__(self, settings: Settings, session: Optional[aiohttp.ClientSession] = None):
        self.settings = settings
        self.session = session

    async def _get_session(self) -> aiohttp.ClientSession:
        if self.session is None or self.session.closed:
            self.session = aiohttp.ClientSession()
        return self.session

    async def close(self):
        if self.session and not self.session.closed:
            await self.session.close()

    async def fetch_weather(self, city: Optional[str] = None) -> WeatherResult:
        """
        Fetch current conditions for ``city`` in metric units.

        A single request is made with no retry.  Raises ``CityNotFoundError``
        for an upstream 404, ``InvalidApiKeyError`` for an upstream 401 or a
        missing key, and ``WeatherUpstreamError`` for anything else that
        prevents a complete result from being built.
        """
        city = (city or "").strip() or self.settings.DEFAULT_CITY
        logger.info(f"🌤️ Fetching weather for: {city}")

        if not self.settings.weather_configured:
            logger.error("Weather API Error: WEATHER_API_KEY is not configured")
            raise InvalidApiKeyError()

        params = {
            "q": city,
            "appid": self.settings.WEATHER_API_KEY,
            "units": "metric",
        }
        session = await self._get_session()
        try:
            async with session.get(self.settings.WEATHER_API_URL, params=params) as resp:
                if resp.status == 404:
                    logger.error(f"Weather API Error: city '{city}' not found (404)")
                    raise CityNotFoundError(city)
                if resp.status == 401:
                    logger.error("Weather API Error: provider rejected the API key (401)")
                    raise InvalidApiKeyError()
                if resp.status >= 400:
                    text = await resp.text()
                    logger.error(f"Weather API Error: status {resp.status}: {text}")
                    raise WeatherUpstreamError(f"Request failed with status code {resp.status}")
                data = await resp.json(content_type=None)
        except WeatherError:
            raise
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            logger.error(f"Weather API Error: {e!r}")
            raise WeatherUpstreamError(str(e) or e.__class__.__name__) from e

        try:
            result = self._build_result(data)
        except (KeyError, IndexError, TypeError, ValueError, AttributeError) as e:
            logger.error(f"Weather API Error: malformed response body: {e!r}")
            raise WeatherUpstreamError(f"Malformed weather response: {e}") from e

        logger.info("✅ Weather data fetched successfully")
        return result

    def _build_result(self, data: Dict[str, Any]) -> WeatherResult:
        main = data["main"]
        conditions = data["weather"][0]
        rain = data.get("rain")
        if not isinstance(rain, dict):
            rain = {}
        return WeatherResult(
            success=True,
            city=data["name"],
            temperature=main["temp"],
            feelsLike=main["feels_like"],
            description=conditions["description"],
            icon=conditions["icon"],
            coordinates=Coordinates(lat=data["coord"]["lat"], lon=data["coord"]["lon"]),
            windSpeed=data["wind"]["speed"],
            countryCode=data["sys"]["country"],
            humidity=main["humidity"],
            pressure=main["pressure"],
            rainVolume=rain.get("3h") or 0,
            timestamp=utc_timestamp(),
        )
