import dataclasses
from typing import Any, List, Optional, Union

import pytest
from fastapi.testclient import TestClient

from dashboard.core.config import Settings
from dashboard.main import create_app
from dashboard.services.aggregator import DashboardAggregator
from dashboard.services.news_service import NewsService
from dashboard.services.weather_service import WeatherService


class FakeResponse:
    """Stands in for ``aiohttp.ClientResponse`` inside ``async with session.get(...)``."""

    def __init__(self, status: int = 200, payload: Any = None, text: str = ""):
        self.status = status
        self._payload = payload
        self._text = text

    async def json(self, content_type=None):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload

    async def text(self):
        return self._text

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakeSession:
    """Replays queued responses (or raises queued exceptions) and records every request."""

    def __init__(self, responses: Optional[List[Union[FakeResponse, Exception]]] = None):
        self.responses = list(responses or [])
        self.calls: List[dict] = []
        self.closed = False

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": dict(params or {}), "timeout": timeout})
        if not self.responses:
            raise AssertionError(f"unexpected request to {url}")
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    async def close(self):
        self.closed = True


def weather_payload(**overrides) -> dict:
    payload = {
        "coord": {"lon": -0.1257, "lat": 51.5085},
        "weather": [{"id": 500, "main": "Rain", "description": "light rain", "icon": "10d"}],
        "main": {"temp": 14.2, "feels_like": 13.6, "pressure": 1012, "humidity": 81},
        "wind": {"speed": 4.1, "deg": 240},
        "rain": {"3h": 0.75},
        "sys": {"country": "GB"},
        "name": "London",
    }
    payload.update(overrides)
    return payload


def news_payload(count: int, prefix: str = "Headline") -> dict:
    return {
        "status": "ok",
        "totalResults": count,
        "articles": [
            {
                "source": {"id": None, "name": f"Source {i}"},
                "title": f"{prefix} {i}",
                "description": f"Description {i}",
                "url": f"https://example.com/{prefix.lower()}/{i}",
                "urlToImage": f"https://example.com/img/{i}.jpg",
                "publishedAt": "2024-05-01T10:00:00Z",
            }
            for i in range(count)
        ],
    }


@pytest.fixture
def settings() -> Settings:
    return Settings(
        WEATHER_API_KEY="test-weather-key",
        NEWS_API_KEY="test-news-key",
        DEFAULT_CITY="Astana",
        STATIC_DIR="/nonexistent-static-dir",
    )


@pytest.fixture
def make_client(settings):
    """
    Build a ``TestClient`` whose services talk to fake sessions.

    Returns ``(client, weather_session, news_session)``.
    """

    def _make(weather_responses=None, news_responses=None, **overrides):
        cfg = dataclasses.replace(settings, **overrides)
        app = create_app(cfg)
        weather_session = FakeSession(weather_responses)
        news_session = FakeSession(news_responses)
        weather_service = WeatherService(cfg, session=weather_session)
        news_service = NewsService(cfg, session=news_session)
        app.state.weather_service = weather_service
        app.state.news_service = news_service
        app.state.aggregator = DashboardAggregator(cfg, weather_service, news_service)
        return TestClient(app), weather_session, news_session

    return _make
