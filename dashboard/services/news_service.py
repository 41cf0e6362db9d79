"""
Headline lookup against the NewsAPI ``/v2/top-headlines`` endpoint.

News is treated as non-critical: every provider failure is logged and
degrades to fewer (or no) articles instead of surfacing as an error.  Two
stages are tried in order:

1. top headlines for the caller's country;
2. if that produced nothing, English technology headlines.

Each stage reports a ``HeadlinesFetch`` so that "nothing found" and "the
call failed" can be told apart in the logs even though both look the same
to the caller.
"""
import asyncio
from dataclasses import dataclass, field
from enum import Enum
import logging
from typing import Any, Dict, List, Optional

import aiohttp

from ..core.config import Settings
from ..models.schemas import NewsArticle, NewsResult
from ..utils.timestamps import utc_timestamp
from .country_codes import get_country_code

logger = logging.getLogger(__name__)


class FetchOutcome(str, Enum):
    FOUND = "found"
    EMPTY = "empty"
    FAILED = "failed"


@dataclass
class HeadlinesFetch:
    """Result of a single ``top-headlines`` request."""

    outcome: FetchOutcome
    articles: List[Dict[str, Any]] = field(default_factory=list)
    error: Optional[str] = None

    @classmethod
    def from_articles(cls, articles: List[Dict[str, Any]]) -> "HeadlinesFetch":
        return cls(FetchOutcome.FOUND if articles else FetchOutcome.EMPTY, articles)

    @classmethod
    def failed(cls, error: str) -> "HeadlinesFetch":
        return cls(FetchOutcome.FAILED, error=error)


def empty_news_result() -> NewsResult:
    return NewsResult(success=True, totalResults=0, articles=[])


def _text(value: Any, default: Optional[str]) -> Optional[str]:
    return str(value) if value else default


def normalize_article(item: Dict[str, Any]) -> NewsArticle:
    """Map a NewsAPI article onto ``NewsArticle``, filling placeholders for missing fields."""
    source = item.get("source")
    source_name = source.get("name") if isinstance(source, dict) else None
    return NewsArticle(
        title=_text(item.get("title"), "No title"),
        description=_text(item.get("description"), "No description available"),
        url=_text(item.get("url"), "#"),
        source=_text(source_name, "Unknown"),
        publishedAt=_text(item.get("publishedAt"), None) or utc_timestamp(),
        image=_text(item.get("urlToImage"), None),
    )


class NewsService:
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

    async def _fetch_headlines(self, label: str, params: Dict[str, Any]) -> HeadlinesFetch:
        """
        Request one page of top headlines.  Never raises; failures are
        returned as a ``FAILED`` fetch.
        """
        query = dict(params)
        query["pageSize"] = self.settings.NEWS_PAGE_SIZE
        query["apiKey"] = self.settings.NEWS_API_KEY
        timeout = aiohttp.ClientTimeout(total=self.settings.NEWS_TIMEOUT_SECONDS)
        try:
            session = await self._get_session()
            async with session.get(self.settings.NEWS_API_URL, params=query, timeout=timeout) as resp:
                if resp.status != 200:
                    text = await resp.text()
                    return HeadlinesFetch.failed(f"status {resp.status}: {text}")
                data = await resp.json(content_type=None)
            articles = data.get("articles") or []
            if not isinstance(articles, list):
                return HeadlinesFetch.failed(f"unexpected 'articles' payload in {label} response")
            return HeadlinesFetch.from_articles(articles)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError, AttributeError) as e:
            return HeadlinesFetch.failed(str(e) or e.__class__.__name__)

    async def fetch_news(self, city: Optional[str] = None, country: Optional[str] = "") -> NewsResult:
        """
        Fetch up to ``MAX_ARTICLES`` headlines for ``country``.

        ``city`` is used for logging only.  Always returns a successful
        ``NewsResult``; without a usable API key no request is made at all.
        """
        city = (city or "").strip() or self.settings.DEFAULT_CITY
        logger.info(f"📰 Fetching news for: {city}")

        if not self.settings.news_enabled:
            logger.info("⚠️ News API key not configured")
            return empty_news_result()

        articles: List[Dict[str, Any]] = []

        country_code = get_country_code(country)
        if country_code:
            logger.info(f"🌍 Trying country news: {country_code}")
            country_fetch = await self._fetch_headlines("country", {"country": country_code})
            if country_fetch.outcome is FetchOutcome.FAILED:
                logger.warning(f"⚠️ Country news failed: {country_fetch.error}")
            elif country_fetch.outcome is FetchOutcome.EMPTY:
                logger.info(f"No country headlines for: {country_code}")
            articles = country_fetch.articles

        if not articles:
            logger.info("💻 Trying general tech news")
            general_fetch = await self._fetch_headlines(
                "technology", {"category": "technology", "language": "en"}
            )
            if general_fetch.outcome is FetchOutcome.FAILED:
                logger.warning(f"⚠️ General news failed: {general_fetch.error}")
            elif general_fetch.outcome is FetchOutcome.EMPTY:
                logger.info("No general tech headlines available")
            articles = general_fetch.articles

        result = NewsResult(
            success=True,
            totalResults=len(articles),
            articles=[
                normalize_article(item)
                for item in articles[: self.settings.MAX_ARTICLES]
                if isinstance(item, dict)
            ],
        )
        logger.info(f"✅ News data fetched: {len(result.articles)} articles")
        return result
