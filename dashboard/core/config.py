"""
Application configuration management.

This module defines a frozen ``Settings`` dataclass that reads its values
from environment variables at instantiation time.  A ``.env`` file in the
working directory is loaded first so local development can keep the
provider keys out of the shell environment.  Each option has a reasonable
default which can be overridden by setting the corresponding environment
variable.

The settings object is built once when the application is created and
handed to the services that need it; nothing below the application
factory reads ``os.environ`` directly.
"""

from dataclasses import dataclass, field
import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

# Value shipped in the sample ``.env``; treated as "no key" for news.
NEWS_API_KEY_PLACEHOLDER = "your_news_api_key_here"


@dataclass(frozen=True)
class Settings:
    """Configuration values loaded from environment variables with defaults."""

    # Application settings
    ENVIRONMENT: str = field(default_factory=lambda: os.getenv("ENVIRONMENT", "development"))
    PORT: int = field(default_factory=lambda: int(os.getenv("PORT", "3000")))
    LOG_LEVEL: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    # Provider API keys.  Either may be absent; the matching endpoint then
    # degrades instead of the application refusing to start.
    WEATHER_API_KEY: Optional[str] = field(default_factory=lambda: os.getenv("WEATHER_API_KEY"))
    NEWS_API_KEY: Optional[str] = field(default_factory=lambda: os.getenv("NEWS_API_KEY"))

    # Upstream endpoints
    WEATHER_API_URL: str = field(default_factory=lambda: os.getenv(
        "WEATHER_API_URL", "https://api.openweathermap.org/data/2.5/weather"
    ))
    NEWS_API_URL: str = field(default_factory=lambda: os.getenv(
        "NEWS_API_URL", "https://newsapi.org/v2/top-headlines"
    ))

    # Request behaviour
    DEFAULT_CITY: str = field(default_factory=lambda: os.getenv("DEFAULT_CITY", "Astana"))
    NEWS_TIMEOUT_SECONDS: float = field(default_factory=lambda: float(os.getenv("NEWS_TIMEOUT_SECONDS", "5")))
    AGGREGATE_TIMEOUT_SECONDS: float = field(default_factory=lambda: float(os.getenv("AGGREGATE_TIMEOUT_SECONDS", "10")))
    NEWS_PAGE_SIZE: int = 10
    MAX_ARTICLES: int = 5

    # Front-end assets served at ``/``
    STATIC_DIR: str = field(default_factory=lambda: os.getenv(
        "STATIC_DIR", os.path.join(os.path.dirname(__file__), "..", "..", "public")
    ))

    @property
    def is_development(self) -> bool:
        """Return True if the environment is set to development."""
        return self.ENVIRONMENT.lower() == "development"

    @property
    def weather_configured(self) -> bool:
        return bool(self.WEATHER_API_KEY)

    @property
    def news_configured(self) -> bool:
        return bool(self.NEWS_API_KEY)

    @property
    def news_enabled(self) -> bool:
        """
        Return True if news fetching should be attempted.

        Unlike ``news_configured`` this also rejects the placeholder value
        left in an unedited ``.env`` file, so no request is ever sent with it.
        """
        return bool(self.NEWS_API_KEY) and self.NEWS_API_KEY != NEWS_API_KEY_PLACEHOLDER
