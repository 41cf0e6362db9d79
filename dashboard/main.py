from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
import os
import uvicorn
from contextlib import asynccontextmanager
import logging
from typing import Optional

# Import submodules relative to the ``dashboard`` package so that both
# ``python -m dashboard.main`` and ``uvicorn dashboard.main:app`` resolve
# them the same way.
from .api.routes import router as api_router
from .core.config import Settings
from .services.aggregator import DashboardAggregator
from .services.news_service import NewsService
from .services.weather_service import WeatherService

logger = logging.getLogger(__name__)


def _log_banner(settings: Settings) -> None:
    weather = "✅ Configured" if settings.weather_configured else "❌ Missing"
    news = "✅ Configured" if settings.news_configured else "❌ Missing"
    logger.info(f"🚀 Server running on: http://localhost:{settings.PORT}")
    logger.info("📡 API Endpoints:")
    logger.info("   GET /api/weather?city=CityName  - Weather data")
    logger.info("   GET /api/news?city=CityName     - News articles")
    logger.info("   GET /api/all?city=CityName      - Combined data")
    logger.info("   GET /api/status                 - Server status")
    logger.info(f"🔑 Weather API: {weather}")
    logger.info(f"🔑 News API:    {news}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown logic for the FastAPI app."""
    _log_banner(app.state.settings)
    try:
        yield
    finally:
        # Close the provider sessions to avoid unclosed aiohttp client
        # warnings.
        for service in (app.state.weather_service, app.state.news_service):
            try:
                await service.close()
            except Exception as e:
                logger.warning(f"Error closing {service.__class__.__name__} session: {e}")
        logger.info("🛑 Shutting down the application...")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application.

    ``settings`` is read from the environment when not supplied and is the
    only configuration the services ever see.
    """
    settings = settings or Settings()

    logging.basicConfig(level=settings.LOG_LEVEL.upper())

    app = FastAPI(
        title="Weather & News Dashboard",
        description="Backend proxy combining OpenWeatherMap conditions and NewsAPI headlines",
        version="1.0.0",
        lifespan=lifespan
    )

    weather_service = WeatherService(settings)
    news_service = NewsService(settings)
    app.state.settings = settings
    app.state.weather_service = weather_service
    app.state.news_service = news_service
    app.state.aggregator = DashboardAggregator(settings, weather_service, news_service)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Mount all API routes
    app.include_router(api_router, prefix="/api")

    # Serve the dashboard front-end.  ``html=True`` returns ``index.html``
    # for ``/``.  Routes under ``/api`` are registered first and take
    # precedence over this mount.
    static_dir = settings.STATIC_DIR
    if os.path.isdir(static_dir):
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
    else:
        logger.warning("Static directory %s does not exist; the frontend will not be served.", static_dir)

    return app


app = create_app()

# Dev entry point
if __name__ == "__main__":
    settings = app.state.settings
    uvicorn.run(
        "dashboard.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.is_development
    )
