from ..core.config import Settings
from ..models.schemas import ApiKeyStatus, StatusResult
from ..utils.timestamps import utc_timestamp


def _presence(configured: bool) -> str:
    return "Configured" if configured else "Missing"


def get_status(settings: Settings) -> StatusResult:
    """Report whether each provider key is set.  Keys are not validated."""
    return StatusResult(
        success=True,
        status="Server is running",
        timestamp=utc_timestamp(),
        apis=ApiKeyStatus(
            weather=_presence(settings.weather_configured),
            news=_presence(settings.news_configured),
        ),
    )
