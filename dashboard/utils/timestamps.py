"""
Timestamp helpers.

Browsers parse the ``...T12:00:00.000Z`` form produced by JavaScript's
``Date.toISOString`` everywhere, so every timestamp the API emits uses that
exact layout rather than Python's default ``+00:00`` suffix.
"""
from datetime import datetime, timezone
from typing import Optional


def utc_timestamp(moment: Optional[datetime] = None) -> str:
    """Return ``moment`` (default: now) as an ISO-8601 UTC string ending in ``Z``."""
    if moment is None:
        moment = datetime.now(timezone.utc)
    elif moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    else:
        moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")
