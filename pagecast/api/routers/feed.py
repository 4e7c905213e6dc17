"""Feed endpoint.

Routes
------
GET /feed?page=<url>&pattern=<filter>&update=<YYYYmmddHHMMSS>
"""

from __future__ import annotations

import logging
from datetime import datetime

import httpx
from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import Response

from pagecast.config import settings
from pagecast.feed.pipeline import feed_from_url

logger = logging.getLogger(__name__)

router = APIRouter()

TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"
RSS_MEDIA_TYPE = "application/rss+xml"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _is_outdated(update: str, now: datetime) -> bool:
    """Return ``True`` if *update* is a timestamp too far from *now*.

    Unparsable stamps are not considered outdated.
    """
    try:
        stamp = datetime.strptime(update, TIMESTAMP_FORMAT)
    except ValueError:
        return False
    hours = abs((now - stamp).total_seconds()) / 3600
    return hours > settings.feed_max_age_hours


# ---------------------------------------------------------------------------
# Endpoint
# ---------------------------------------------------------------------------

@router.get("")
def feed(
    request: Request,
    page: str = "",
    pattern: str = "",
    update: str = "",
) -> Response:
    """Build an RSS feed from the links on *page*.

    Args:
        page: URL of the HTML page to read links from.
        pattern: Keep only links containing this string, or whose path
            matches it as a shell glob.  Empty keeps every link.
        update: Timestamp the feed link was generated at (from the index
            page).  Links older than ``feed_max_age_hours`` are refused.
    """
    if update and _is_outdated(update, datetime.now()):
        logger.info("Refusing outdated feed request for %r (update=%s)", page, update)
        raise HTTPException(status_code=404, detail="Outdated")

    if not page:
        raise HTTPException(status_code=404, detail="Bad page url")

    mime_table = request.app.state.mime_table
    try:
        body = feed_from_url(page, pattern, mime_table)
    except httpx.HTTPError as exc:
        raise HTTPException(
            status_code=502, detail=f"Fetch failed: {exc}"
        ) from exc

    return Response(content=body, media_type=RSS_MEDIA_TYPE)
