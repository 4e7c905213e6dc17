"""HTTP fetcher for the pages that feeds are built from."""

from __future__ import annotations

import logging

import httpx

from pagecast.config import settings
from pagecast.scraper.models import RawPage

logger = logging.getLogger(__name__)


def _default_headers() -> dict[str, str]:
    return {"User-Agent": settings.user_agent}


def fetch_page(url: str) -> RawPage:
    """Fetch *url* and return a :class:`RawPage`.

    Redirects are followed; the URL the client finally landed on is kept as
    ``final_url`` so relative links can be resolved against it.

    Raises:
        httpx.HTTPStatusError: If the server returns a 4xx/5xx status code.
        httpx.RequestError: On connection errors, timeouts, or a malformed
            *url*.
    """
    logger.info("Fetching page %s", url)

    try:
        with httpx.Client(
            headers=_default_headers(),
            timeout=settings.request_timeout,
            follow_redirects=True,
        ) as client:
            response = client.get(url)
            response.raise_for_status()
            html = response.text
            status_code = response.status_code
            final_url = str(response.url)
    except httpx.InvalidURL as exc:
        logger.warning("Rejected page url %r: %s", url, exc)
        raise httpx.RequestError(f"Invalid page url: {exc}") from exc
    except httpx.HTTPError as exc:
        logger.warning("Failed to fetch %s: %s", url, exc)
        raise

    if final_url != url:
        logger.info("Page %s redirected to %s", url, final_url)

    return RawPage(url=url, final_url=final_url, html=html, status_code=status_code)
