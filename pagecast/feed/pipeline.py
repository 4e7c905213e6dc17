"""Page-to-feed pipeline.

``feed_from_url`` chains the whole flow for one request:

    fetch → parse → extract links → synthesize RSS
"""

from __future__ import annotations

import httpx

from pagecast.config import settings
from pagecast.feed.dom import parse_html
from pagecast.feed.naming import MimeTable
from pagecast.feed.synthesizer import synthesize
from pagecast.scraper.fetcher import fetch_page


def feed_from_url(url: str, pattern: str, mime_table: MimeTable) -> str:
    """Fetch *url* and return its links as an RSS 2.0 feed.

    Links are resolved against the page's final URL, so a listing reached
    through a redirect still yields correct enclosure URLs.

    Raises:
        httpx.HTTPError: If the page cannot be fetched.  The feed is never
            synthesized for a failed fetch.
    """
    raw = fetch_page(url)
    document = parse_html(raw.html)
    return synthesize(
        document,
        pattern,
        httpx.URL(raw.final_url),
        mime_table,
        default_title=settings.default_feed_title,
    )
