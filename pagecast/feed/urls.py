"""Absolute-URL resolution for links found on a page."""

from __future__ import annotations

from typing import Optional
from urllib.parse import urljoin

import httpx


def resolve_url(base: httpx.URL, href: str) -> Optional[httpx.URL]:
    """Resolve *href* against *base* and return the absolute URL.

    Returns ``None`` for an empty *href* or one that does not form a valid
    URL (control characters, a non-numeric port, a broken IPv6 literal, ...).
    Callers treat ``None`` as "skip this link".
    """
    if not href:
        return None
    try:
        return httpx.URL(urljoin(str(base), href))
    except (httpx.InvalidURL, ValueError):
        return None
