"""Data models for the fetch step."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RawPage:
    """The raw HTTP response for a single page fetch.

    ``final_url`` is where the request ended up after redirects; relative
    links on the page resolve against it, not against ``url``.
    """

    url: str
    final_url: str
    html: str
    status_code: int
