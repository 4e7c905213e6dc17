"""Scraper package — page fetch over HTTP."""

from pagecast.scraper.fetcher import fetch_page
from pagecast.scraper.models import RawPage

__all__ = ["fetch_page", "RawPage"]
