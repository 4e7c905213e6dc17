"""Feed package — link extraction and RSS synthesis."""

from pagecast.feed.dom import parse_html
from pagecast.feed.extractor import extract_links
from pagecast.feed.matching import matches
from pagecast.feed.models import Element, Feed, ResolvedLink, Text
from pagecast.feed.naming import MimeTable, derive_title
from pagecast.feed.pipeline import feed_from_url
from pagecast.feed.synthesizer import synthesize
from pagecast.feed.urls import resolve_url

__all__ = [
    "parse_html",
    "extract_links",
    "matches",
    "Element",
    "Feed",
    "ResolvedLink",
    "Text",
    "MimeTable",
    "derive_title",
    "feed_from_url",
    "synthesize",
    "resolve_url",
]
