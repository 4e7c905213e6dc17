"""RSS 2.0 synthesis from a parsed page.

The output is a single line::

    <?xml version='1.0' encoding='UTF-8' ?><rss version='2.0'><channel>
    <title>...</title><item><title>...</title><enclosure url="..." type="..."/></item>...
    </channel></rss>

Text and attribute values are XML-escaped so that page titles or link text
containing ``&``, ``<``, ``>`` or ``"`` still produce a well-formed document.
"""

from __future__ import annotations

from typing import Optional
from xml.sax.saxutils import escape

import httpx

from pagecast.feed.dom import first_child, first_text
from pagecast.feed.extractor import extract_links
from pagecast.feed.models import Element, Feed, ResolvedLink
from pagecast.feed.naming import MimeTable

DEFAULT_FEED_TITLE = "Book"

_XML_DECLARATION = "<?xml version='1.0' encoding='UTF-8' ?>"
_QUOTE_ENTITIES = {'"': "&quot;"}


def _xml(value: str) -> str:
    return escape(value, _QUOTE_ENTITIES)


def _render_item(link: ResolvedLink) -> str:
    return (
        "<item>"
        f"<title>{_xml(link.title)}</title>"
        f'<enclosure url="{_xml(link.url)}" type="{_xml(link.mime_type)}"/>'
        "</item>"
    )


def render_feed(feed: Feed) -> str:
    """Serialise *feed* as an RSS 2.0 document."""
    parts = [
        _XML_DECLARATION,
        "<rss version='2.0'>",
        "<channel>",
        f"<title>{_xml(feed.title)}</title>",
    ]
    parts.extend(_render_item(item) for item in feed.items)
    parts.append("</channel>")
    parts.append("</rss>")
    return "".join(parts)


def build_feed(
    document: Optional[Element],
    pattern: str,
    base: httpx.URL,
    mime_table: MimeTable,
    default_title: str = DEFAULT_FEED_TITLE,
) -> Feed:
    """Collect the feed title and items from *document*.

    Missing ``<html>``, ``<head>``, ``<title>`` or ``<body>`` elements fall back
    to *default_title* and an empty item list respectively.
    """
    if base is None:
        raise ValueError("A base URL is required to resolve page links")

    html = first_child(document, "html")
    page_title = first_text(first_child(first_child(html, "head"), "title"))
    body = first_child(html, "body")

    return Feed(
        title=page_title or default_title,
        items=tuple(extract_links(body, pattern, base, mime_table)),
    )


def synthesize(
    document: Optional[Element],
    pattern: str,
    base: httpx.URL,
    mime_table: MimeTable,
    default_title: str = DEFAULT_FEED_TITLE,
) -> str:
    """Return the RSS 2.0 feed for *document* as a string.

    Args:
        document: Parsed page (see :func:`pagecast.feed.dom.parse_html`), or
            ``None`` for an empty feed.
        pattern: Link filter; empty accepts every link.
        base: Final (post-redirect) URL of the page, used to absolutise links.
        mime_table: Extension lookup used for enclosure types.
        default_title: Channel title when the page has no non-empty
            ``<title>``.

    Raises:
        ValueError: If *base* is ``None``.
    """
    return render_feed(build_feed(document, pattern, base, mime_table, default_title))
