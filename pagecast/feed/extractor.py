"""Link extraction: walks a page's ``<body>`` and yields feed-worthy links."""

from __future__ import annotations

import logging
from typing import Iterator, Optional

import httpx

from pagecast.feed.dom import first_text
from pagecast.feed.matching import matches
from pagecast.feed.models import Element, LinkCandidate, Node, ResolvedLink
from pagecast.feed.naming import MimeTable, derive_title
from pagecast.feed.urls import resolve_url

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _walk(node: Node) -> Iterator[Element]:
    """Yield every element under *node* (inclusive) in pre-order."""
    if not isinstance(node, Element):
        return
    yield node
    for child in node.children:
        yield from _walk(child)


def _candidates(anchor: Element) -> Iterator[LinkCandidate]:
    """One candidate per ``href`` attribute, all sharing the anchor's text."""
    anchor_text = first_text(anchor)
    for href in anchor.get_all("href"):
        yield LinkCandidate(href_raw=href, anchor_text=anchor_text)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract_links(
    body: Optional[Node],
    pattern: str,
    base: httpx.URL,
    mime_table: MimeTable,
) -> Iterator[ResolvedLink]:
    """Yield a :class:`ResolvedLink` for each qualifying anchor under *body*.

    Links come out in document order.  An ``href`` that is empty or cannot be
    resolved against *base* is skipped, as is one whose absolute URL does not
    pass *pattern*.
    """
    if body is None:
        return

    for element in _walk(body):
        if element.name != "a":
            continue
        for candidate in _candidates(element):
            url = resolve_url(base, candidate.href_raw)
            if url is None:
                logger.debug("Skipping unresolvable href %r", candidate.href_raw)
                continue
            if not matches(pattern, url):
                continue
            title, mime_type = derive_title(url.path, candidate.anchor_text, mime_table)
            yield ResolvedLink(url=str(url), title=title, mime_type=mime_type)
