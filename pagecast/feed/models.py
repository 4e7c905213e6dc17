"""Data models for the feed pipeline.

These are plain immutable Python objects.  A parsed page is a tree of
:class:`Element` and :class:`Text` nodes; the extractor turns anchors found in
that tree into :class:`ResolvedLink` values, which the synthesizer wraps in a
:class:`Feed`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

DOCUMENT_NODE_NAME = "#document"


@dataclass(frozen=True)
class Text:
    content: str


@dataclass(frozen=True)
class Element:
    name: str
    attributes: tuple[tuple[str, str], ...] = ()
    children: tuple[Node, ...] = ()

    # ------------------------------------------------------------------
    # Convenience helpers
    # ------------------------------------------------------------------
    def get_all(self, key: str) -> list[str]:
        """Return every value stored under *key*, in attribute order."""
        return [value for name, value in self.attributes if name == key]


Node = Union[Element, Text]


@dataclass(frozen=True)
class LinkCandidate:
    """One ``href`` attribute of an anchor, paired with the anchor's text."""

    href_raw: str
    anchor_text: str


@dataclass(frozen=True)
class ResolvedLink:
    """A link that made it into the feed: absolute URL, title and MIME type.

    ``mime_type`` is the empty string when the type is unknown.
    """

    url: str
    title: str
    mime_type: str


@dataclass(frozen=True)
class Feed:
    title: str
    items: tuple[ResolvedLink, ...] = field(default_factory=tuple)
