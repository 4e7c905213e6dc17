"""HTML parsing into the immutable node tree, plus first-child lookups.

Pages are tokenized with BeautifulSoup's ``html.parser`` builder, which keeps
every repeated attribute, and then laid out the way HTML5 tree construction
lays out a document: one ``html`` element holding a ``head`` and a ``body``,
whether or not the page spells those tags out or closes them.
"""

from __future__ import annotations

from typing import Optional

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString

from pagecast.feed.models import DOCUMENT_NODE_NAME, Element, Node, Text

# Start tags that HTML5 inserts into <head> while no body content has been seen.
_HEAD_ELEMENTS = frozenset(
    {
        "base",
        "basefont",
        "bgsound",
        "link",
        "meta",
        "noframes",
        "noscript",
        "script",
        "style",
        "template",
        "title",
    }
)
_SKELETON_ELEMENTS = frozenset({"html", "head", "body"})
_HTML_WHITESPACE = " \t\n\f\r"


class _Repeated(list):
    """Values of an attribute that appeared more than once on the same tag."""


def _keep_repeats(attrs: dict, key: str, value: str) -> None:
    # BeautifulSoup keeps only one value per key by default; collect them all
    # so an anchor with two ``href`` attributes yields two links.
    current = attrs[key]
    if not isinstance(current, _Repeated):
        current = _Repeated([current])
    current.append(value)
    attrs[key] = current


def _attributes(tag: Tag) -> tuple[tuple[str, str], ...]:
    pairs: list[tuple[str, str]] = []
    for key, value in tag.attrs.items():
        if isinstance(value, _Repeated):
            pairs.extend((key, v) for v in value)
        else:
            pairs.append((key, value))
    return tuple(pairs)


def _convert_children(tag: Tag) -> list[Node]:
    children: list[Node] = []
    for child in tag.children:
        if isinstance(child, Tag):
            if child.name in _SKELETON_ELEMENTS:
                # Stray html/head/body tags inside content are dropped; their
                # contents stay where they are.
                children.extend(_convert_children(child))
            else:
                children.append(_convert(child))
        elif isinstance(child, PreformattedString):
            # Comments, doctypes, CDATA and processing instructions
            continue
        elif isinstance(child, NavigableString):
            children.append(Text(str(child)))
    return children


def _convert(tag: Tag) -> Element:
    return Element(name=tag.name, attributes=_attributes(tag), children=tuple(_convert_children(tag)))


class _Skeleton:
    """Sorts top-level markup into the implied ``html``/``head``/``body``."""

    def __init__(self) -> None:
        self.attributes: dict[str, list[tuple[str, str]]] = {name: [] for name in _SKELETON_ELEMENTS}
        self.head: list[Node] = []
        self.body: list[Node] = []
        self.in_body = False

    def merge(self, tag: Tag) -> None:
        # A repeated <html> or <body> tag only adds attributes not yet present.
        if tag.name == "head" and self.in_body:
            return
        pairs = self.attributes[tag.name]
        present = {key for key, _ in pairs}
        pairs.extend(pair for pair in _attributes(tag) if pair[0] not in present)

    def place(self, tag: Tag) -> None:
        for child in tag.children:
            if isinstance(child, Tag):
                if child.name in _SKELETON_ELEMENTS:
                    if child.name == "body":
                        self.in_body = True
                    self.merge(child)
                    self.place(child)
                elif not self.in_body and child.name in _HEAD_ELEMENTS:
                    self.head.append(_convert(child))
                else:
                    self.in_body = True
                    self.body.append(_convert(child))
            elif isinstance(child, PreformattedString):
                continue
            elif isinstance(child, NavigableString):
                text = str(child)
                if not self.in_body and not text.strip(_HTML_WHITESPACE):
                    continue
                self.in_body = True
                self.body.append(Text(text))

    def build(self) -> Element:
        html = Element(
            name="html",
            attributes=tuple(self.attributes["html"]),
            children=(
                Element(name="head", attributes=tuple(self.attributes["head"]), children=tuple(self.head)),
                Element(name="body", attributes=tuple(self.attributes["body"]), children=tuple(self.body)),
            ),
        )
        return Element(name=DOCUMENT_NODE_NAME, children=(html,))


def parse_html(html: str) -> Element:
    """Parse *html* into an immutable document tree.

    The returned root is an :class:`Element` named ``#document`` with a
    single ``html`` child, which always holds a ``head`` followed by a
    ``body``.  Metadata elements met before any content (``title``,
    ``meta``, ``script`` ...) go to the head and everything from the first
    content node on goes to the body, so omitted or unclosed ``<html>``,
    ``<head>`` and ``<body>`` tags do not change where links end up.

    Attribute values are kept as plain strings and duplicated attributes are
    all preserved, in source order.
    """
    soup = BeautifulSoup(
        html,
        "html.parser",
        multi_valued_attributes=None,
        on_duplicate_attribute=_keep_repeats,
    )
    skeleton = _Skeleton()
    skeleton.place(soup)
    return skeleton.build()


def first_child(node: Optional[Node], name: str) -> Optional[Element]:
    """Return the first element child of *node* named *name*, or ``None``."""
    if not isinstance(node, Element):
        return None
    for child in node.children:
        if isinstance(child, Element) and child.name == name:
            return child
    return None


def first_text(node: Optional[Node]) -> str:
    """Return the content of the first text child of *node*, or ``""``.

    Only the immediate first text child counts; text nested deeper inside
    child elements is ignored.
    """
    if not isinstance(node, Element):
        return ""
    for child in node.children:
        if isinstance(child, Text):
            return child.content
    return ""
