"""Item titles and MIME types derived from link paths.

:class:`MimeTable` is built once at startup and only read afterwards; the
derivation itself is pure string work plus one table lookup.
"""

from __future__ import annotations

import mimetypes
from typing import Optional

# Media types that podcast clients care about and that platform tables get
# wrong or lack.
DEFAULT_MEDIA_TYPES: dict[str, str] = {
    ".mp3": "audio/mpeg",
    ".m4a": "audio/x-m4a",
    ".mp4": "video/mp4",
    ".mov": "video/quicktime",
}


class MimeTable:
    """Read-only extension → MIME type lookup.

    Seeded with the standard library's built-in mappings, then
    :data:`DEFAULT_MEDIA_TYPES`, then *extra*; later registrations win.
    """

    def __init__(self, extra: Optional[dict[str, str]] = None) -> None:
        db = mimetypes.MimeTypes()
        for extension, mime_type in {**DEFAULT_MEDIA_TYPES, **(extra or {})}.items():
            if not extension.startswith("."):
                raise ValueError(f"Extension must start with a dot: {extension!r}")
            db.add_type(mime_type, extension)
        self._types = dict(db.types_map[True])

    def lookup(self, extension: str) -> str:
        """Return the MIME type for *extension* (e.g. ``".mp3"``), or ``""``."""
        mime_type = self._types.get(extension)
        if mime_type is None:
            mime_type = self._types.get(extension.lower(), "")
        return mime_type


def _basename(path: str) -> str:
    """Final segment of *path*, ignoring trailing slashes.

    An empty path gives ``"."`` and a path made only of slashes gives ``"/"``.
    """
    if not path:
        return "."
    path = path.rstrip("/")
    if not path:
        return "/"
    return path.rsplit("/", 1)[-1]


def _extension(name: str) -> str:
    """Suffix of *name* from its last dot, or ``""`` when there is no dot."""
    index = name.rfind(".")
    if index < 0:
        return ""
    return name[index:]


def derive_title(url_path: str, anchor_text: str, mime_table: MimeTable) -> tuple[str, str]:
    """Return ``(title, mime_type)`` for a link.

    The title is the last path segment, replaced wholesale by *anchor_text*
    when that is non-empty.  The extension always comes from the path; when
    there is one it selects the MIME type and is trimmed off the end of the
    title if the title literally ends with it.
    """
    name = _basename(url_path)
    extension = _extension(name)
    title = anchor_text or name

    if not extension:
        return title, ""

    mime_type = mime_table.lookup(extension)
    if title.endswith(extension):
        title = title[: -len(extension)]
    return title, mime_type
