"""Link filtering by a user-supplied pattern."""

from __future__ import annotations

import httpx
from wcmatch import glob

# Wildcards stop at ``/`` and a leading dot is an ordinary character.
GLOB_FLAGS = glob.FORCEUNIX | glob.DOTGLOB


def matches(pattern: str, url: httpx.URL) -> bool:
    """Return ``True`` if *url* passes the *pattern* filter.

    An empty pattern accepts everything.  Otherwise the URL is accepted when
    the pattern occurs anywhere in its full string form, or when the pattern,
    read as a path glob (``*``, ``?``, ``[...]``), matches the whole decoded
    URL path.  Wildcards never cross a ``/``, so ``/books/*.mp3`` selects the
    files directly under ``/books``.
    """
    if not pattern:
        return True
    if pattern in str(url):
        return True
    return glob.globmatch(url.path, pattern, flags=GLOB_FLAGS)
