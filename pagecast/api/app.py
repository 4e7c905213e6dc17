"""FastAPI application factory.

Lifespan
--------
On startup the app builds the process-wide :class:`MimeTable` once and
shares it with every request via ``request.app.state.mime_table``.  It is
never modified afterwards, so concurrent requests read it without locking.

Routers
-------
    /       — index page with the feed-builder form
    /feed   — RSS feed synthesized from a page's links
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

import pagecast
from pagecast.feed.naming import MimeTable

from pagecast.api.routers import feed as feed_router
from pagecast.api.routers import index as index_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Register MIME types on startup."""
    app.state.mime_table = MimeTable()
    logger.info("MIME table ready")
    yield


def create_app() -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    app = FastAPI(
        title="Pagecast",
        description=(
            "Turns an HTML page of links, such as a directory listing of "
            "media files, into an RSS 2.0 feed of enclosures."
        ),
        version=pagecast.__version__,
        lifespan=lifespan,
    )

    app.include_router(index_router.router, tags=["index"])
    app.include_router(feed_router.router, prefix="/feed", tags=["feed"])

    return app


# Module-level instance used by uvicorn:
#   uvicorn pagecast.api.app:app
app = create_app()
