"""Pagecast CLI: entry-point for serving and one-off feed generation.

Usage:
    python cli/main.py --help

Commands:
    serve     → run the HTTP service (index page + /feed endpoint)
    feed      → fetch a page once and print its feed to stdout
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from pagecast.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any working
# directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import logging
from typing import Optional

import httpx
import typer

from pagecast.config import settings

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="pagecast",
    help="Pagecast: RSS feeds from HTML index pages.",
    no_args_is_help=True,
)


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
def configure_logging(level_name: str) -> None:
    """Initialise root logging at *level_name* with a single console handler."""
    log_level = getattr(logging, level_name.upper(), None)
    if not isinstance(log_level, int):
        raise ValueError(f"Unsupported log level: {level_name}")

    formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    root_logger.setLevel(log_level)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    root_logger.addHandler(stream_handler)
    logger.debug("Logger initialised with console output at level %s", level_name.upper())


@app.callback()
def main(
    log_level: str = typer.Option(
        settings.log_level, "--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)."
    ),
) -> None:
    """Pagecast: RSS feeds from HTML index pages."""
    try:
        configure_logging(log_level)
    except ValueError as exc:
        typer.echo(f"[pagecast] {exc}", err=True)
        raise typer.Exit(2)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def parse_address(addr: str) -> tuple[str, int]:
    """Split a ``host:port`` address; an empty host means all interfaces."""
    host, sep, port = addr.rpartition(":")
    if not sep:
        raise ValueError(f"Address must look like HOST:PORT, got {addr!r}")
    try:
        port_number = int(port)
    except ValueError as exc:
        raise ValueError(f"Invalid port in address {addr!r}") from exc
    return host.strip("[]") or "0.0.0.0", port_number


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------
@app.command("serve")
def serve(
    addr: Optional[str] = typer.Argument(
        None, help="Listen address as HOST:PORT. Overrides --host and --port."
    ),
    host: str = typer.Option(settings.host, help="IP address host name."),
    port: str = typer.Option(str(settings.port), help="IP address port number."),
) -> None:
    """Run the Pagecast HTTP service."""
    import uvicorn

    try:
        bind_host, bind_port = parse_address(addr or f"{host}:{port}")
    except ValueError as exc:
        typer.echo(f"[serve] {exc}", err=True)
        raise typer.Exit(2)

    logger.info("IP address: %s:%d", bind_host, bind_port)
    uvicorn.run("pagecast.api.app:app", host=bind_host, port=bind_port, log_config=None)


@app.command("feed")
def feed(
    page: str = typer.Option(..., help="URL of the page to read links from."),
    pattern: str = typer.Option("", help="Substring or glob the links must match."),
) -> None:
    """Fetch a page and print its RSS feed to stdout."""
    from pagecast.feed import MimeTable, feed_from_url

    typer.echo(f"[feed] Fetching {page!r} …", err=True)
    try:
        xml = feed_from_url(page, pattern, MimeTable())
    except httpx.HTTPError as exc:
        typer.echo(f"[feed] Fetch failed: {exc}", err=True)
        raise typer.Exit(1)

    typer.echo(xml)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
