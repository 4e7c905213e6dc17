"""Centralised settings for the Pagecast service.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (two levels up from this file)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # HTTP server
    # ------------------------------------------------------------------
    host: str = field(
        default_factory=lambda: os.environ.get("PAGECAST_HOST", "")
    )
    port: int = field(
        default_factory=lambda: int(os.environ.get("PAGECAST_PORT", "8080"))
    )

    # ------------------------------------------------------------------
    # Fetcher
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "30.0"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "PAGECAST_USER_AGENT", "Mozilla/5.0 (compatible; Pagecast/1.0)"
        )
    )

    # ------------------------------------------------------------------
    # Feed
    # ------------------------------------------------------------------
    feed_max_age_hours: float = field(
        default_factory=lambda: float(os.environ.get("FEED_MAX_AGE_HOURS", "5"))
    )
    default_feed_title: str = field(
        default_factory=lambda: os.environ.get("DEFAULT_FEED_TITLE", "Book")
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO")
    )


# Module-level singleton, import this everywhere:
#   from pagecast.config import settings
settings = Settings()
