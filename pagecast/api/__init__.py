"""FastAPI HTTP layer package.

Public re-export so callers can write::

    from pagecast.api import app

    uvicorn pagecast.api:app
"""

from pagecast.api.app import app

__all__ = ["app"]
