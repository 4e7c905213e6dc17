"""Index page with the feed-builder form.

Routes
------
GET /
"""

from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from pagecast.api.routers.feed import TIMESTAMP_FORMAT
from pagecast.api.templating import get_environment
from pagecast.config import settings

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def index(request: Request) -> HTMLResponse:
    """Render the form; the current time is embedded as the ``update`` stamp."""
    template = get_environment().get_template("index.html")
    html = template.render(
        feed_path=request.url_for("feed").path,
        update=datetime.now().strftime(TIMESTAMP_FORMAT),
        max_age_hours=f"{settings.feed_max_age_hours:g}",
    )
    return HTMLResponse(html)
