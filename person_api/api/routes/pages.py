"""Page Endpoints - landing page, liveness probe and the catch-all fallback.

Invariants:
    - None of these touch the PersonStore
    - fallback always answers 404 with the same body, for every method
"""

from datetime import datetime, timezone

from fastapi import Depends, Request, status
from fastapi.responses import HTMLResponse, PlainTextResponse

from person_api.api.dependencies import get_app_settings
from person_api.config import Settings
from person_api.core import handlers


def landing_page(settings: Settings = Depends(get_app_settings)) -> HTMLResponse:
    now = datetime.now(timezone.utc)
    return HTMLResponse(handlers.landing(settings.greeting_text, now))


def health() -> PlainTextResponse:
    """Liveness probe. Returns 200 if the process is up."""
    return PlainTextResponse(handlers.health())


def not_found(request: Request) -> HTMLResponse:
    """Plain Starlette endpoint: answers every method on every unmatched path."""
    return HTMLResponse(
        handlers.fallback(), status_code=status.HTTP_404_NOT_FOUND,
    )
