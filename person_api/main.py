"""Person API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly from api/route_table.py (no auto-discovery)
    - Exactly one PersonStore per app, seeded here and shared through app.state
    - Global error handlers map PersonApiError -> (status, JSON text body)

Design Decisions:
    - create_app() factory: tests build a fresh app (and a fresh store) per test
    - Lifespan over @app.on_event: logging configured on startup, store size
      reported on shutdown
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from person_api.api.error_handlers import register_error_handlers
from person_api.api.route_table import build_router
from person_api.config import Settings, get_settings
from person_api.core.errors import LockError
from person_api.core.person import create_person_collection
from person_api.core.person_store import PersonStore
from person_api.infrastructure.observability import log_requests, setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    logger.info(
        f"Person API started with {len(app.state.person_store)} seeded persons",
    )
    yield
    try:
        remaining = len(app.state.person_store)
    except LockError as exc:
        logger.error(
            f"Person API shutting down, store unreadable: {exc.message}",
            extra={"error_code": exc.code},
        )
    else:
        logger.info(f"Person API shutting down, {remaining} persons discarded")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application around a freshly seeded PersonStore."""
    settings = settings or get_settings()

    app = FastAPI(title="Person API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.person_store = PersonStore(create_person_collection())

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(log_requests)

    app.include_router(build_router())
    register_error_handlers(app)
    return app


app = create_app()
