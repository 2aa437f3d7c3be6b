"""Wordbank API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to the {"error": {...}} envelope
    - CORS configured from settings (not hardcoded)
    - The testing router is never mounted in production
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - create_app(settings) factory: tests build apps for other environments
      without touching process env; module-level `app` serves uvicorn
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wordbank import __version__
from wordbank.api.error_handlers import register_error_handlers
from wordbank.api.routes import (
    auth, categories, health, languages, learning_languages, profile, testing,
    vocabulary_overview, words,
)
from wordbank.config import Settings, get_settings
from wordbank.infrastructure import database
from wordbank.infrastructure.observability import log_requests, setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        manager = database.init_db(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
        logger.info(f"Wordbank API started ({settings.environment.value})")
        yield
        await manager.dispose()
        logger.info("Wordbank API shutting down")

    app = FastAPI(title="Wordbank API", version=__version__, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(log_requests)

    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(languages.router)
    app.include_router(learning_languages.router)
    app.include_router(categories.router)
    app.include_router(words.router)
    app.include_router(vocabulary_overview.router)
    app.include_router(profile.router)
    if settings.reset_route_enabled:
        app.include_router(testing.router)

    register_error_handlers(app)
    return app


app = create_app()
