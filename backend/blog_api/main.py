"""Blog API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Request pipeline order: error normalizer → authentication gate → request logger → routes
    - Domain errors map to {"error": message}; anything else becomes an opaque 500
    - Database engine and schema initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - create_app() factory: tests build apps from explicit Settings
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from blog_api.api.error_handlers import register_error_handlers
from blog_api.api.interceptors import build_interceptors
from blog_api.api.pipeline import PipelineMiddleware
from blog_api.api.routes import blogs, diagnostics, users
from blog_api.config import Settings, get_settings
from blog_api.infrastructure.database import close_db, init_db
from blog_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def _lifespan_for(settings: Settings):

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        manager = init_db(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
        await manager.create_schema()
        logger.info("Blog API started")
        yield
        logger.info("Blog API shutting down")
        await close_db()

    return lifespan


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    application = FastAPI(
        title="Blog API", version="1.0.0", lifespan=_lifespan_for(settings),
    )

    application.add_middleware(
        PipelineMiddleware, interceptors=build_interceptors(settings),
    )
    register_error_handlers(application)

    application.include_router(users.router)
    application.include_router(blogs.router)
    if settings.enable_diagnostics:
        application.include_router(
            diagnostics.build_router(settings.diagnostic_path),
        )
    return application


app = create_app()
