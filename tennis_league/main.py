# tennis_league/main.py
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from . import __version__
from .api import diagnostics as diagnostics_router
from .api import health as health_router
from .config import Settings, load_settings
from .storage import MongoDbContext
from .utils.logger import setup_logger

logger = logging.getLogger("TennisLeague.Main")


def create_app(settings: Optional[Settings] = None, db_context: Optional[MongoDbContext] = None) -> FastAPI:
    """
    Builds the FastAPI application.

    The database context is created by the lifespan from ``settings`` unless
    one is passed in, in which case the caller owns it and it is not closed
    on shutdown.
    """
    settings = settings or load_settings()

    # --- Lifespan Manager for DB Connection ---
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        context = db_context
        if context is None:
            try:
                context = MongoDbContext(settings)
                if settings.ping_on_startup:
                    context.ping()
            except Exception:
                logger.exception("Could not initialize the database context.")
                raise
        app.state.settings = settings
        app.state.db_context = context
        logger.info("Database context ready (database: %s).", context.database_name)
        yield
        if db_context is None:
            context.close()

    app = FastAPI(
        title="Tennis League API",
        description="Health probe and MongoDB round-trip for the tennis league tracker.",
        version=__version__,
        debug=settings.is_development,
        lifespan=lifespan,
    )

    # --- API Routers ---
    app.include_router(health_router.router, tags=["Health"])
    app.include_router(diagnostics_router.router, tags=["Diagnostics"])

    return app


def build_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Application factory for uvicorn.

    Runs in the process that serves requests, including the reload worker,
    so logging is configured there before the app is built.
    """
    settings = settings or load_settings()
    setup_logger(log_level=settings.log_level, log_dir=settings.log_dir)
    return create_app(settings)
