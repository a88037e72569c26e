from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

import importlib
import logging
import pkgutil

from fastapi import FastAPI

from . import version, api
from .core import Settings, getSettings
from .core.exception_handlers import setupExceptionHandlers
from .core.exceptions import DatabaseUnavailableError
from .core.log import setupLogging
from .db.session import createEngine, createSessionMaker, init_db

_logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager owning the connection pool.

    The engine is created and the schema ensured on startup, and the pool is
    drained on shutdown. A database that cannot be reached aborts startup.
    """
    settings: Settings = app.state.settings
    if settings is None:
        settings = app.state.settings = getSettings()
    setupLogging(settings.LOG_LEVEL)

    engine = createEngine(settings)
    _logger.info("Connecting to %s", settings.safe_database_url)
    try:
        await init_db(engine)
    except DatabaseUnavailableError:
        _logger.critical("Database unavailable, aborting startup", exc_info=True)
        await engine.dispose()
        raise
    _logger.info("Successfully connected to database")

    app.state.engine = engine
    app.state.session_maker = createSessionMaker(engine)
    try:
        yield
    finally:
        await engine.dispose()
        _logger.info("Database connections closed")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    app = FastAPI(
        lifespan=lifespan,
        title=version.PROJECT_NAME_TEXT,
        description=version.DESCRIPTION,
        version=version.VERSION
    )
    # Resolved lazily in lifespan so importing this module needs no environment
    app.state.settings = settings

    # Register all routers
    for _, module_name, _ in pkgutil.iter_modules(api.__path__):
        module = importlib.import_module(f"{api.__name__}.{module_name}")
        if hasattr(module, "router"):
            app.include_router(module.router)

    setupExceptionHandlers(app)
    return app


app = create_app()
