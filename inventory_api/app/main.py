"""
Main entrypoint for the Inventory API.

This module assembles the FastAPI application: it configures logging,
builds the in‑memory stores and the services on top of them, and
includes the API router and error handlers.  ``create_app`` builds
and configures the app, which is then instantiated at module import
time as ``app``, e.g.::

    uvicorn inventory_api.app.main:app

Tests call ``create_app`` directly with their own settings or stores.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from .api.error_handlers import register_error_handlers
from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .services.product_service import ProductService
from .services.user_service import UserService
from .storage.base import ProductStorage, UserStorage
from .storage.memory import InMemoryProductStorage, InMemoryUserStorage

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    logger.info("%s started", app.title)
    yield
    logger.info("%s shutting down", app.title)


def create_app(
    app_settings: Optional[Settings] = None,
    user_storage: Optional[UserStorage] = None,
    product_storage: Optional[ProductStorage] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use; defaults to the environment‑derived
        ``core.config.settings``.
    user_storage, product_storage : optional
        Stores backing the services.  Fresh in‑memory stores are
        created when omitted, so every app starts empty.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    cfg = app_settings or default_settings
    # Initialise logging before anything else so that the stores and
    # services below can log.
    setup_logging(cfg.log_level, cfg.log_file)

    app = FastAPI(title=cfg.project_name, version=cfg.api_version, debug=cfg.debug, lifespan=lifespan)

    if user_storage is None:
        user_storage = InMemoryUserStorage()
    if product_storage is None:
        product_storage = InMemoryProductStorage()

    app.state.settings = cfg
    app.state.user_service = UserService(user_storage, cfg.secret_key)
    app.state.product_service = ProductService(product_storage)

    app.include_router(api_router, prefix="/api")
    register_error_handlers(app)

    @app.get("/health", tags=["health"])
    async def health() -> dict:
        return {"status": "ok"}

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
