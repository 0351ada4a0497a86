"""Application entrypoint.

This file is intentionally small: lifecycle, the upstream client, and
HTTP handlers live in their own modules for readability and testability.
"""

import logging
import os
from typing import Optional

import httpx
from fastapi import FastAPI

from . import routes
from .client_manager import lifespan
from .config import Settings

logger = logging.getLogger("app")
logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())


def create_app(
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """Build the app; `transport` replaces the network layer (tests)."""
    app = FastAPI(lifespan=lifespan, redirect_slashes=False)
    app.state.settings = settings or Settings.from_env()
    app.state.transport = transport
    app.include_router(routes.router)
    return app


app = create_app()
