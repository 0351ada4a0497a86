"""Shared HTTP client lifecycle.

This module centralizes startup/shutdown of the one `httpx.AsyncClient`
used for every upstream call and exposes the dependency used by request
handlers. The client lives on `app.state` for the lifetime of the app.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI, Request

from .config import Settings
from .quote_client import QuoteClient

logger = logging.getLogger("app.lifecycle")


def _build_http_client(
    settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None
) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        timeout=settings.quote_service_timeout, transport=transport
    )


async def run_startup_probe(quote_client: QuoteClient) -> None:
    """Fetch one quote and report it before serving traffic.

    Failures are not caught: a broken upstream aborts startup.
    """
    quote = await quote_client.fetch_quote()
    logger.info("%s", quote)
    print("quote1 " + str(quote))


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    http_client = _build_http_client(settings, app.state.transport)
    app.state.quote_client = QuoteClient(http_client, settings.random_quote_url)
    logger.info("HTTP client started for %s", settings.random_quote_url)
    try:
        if settings.startup_probe:
            await run_startup_probe(app.state.quote_client)
        yield
    finally:
        await http_client.aclose()
        app.state.quote_client = None
        logger.info("HTTP client closed")


def get_quote_client(request: Request) -> QuoteClient:
    return request.app.state.quote_client
