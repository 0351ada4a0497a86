"""HTTP route handlers (FastAPI APIRouter).

Defines the `/` endpoint, which delegates to the `QuoteClient` held by
the app lifespan in `client_manager`.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from .client_manager import get_quote_client
from .quote_client import QuoteClient

logger = logging.getLogger("app.routes")

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
async def get_quote(quote_client: QuoteClient = Depends(get_quote_client)):
    # Upstream failures propagate; the framework turns them into a plain 500
    quote = await quote_client.fetch_quote()
    text = str(quote)
    logger.info("quote1 %s", text)
    return text
