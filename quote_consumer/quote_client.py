"""Upstream client: fetches one random quote per call.

This module focuses on the single outbound GET and on turning the
response into a `Quote`. Failures are logged and re-raised as the
`QuoteServiceError` family; nothing is retried or cached here.
"""

import logging

import httpx
from pydantic import ValidationError

from .errors import DecodeError, NetworkError, UpstreamError
from .models import Quote

logger = logging.getLogger("app.client")


class QuoteClient:
    def __init__(self, http_client: httpx.AsyncClient, url: str):
        # The shared client is owned by the app lifespan, not by us
        self._http = http_client
        self.url = url

    async def fetch_quote(self) -> Quote:
        try:
            response = await self._http.get(self.url)
        except httpx.TransportError as e:
            logger.error("Quote service unreachable at %s: %r", self.url, e)
            raise NetworkError(f"Could not reach quote service: {e!r}") from e

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                "Quote service returned HTTP %s for %s",
                response.status_code,
                self.url,
            )
            raise UpstreamError(response.status_code) from e

        try:
            quote = Quote.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.error("Unexpected quote payload from %s: %s", self.url, e)
            raise DecodeError(f"Malformed quote payload: {e}") from e

        logger.debug("Fetched quote id=%s", quote.value.id)
        return quote
