"""Errors raised while talking to the upstream quote service."""

from typing import Optional


class QuoteServiceError(Exception):
    """Base class for upstream quote service failures."""


class NetworkError(QuoteServiceError):
    """The upstream could not be reached or did not answer in time."""


class UpstreamError(QuoteServiceError):
    def __init__(self, status_code: int, message: Optional[str] = None):
        self.status_code = status_code
        super().__init__(message or f"Quote service returned HTTP {status_code}")


class DecodeError(QuoteServiceError):
    """The response body is not JSON or does not have the quote shape."""
