"""pytest fixtures: stubbed upstream transports and app builders."""

import dataclasses
import json

import httpx
import pytest
from fastapi.testclient import TestClient

from quote_consumer import create_app
from quote_consumer.config import Settings

UPSTREAM = "http://quotes.test"

HELLO_PAYLOAD = {"type": "success", "value": {"id": 1, "quote": "Hello"}}


def quote_response(payload=HELLO_PAYLOAD, status_code=200):
    return httpx.Response(status_code, content=json.dumps(payload).encode())


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings():
    return Settings(quote_service_url=UPSTREAM, startup_probe=False)


@pytest.fixture
def make_client(settings):
    """Return a factory building a TestClient over a stubbed upstream.

    The handler is called with each outbound `httpx.Request`.
    """
    clients = []

    def _make(handler, **overrides):
        app_settings = dataclasses.replace(settings, **overrides)
        app = create_app(app_settings, transport=httpx.MockTransport(handler))
        client = TestClient(app, raise_server_exceptions=False)
        client.__enter__()
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.__exit__(None, None, None)
