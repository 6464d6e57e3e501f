"""Pytest fixtures.

`api_transport` builds an httpx.MockTransport that records every request
and answers with a canned response.
"""

from typing import Any

import httpx
import pytest

from pb_tools.adapters.productboard import ProductboardClient, create_productboard_router


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps the requests it served."""

    def __init__(self, status: int = 200, body: Any = None, headers: dict | None = None):
        self.requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            if body is None:
                return httpx.Response(status, headers=headers)
            if isinstance(body, bytes):
                return httpx.Response(status, content=body, headers=headers)
            return httpx.Response(status, json=body, headers=headers)

        super().__init__(handler)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]


@pytest.fixture
def token():
    """Fake Productboard token."""
    return "pb_test_token_123"


@pytest.fixture
def api_transport():
    """Factory for recording transports."""
    return RecordingTransport


@pytest.fixture
def make_client(token):
    """Client bound to a given transport."""

    def _make(transport: httpx.AsyncBaseTransport, **kwargs) -> ProductboardClient:
        return ProductboardClient(token, transport=transport, **kwargs)

    return _make


@pytest.fixture
def make_router(token):
    """Router over the Productboard tool table bound to a given transport."""

    def _make(transport: httpx.AsyncBaseTransport, **kwargs):
        return create_productboard_router(token, transport=transport, **kwargs)

    return _make
