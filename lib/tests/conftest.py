from __future__ import annotations

import httpx
import pytest


class FakeServer:
    """Canned CarAPI responses served through ``httpx.MockTransport``."""

    def __init__(self, status: int = 200, body: str | bytes = b"", headers: dict[str, str] | None = None):
        self.status = status
        self.body = body.encode("utf-8") if isinstance(body, str) else body
        self.headers = headers or {}
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        # a raw stream keeps httpx from decoding Content-Encoding up front
        return httpx.Response(self.status, headers=self.headers, stream=httpx.ByteStream(self.body))

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self.handler))

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def fake_server():
    return FakeServer
