# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Shared fixtures: in-memory transports and canned API responses."""

from __future__ import annotations

import json
import time
from collections import deque
from typing import Any

import pytest

from resend_client.client import BlockingClient, Client
from resend_client.config import ENV_API_KEY, ENV_BASE_URL, ENV_RATE_LIMIT, ENV_TIMEOUT, ClientConfig
from resend_client.rate_limit import NO_JITTER
from resend_client.transport import ApiRequest, ApiResponse


def make_response(status: int = 200, payload: Any = None, body: bytes | None = None) -> ApiResponse:
    """Build an ApiResponse from a JSON payload or raw bytes."""
    if body is None:
        body = json.dumps(payload if payload is not None else {}).encode("utf-8")
    return ApiResponse(
        status=status,
        headers={"Content-Type": "application/json"},
        content=body,
        url="https://api.resend.com/",
    )


class FakeTransport:
    """Async transport recording requests and replaying queued responses."""

    def __init__(self, *responses: ApiResponse):
        self.requests: list[ApiRequest] = []
        self.bodies: list[Any] = []
        self.sent_at: list[float] = []
        self._responses = deque(responses)

    def queue(self, *responses: ApiResponse) -> None:
        self._responses.extend(responses)

    def _next(self, request: ApiRequest) -> ApiResponse:
        body = request.encode_body()
        self.requests.append(request)
        self.bodies.append(json.loads(body) if body is not None else None)
        self.sent_at.append(time.monotonic())
        if self._responses:
            return self._responses.popleft()
        return make_response(200, {})

    async def send(self, request: ApiRequest) -> ApiResponse:
        return self._next(request)


class FakeSyncTransport(FakeTransport):
    """Blocking flavour of FakeTransport."""

    def send(self, request: ApiRequest) -> ApiResponse:  # type: ignore[override]
        return self._next(request)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's RESEND_* variables out of the tests."""
    for name in (ENV_API_KEY, ENV_BASE_URL, ENV_RATE_LIMIT, ENV_TIMEOUT):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def response_factory():
    return make_response


@pytest.fixture
def fake_transport():
    return FakeTransport()


@pytest.fixture
def fake_sync_transport():
    return FakeSyncTransport()


@pytest.fixture
def client_config():
    return ClientConfig(api_key="re_test_123", rate_limit=9, rate_period=1.1)


@pytest.fixture
def client(fake_transport):
    """Non-blocking client wired to the in-memory transport."""
    return Client("re_test_123", transport=fake_transport, jitter=NO_JITTER)


@pytest.fixture
def blocking_client(fake_sync_transport):
    return BlockingClient("re_test_123", transport=fake_sync_transport)
