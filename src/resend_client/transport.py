# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""HTTP transport boundary.

The dispatcher only knows two small types defined here:

- ``ApiRequest``: an unsent, mutable request descriptor (method, URL, headers,
  JSON body, query parameters) that facades decorate before dispatch.
- ``ApiResponse``: a fully read response (status, headers, raw body).

Two transports execute requests: ``AiohttpTransport`` for asyncio code and
``RequestsTransport`` for sequential code. Library-specific exceptions never
leave this module; they are re-raised as ``TransportError``.

Example:
    Sending a request without a client::

        request = ApiRequest("GET", URL("https://api.resend.com/domains"))
        request.with_header("Authorization", "Bearer re_123")
        response = await AiohttpTransport().send(request)
        response.json()
"""

from __future__ import annotations

import asyncio
import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol

import aiohttp
import requests
from yarl import URL

from .errors import TransportError


@dataclass
class ApiRequest:
    """Unsent request descriptor.

    Attributes:
        method: HTTP verb in upper case.
        url: Absolute request URL.
        headers: Request headers.
        json: JSON-serializable body, or None for no body.
        params: Query string parameters.
    """

    method: str
    url: URL
    headers: dict[str, str] = field(default_factory=dict)
    json: Any = None
    params: dict[str, str] = field(default_factory=dict)

    def with_header(self, name: str, value: str) -> ApiRequest:
        """Set (or overwrite) a header."""
        self.headers[name] = value
        return self

    def with_json(self, body: Any) -> ApiRequest:
        """Attach a JSON body."""
        self.json = body
        self.headers["Content-Type"] = "application/json"
        return self

    def with_params(self, params: Mapping[str, Any]) -> ApiRequest:
        """Merge query parameters; ``None`` values are skipped."""
        for key, value in params.items():
            if value is None:
                continue
            if isinstance(value, bool):
                value = "true" if value else "false"
            self.params[key] = str(value)
        return self

    def encode_body(self) -> bytes | None:
        """Serialize the JSON body.

        Raises:
            TransportError: If the body is not JSON-serializable.
        """
        if self.json is None:
            return None
        try:
            return json.dumps(self.json).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise TransportError(f"Cannot serialize request body: {exc}") from exc


@dataclass
class ApiResponse:
    """Response handle returned by a transport.

    Attributes:
        status: HTTP status code.
        headers: Response headers (case-insensitive mapping).
        content: Raw response body.
        url: Final URL of the request.
    """

    status: int
    headers: Mapping[str, str] = field(default_factory=dict)
    content: bytes = b""
    url: str = ""

    @property
    def is_error(self) -> bool:
        """True for client (4xx) and server (5xx) error statuses."""
        return 400 <= self.status <= 599

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")

    def json(self) -> Any:
        """Decode the body as JSON.

        Raises:
            ValueError: If the body is not valid JSON.
        """
        return json.loads(self.content)


class AsyncTransport(Protocol):
    """Async HTTP execution capability."""

    async def send(self, request: ApiRequest) -> ApiResponse:
        ...


class SyncTransport(Protocol):
    """Blocking HTTP execution capability."""

    def send(self, request: ApiRequest) -> ApiResponse:
        ...


class AiohttpTransport:
    """Async transport backed by aiohttp.

    Without a session, each request runs in its own short-lived
    ``aiohttp.ClientSession``, so nothing needs closing. A caller-supplied
    session is used as-is (connection pooling) and stays owned by the caller.
    """

    def __init__(self, session: aiohttp.ClientSession | None = None, timeout: float = 30.0):
        self._session = session
        self._timeout = aiohttp.ClientTimeout(total=timeout)

    @property
    def session(self) -> aiohttp.ClientSession | None:
        return self._session

    async def send(self, request: ApiRequest) -> ApiResponse:
        """Execute one request.

        Raises:
            TransportError: On serialization, network or timeout failure.
        """
        body = request.encode_body()
        try:
            if self._session is not None:
                return await self._execute(self._session, request, body)
            async with aiohttp.ClientSession(timeout=self._timeout) as session:
                return await self._execute(session, request, body)
        except asyncio.TimeoutError as exc:
            raise TransportError(f"{request.method} {request.url} timed out") from exc
        except aiohttp.ClientError as exc:
            raise TransportError(f"{request.method} {request.url} failed: {exc}") from exc

    async def _execute(
        self, session: aiohttp.ClientSession, request: ApiRequest, body: bytes | None
    ) -> ApiResponse:
        async with session.request(
            request.method,
            request.url,
            headers=request.headers,
            params=request.params or None,
            data=body,
            timeout=self._timeout,
        ) as response:
            content = await response.read()
            return ApiResponse(
                status=response.status,
                headers=response.headers,
                content=content,
                url=str(response.url),
            )


class RequestsTransport:
    """Blocking transport backed by requests.

    Without a session the module-level ``requests.request`` is used.
    """

    def __init__(self, session: requests.Session | None = None, timeout: float = 30.0):
        self._session = session
        self._timeout = timeout

    @property
    def session(self) -> requests.Session | None:
        return self._session

    def send(self, request: ApiRequest) -> ApiResponse:
        """Execute one request.

        Raises:
            TransportError: On serialization, network or timeout failure.
        """
        body = request.encode_body()
        execute = self._session.request if self._session is not None else requests.request
        try:
            response = execute(
                request.method,
                str(request.url),
                headers=request.headers,
                params=request.params or None,
                data=body,
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            raise TransportError(f"{request.method} {request.url} failed: {exc}") from exc
        return ApiResponse(
            status=response.status_code,
            headers=response.headers,
            content=response.content,
            url=response.url,
        )
