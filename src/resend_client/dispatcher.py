# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Shared request dispatch for every resource facade.

A dispatcher owns the credential, base URL, user agent and transport of one
client (plus the rate limiter in non-blocking mode). Facades hold a reference
to it, never a copy, so all of them authenticate the same way and draw from
the same throughput budget.

Each call goes through two steps:

- ``build(method, path)``: resolve the path against the base URL and attach
  the ``Authorization`` and ``User-Agent`` headers. Pure, no I/O.
- ``send(request)``: wait for the rate limiter (non-blocking mode only),
  perform exactly one round trip, then classify the outcome. Error statuses
  (400-599) raise ``RemoteError`` with the decoded error body, or
  ``TransportError`` if that body cannot be decoded. Any other status returns
  the ``ApiResponse`` untouched.

``request()`` chains both and decodes the body into a pydantic model, which is
what facades use.

Example:
    Using a dispatcher directly::

        dispatcher = Dispatcher(load_client_config(api_key="re_123"))
        request = dispatcher.build("GET", "/domains")
        response = await dispatcher.send(request)
        response.json()
"""

from __future__ import annotations

from typing import Any, TypeVar

import aiohttp
import requests
from pydantic import BaseModel, ValidationError
from yarl import URL

from ._version import USER_AGENT
from .config import ClientConfig, parse_base_url
from .errors import ConfigurationError, ErrorResponse, RemoteError, TransportError
from .logger import get_logger
from .rate_limit import Jitter, RateLimiter
from .transport import (
    AiohttpTransport,
    ApiRequest,
    ApiResponse,
    AsyncTransport,
    RequestsTransport,
    SyncTransport,
)

ModelT = TypeVar("ModelT", bound=BaseModel)

logger = get_logger("dispatcher")


class BaseDispatcher:
    """Request construction and outcome classification shared by both modes.

    Attributes:
        api_key: Bearer credential.
        base_url: Absolute base URL.
        user_agent: ``User-Agent`` header value.
    """

    def __init__(self, config: ClientConfig):
        self.api_key = config.api_key
        base_url = parse_base_url(config.base_url)
        if not base_url.path.endswith("/"):
            base_url = base_url.with_path(base_url.path + "/")
        self.base_url: URL = base_url
        self.user_agent = USER_AGENT

    def build(self, method: str, path: str) -> ApiRequest:
        """Create an authenticated, unsent request for ``path``.

        ``path`` is resolved below the base URL path, so ``/emails`` against
        ``https://proxy.example.com/resend`` targets ``/resend/emails``.

        Raises:
            ConfigurationError: If base URL and path do not form an absolute
                http(s) URL.
        """
        try:
            url = self.base_url.join(URL(path.lstrip("/")))
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"Invalid API endpoint {path!r}: {exc}") from exc
        if url.scheme not in ("http", "https") or not url.host:
            raise ConfigurationError(f"Invalid API endpoint {path!r}: resolved to {url}")

        return ApiRequest(
            method=method.upper(),
            url=url,
            headers={
                "Authorization": f"Bearer {self.api_key}",
                "User-Agent": self.user_agent,
            },
        )

    def classify(self, response: ApiResponse) -> ApiResponse:
        """Return successful responses, raise for error statuses.

        Raises:
            RemoteError: Error status with a decodable error body.
            TransportError: Error status with an undecodable body.
        """
        if not response.is_error:
            return response
        try:
            error = ErrorResponse.model_validate_json(response.content)
        except ValidationError as exc:
            raise TransportError(
                f"HTTP {response.status} with undecodable error body: {response.text[:200]!r}",
                status=response.status,
            ) from exc
        raise RemoteError(error, status=response.status)

    def decode(self, response: ApiResponse, model: type[ModelT] | None) -> ModelT | None:
        """Decode a successful response into ``model``; ``None`` discards the body.

        Raises:
            TransportError: If the body does not match ``model``.
        """
        if model is None:
            return None
        try:
            return model.model_validate_json(response.content)
        except ValidationError as exc:
            raise TransportError(
                f"Cannot decode {model.__name__} from HTTP {response.status} response: {exc}",
                status=response.status,
            ) from exc

    def _prepare(
        self,
        method: str,
        path: str,
        json: Any = None,
        params: dict[str, Any] | None = None,
    ) -> ApiRequest:
        request = self.build(method, path)
        if json is not None:
            request.with_json(json)
        if params:
            request.with_params(params)
        return request

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(api_key='re_*********', "
            f"user_agent='{self.user_agent}', base_url='{self.base_url}')"
        )


class Dispatcher(BaseDispatcher):
    """Non-blocking dispatcher: rate-limited, for asyncio callers.

    Attributes:
        transport: Async HTTP transport.
        limiter: Throughput budget shared by every facade of the client.
    """

    def __init__(
        self,
        config: ClientConfig,
        session: aiohttp.ClientSession | None = None,
        transport: AsyncTransport | None = None,
        limiter: RateLimiter | None = None,
        jitter: Jitter | None = None,
    ):
        """Initialize the dispatcher.

        Args:
            config: Validated client configuration.
            session: Optional caller-owned aiohttp session.
            transport: Transport override; defaults to ``AiohttpTransport``.
            limiter: Rate limiter override; defaults to one built from config.
            jitter: Jitter for the default rate limiter.
        """
        super().__init__(config)
        self.transport: AsyncTransport = transport or AiohttpTransport(
            session=session, timeout=config.timeout
        )
        self.limiter = limiter or RateLimiter(
            config.rate_limit, config.rate_period, jitter=jitter
        )

    async def send(self, request: ApiRequest) -> ApiResponse:
        """Throttle, execute and classify one request.

        Raises:
            RemoteError: The API answered with an error body.
            TransportError: The request failed or the error body was undecodable.
        """
        await self.limiter.acquire()
        logger.debug("%s %s", request.method, request.url)
        response = await self.transport.send(request)
        logger.debug("%s %s -> %d", request.method, request.url, response.status)
        return self.classify(response)

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: dict[str, Any] | None = None,
        model: type[ModelT] | None = None,
    ) -> ModelT | None:
        """Build, send and decode a request in one call."""
        request = self._prepare(method, path, json=json, params=params)
        response = await self.send(request)
        return self.decode(response, model)


class BlockingDispatcher(BaseDispatcher):
    """Sequential dispatcher: no rate limiter, callers pace themselves.

    Attributes:
        transport: Blocking HTTP transport.
    """

    def __init__(
        self,
        config: ClientConfig,
        session: requests.Session | None = None,
        transport: SyncTransport | None = None,
    ):
        super().__init__(config)
        self.transport: SyncTransport = transport or RequestsTransport(
            session=session, timeout=config.timeout
        )

    def send(self, request: ApiRequest) -> ApiResponse:
        """Execute and classify one request."""
        logger.debug("%s %s", request.method, request.url)
        response = self.transport.send(request)
        logger.debug("%s %s -> %d", request.method, request.url, response.status)
        return self.classify(response)

    def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: dict[str, Any] | None = None,
        model: type[ModelT] | None = None,
    ) -> ModelT | None:
        """Build, send and decode a request in one call."""
        request = self._prepare(method, path, json=json, params=params)
        response = self.send(request)
        return self.decode(response, model)
