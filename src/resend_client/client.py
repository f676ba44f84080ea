# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Client handles for the Resend API.

A client owns exactly one dispatcher and exposes one facade per resource
family, all bound to that dispatcher. ``clone()`` (or ``copy.copy``) returns
another handle on the same dispatcher: both draw from a single rate-limit
budget. There is no close step; a client is released like any other object.

Usage:
    Non-blocking::

        >>> from resend_client import Client, CreateEmailBaseOptions
        >>> resend = Client("re_123")
        >>> email = CreateEmailBaseOptions.new(
        ...     "Acme <onboarding@resend.dev>", ["delivered@resend.dev"], "Hello World!"
        ... ).with_text("Hello World!")
        >>> sent = await resend.emails.send(email)
        >>> sent.id
        '49a3999c-0ce1-4ea6-ab68-afcd6dc2e794'

    Blocking::

        >>> resend = BlockingClient()  # reads RESEND_API_KEY
        >>> resend.domains.list()
        ListDomainsResponse(...)
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import aiohttp
import requests

from .config import DEFAULT_RATE_LIMIT, DEFAULT_RATE_PERIOD, load_client_config
from .dispatcher import BaseDispatcher, BlockingDispatcher, Dispatcher
from .entities import ApiKeysAPI, AudiencesAPI, ContactsAPI, DomainsAPI, EmailsAPI
from .rate_limit import Jitter
from .transport import AsyncTransport, SyncTransport


class _BaseClient:
    """Facade wiring shared by both client flavours.

    Attributes:
        emails: APIs for ``/emails`` endpoints.
        contacts: APIs for ``/audiences/:id/contacts`` endpoints.
        audiences: APIs for ``/audiences`` endpoints.
        domains: APIs for ``/domains`` endpoints.
        api_keys: APIs for ``/api-keys`` endpoints.
    """

    _dispatcher: BaseDispatcher

    def _bind(self, dispatcher: BaseDispatcher) -> None:
        self._dispatcher = dispatcher
        self.emails = EmailsAPI(dispatcher)
        self.contacts = ContactsAPI(dispatcher)
        self.audiences = AudiencesAPI(dispatcher)
        self.domains = DomainsAPI(dispatcher)
        self.api_keys = ApiKeysAPI(dispatcher)

    @classmethod
    def _from_dispatcher(cls, dispatcher: BaseDispatcher) -> Any:
        client = cls.__new__(cls)
        client._bind(dispatcher)
        return client

    @property
    def api_key(self) -> str:
        """The API key sent with every request."""
        return self._dispatcher.api_key

    @property
    def user_agent(self) -> str:
        """The ``User-Agent`` header value."""
        return self._dispatcher.user_agent

    @property
    def base_url(self) -> str:
        return str(self._dispatcher.base_url)

    def clone(self) -> Any:
        """Return a new handle sharing this client's dispatcher."""
        return self._from_dispatcher(self._dispatcher)

    def __copy__(self) -> Any:
        return self.clone()

    def __deepcopy__(self, memo: dict[int, Any]) -> Any:
        # A deep copy would fork the rate-limit budget.
        return self.clone()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._dispatcher!r}>"


class Client(_BaseClient):
    """Non-blocking client for asyncio code, rate-limited per dispatcher."""

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str | None = None,
        rate_limit: int | str | None = None,
        rate_period: float = DEFAULT_RATE_PERIOD,
        timeout: float | None = None,
        session: aiohttp.ClientSession | None = None,
        transport: AsyncTransport | None = None,
        jitter: Jitter | None = None,
        environ: Mapping[str, str] | None = None,
    ):
        """Create a client.

        Args:
            api_key: API key; defaults to ``RESEND_API_KEY``.
            base_url: API base URL; defaults to ``RESEND_BASE_URL`` or
                ``https://api.resend.com``.
            rate_limit: Requests per ``rate_period``; defaults to
                ``RESEND_RATE_LIMIT`` or 9.
            rate_period: Rate-limit window in seconds.
            timeout: Per-request timeout in seconds.
            session: Caller-owned aiohttp session for connection pooling.
            transport: Transport override (tests, custom HTTP stacks).
            jitter: Rate-limit wait jitter, 10-50 ms by default.
            environ: Environment mapping to read instead of ``os.environ``.

        Raises:
            ConfigurationError: Missing API key or malformed setting.
        """
        config = load_client_config(
            api_key=api_key,
            base_url=base_url,
            rate_limit=rate_limit,
            rate_period=rate_period,
            timeout=timeout,
            environ=environ,
        )
        self._bind(Dispatcher(config, session=session, transport=transport, jitter=jitter))

    @property
    def dispatcher(self) -> Dispatcher:
        return self._dispatcher  # type: ignore[return-value]

    @property
    def session(self) -> aiohttp.ClientSession | None:
        """The caller-supplied aiohttp session, if any."""
        return getattr(self.dispatcher.transport, "session", None)


class BlockingClient(_BaseClient):
    """Blocking client for sequential code; no rate limiter is applied."""

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
        transport: SyncTransport | None = None,
        environ: Mapping[str, str] | None = None,
    ):
        """Create a blocking client.

        Args:
            api_key: API key; defaults to ``RESEND_API_KEY``.
            base_url: API base URL; defaults to ``RESEND_BASE_URL`` or
                ``https://api.resend.com``.
            timeout: Per-request timeout in seconds.
            session: Caller-owned ``requests.Session``.
            transport: Transport override.
            environ: Environment mapping to read instead of ``os.environ``.

        Raises:
            ConfigurationError: Missing API key or malformed setting.
        """
        config = load_client_config(
            api_key=api_key,
            base_url=base_url,
            rate_limit=DEFAULT_RATE_LIMIT,
            timeout=timeout,
            environ=environ,
        )
        self._bind(BlockingDispatcher(config, session=session, transport=transport))

    @property
    def dispatcher(self) -> BlockingDispatcher:
        return self._dispatcher  # type: ignore[return-value]

    @property
    def session(self) -> requests.Session | None:
        """The caller-supplied requests session, if any."""
        return getattr(self.dispatcher.transport, "session", None)
