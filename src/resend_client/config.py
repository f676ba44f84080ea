# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Client configuration resolved once at construction time.

Settings come from explicit arguments, then environment variables, then
defaults. Anything present but malformed raises ``ConfigurationError``: a
client without valid routing, credentials or throughput settings cannot serve
any call, so there is no fallback to defaults for bad values.

Environment variables:
    RESEND_API_KEY: API key (required unless passed explicitly).
    RESEND_BASE_URL: Base URL of the API (default ``https://api.resend.com``).
    RESEND_RATE_LIMIT: Requests admitted per rate period (default 9).
    RESEND_TIMEOUT: Per-request timeout in seconds (default 30).

Example:
    Resolving configuration::

        config = load_client_config(api_key="re_123", rate_limit=2)
        config.base_url
        # 'https://api.resend.com'
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from yarl import URL

from .errors import ConfigurationError
from .logger import get_logger

DEFAULT_BASE_URL = "https://api.resend.com"
DEFAULT_RATE_LIMIT = 9
DEFAULT_RATE_PERIOD = 1.1
DEFAULT_TIMEOUT = 30.0

ENV_API_KEY = "RESEND_API_KEY"
ENV_BASE_URL = "RESEND_BASE_URL"
ENV_RATE_LIMIT = "RESEND_RATE_LIMIT"
ENV_TIMEOUT = "RESEND_TIMEOUT"

logger = get_logger("config")


@dataclass(frozen=True)
class ClientConfig:
    """Validated settings for one client.

    Attributes:
        api_key: Bearer credential sent with every request.
        base_url: Absolute base URL every resource path is resolved against.
        rate_limit: Requests admitted per ``rate_period`` (non-blocking mode).
        rate_period: Length of the rate-limit window in seconds.
        timeout: Per-request timeout in seconds.
    """

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    rate_limit: int = DEFAULT_RATE_LIMIT
    rate_period: float = DEFAULT_RATE_PERIOD
    timeout: float = DEFAULT_TIMEOUT

    def __repr__(self) -> str:
        return (
            f"ClientConfig(api_key='re_*********', base_url='{self.base_url}', "
            f"rate_limit={self.rate_limit}, rate_period={self.rate_period}, timeout={self.timeout})"
        )


def parse_base_url(value: str | URL) -> URL:
    """Parse and validate an absolute ``http``/``https`` URL.

    Raises:
        ConfigurationError: If the value is not an absolute HTTP(S) URL.
    """
    try:
        url = value if isinstance(value, URL) else URL(str(value).strip())
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"Invalid base URL {value!r}: {exc}") from exc
    if url.scheme not in ("http", "https") or not url.host:
        raise ConfigurationError(f"Invalid base URL {value!r}: expected an absolute http(s) URL")
    return url


def parse_rate_limit(value: int | str) -> int:
    """Parse the number of requests admitted per rate period.

    Raises:
        ConfigurationError: If the value is not a positive integer.
    """
    if isinstance(value, bool):
        raise ConfigurationError(f"Invalid rate limit {value!r}: expected an integer")
    if isinstance(value, str):
        text = value.strip()
        if not text.isdigit():
            raise ConfigurationError(f"Invalid rate limit {value!r}: expected a non-negative integer")
        value = int(text)
    if not isinstance(value, int):
        raise ConfigurationError(f"Invalid rate limit {value!r}: expected an integer")
    if value < 1:
        raise ConfigurationError(f"Invalid rate limit {value!r}: at least one request per period is required")
    return value


def parse_timeout(value: float | str) -> float:
    """Parse a positive timeout in seconds.

    Raises:
        ConfigurationError: If the value is not a positive number.
    """
    try:
        timeout = float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"Invalid timeout {value!r}: expected a number of seconds") from exc
    if timeout <= 0:
        raise ConfigurationError(f"Invalid timeout {value!r}: must be positive")
    return timeout


def load_client_config(
    api_key: str | None = None,
    base_url: str | None = None,
    rate_limit: int | str | None = None,
    rate_period: float = DEFAULT_RATE_PERIOD,
    timeout: float | None = None,
    environ: Mapping[str, str] | None = None,
) -> ClientConfig:
    """Resolve client settings.

    Priority: explicit argument > environment variable > default.

    Args:
        api_key: API key; falls back to ``RESEND_API_KEY``.
        base_url: Base URL override; falls back to ``RESEND_BASE_URL``.
        rate_limit: Requests per period; falls back to ``RESEND_RATE_LIMIT``.
        rate_period: Rate-limit window in seconds.
        timeout: Request timeout; falls back to ``RESEND_TIMEOUT``.
        environ: Environment mapping to read instead of ``os.environ``.

    Returns:
        A validated ``ClientConfig``.

    Raises:
        ConfigurationError: If the API key is missing or any value is malformed.
    """
    env = os.environ if environ is None else environ

    key = api_key if api_key is not None else env.get(ENV_API_KEY)
    if not key or not key.strip():
        raise ConfigurationError(f"Missing API key: pass api_key or set {ENV_API_KEY}")

    raw_url = base_url if base_url is not None else env.get(ENV_BASE_URL, DEFAULT_BASE_URL)
    url = parse_base_url(raw_url)

    raw_rate = rate_limit if rate_limit is not None else env.get(ENV_RATE_LIMIT)
    rate = DEFAULT_RATE_LIMIT if raw_rate is None else parse_rate_limit(raw_rate)

    if rate_period <= 0:
        raise ConfigurationError(f"Invalid rate period {rate_period!r}: must be positive")

    raw_timeout = timeout if timeout is not None else env.get(ENV_TIMEOUT)
    request_timeout = DEFAULT_TIMEOUT if raw_timeout is None else parse_timeout(raw_timeout)

    config = ClientConfig(
        api_key=key.strip(),
        base_url=str(url),
        rate_limit=rate,
        rate_period=float(rate_period),
        timeout=request_timeout,
    )
    logger.debug("Resolved %r", config)
    return config
