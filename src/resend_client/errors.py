# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Error taxonomy for the Resend client.

Three kinds of failure are distinguished:

- ``ConfigurationError``: the client was built with an unusable configuration
  (missing API key, malformed base URL or rate). Raised at construction time
  and never meant to be handled around individual calls, so it is not a
  ``ResendError``.
- ``TransportError``: the request could not be serialized or transmitted, or
  the response body could not be decoded.
- ``RemoteError``: the service answered with a 4xx/5xx status and a structured
  error body.

Example:
    Handling call failures::

        try:
            sent = await client.emails.send(email)
        except RemoteError as exc:
            if exc.kind == ErrorKind.VALIDATION_ERROR:
                ...
        except TransportError:
            ...

See https://resend.com/docs/api-reference/errors
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


class ErrorKind(str, Enum):
    """Error names documented by the Resend API."""

    MISSING_REQUIRED_FIELD = "missing_required_field"
    INVALID_IDEMPOTENCY_KEY = "invalid_idempotency_key"
    INVALID_IDEMPOTENT_REQUEST = "invalid_idempotent_request"
    CONCURRENT_IDEMPOTENT_REQUESTS = "concurrent_idempotent_requests"
    INVALID_ACCESS = "invalid_access"
    INVALID_PARAMETER = "invalid_parameter"
    INVALID_REGION = "invalid_region"
    INVALID_ATTACHMENT = "invalid_attachment"
    INVALID_FROM_ADDRESS = "invalid_from_address"
    RATE_LIMIT_EXCEEDED = "rate_limit_exceeded"
    DAILY_QUOTA_EXCEEDED = "daily_quota_exceeded"
    MISSING_API_KEY = "missing_api_key"
    INVALID_API_KEY = "invalid_api_Key"
    RESTRICTED_API_KEY = "restricted_api_key"
    VALIDATION_ERROR = "validation_error"
    NOT_FOUND = "not_found"
    METHOD_NOT_ALLOWED = "method_not_allowed"
    SECURITY_ERROR = "security_error"
    APPLICATION_ERROR = "application_error"
    INTERNAL_SERVER_ERROR = "internal_server_error"


class ErrorResponse(BaseModel):
    """Structured error body returned for 4xx/5xx responses.

    Attributes:
        status_code: HTTP status echoed in the body (``statusCode``), if any.
        name: Stable error identifier, e.g. ``validation_error``.
        message: Human-readable description.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    status_code: Annotated[
        int | None,
        Field(default=None, alias="statusCode", description="HTTP status code")
    ]
    name: Annotated[str, Field(description="Error kind identifier")]
    message: Annotated[str, Field(description="Human-readable error message")]

    def __str__(self) -> str:
        return f"{self.name}: {self.message}"


class ConfigurationError(ValueError):
    """Raised when a client cannot be built from the given configuration."""


class ResendError(Exception):
    """Base class for failures of a dispatched request."""


class TransportError(ResendError):
    """Network, serialization or decoding failure.

    Attributes:
        status: HTTP status of the response, when one was received.
    """

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.status = status


class RemoteError(ResendError):
    """The service rejected the request with a structured error body.

    Attributes:
        response: The decoded error body.
        status: HTTP status of the response.
    """

    def __init__(self, response: ErrorResponse, status: int):
        super().__init__(str(response))
        self.response = response
        self.status = status

    @property
    def kind(self) -> str:
        """Error identifier as sent by the service (comparable to ``ErrorKind``)."""
        return self.response.name

    @property
    def message(self) -> str:
        """Human-readable message as sent by the service."""
        return self.response.message

    def __repr__(self) -> str:
        return f"RemoteError(status={self.status}, kind='{self.kind}', message='{self.message}')"
