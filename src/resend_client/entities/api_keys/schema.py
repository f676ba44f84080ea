# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Pydantic schemas for the API key entity."""

from __future__ import annotations

from enum import Enum
from typing import Annotated

from pydantic import Field

from ...interface.schema_base import RequestModel, ResponseModel


class Permission(str, Enum):
    """Access level of an API key.

    Attributes:
        FULL_ACCESS: Create, delete, get and update any resource.
        SENDING_ACCESS: Send emails only.
    """

    FULL_ACCESS = "full_access"
    SENDING_ACCESS = "sending_access"


class CreateApiKeyRequest(RequestModel):
    """Payload for creating an API key.

    Attributes:
        name: Key name, at most 50 characters.
        permission: Access level, full access when unset.
        domain_id: Restrict sending to one domain (sending access only).
    """

    name: Annotated[str, Field(min_length=1, max_length=50, description="API key name")]
    permission: Annotated[Permission | None, Field(default=None)]
    domain_id: Annotated[str | None, Field(default=None)]

    def with_full_access(self) -> CreateApiKeyRequest:
        self.permission = Permission.FULL_ACCESS
        self.domain_id = None
        return self

    def with_sending_access(self) -> CreateApiKeyRequest:
        self.permission = Permission.SENDING_ACCESS
        return self

    def with_domain_access(self, domain_id: str) -> CreateApiKeyRequest:
        """Grant sending access restricted to one domain."""
        self.permission = Permission.SENDING_ACCESS
        self.domain_id = domain_id
        return self


class CreateApiKeyResponse(ResponseModel):
    """A newly created key; ``token`` is only ever returned here."""

    id: str
    token: str

    def __repr__(self) -> str:
        return f"CreateApiKeyResponse(id='{self.id}', token='re_*********')"


class ApiKey(ResponseModel):
    id: str
    name: str | None = None
    created_at: str | None = None


class ListApiKeysResponse(ResponseModel):
    object: str | None = None
    data: list[ApiKey] = Field(default_factory=list)
