# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""API key entity: facade and schemas."""

from .endpoint import ApiKeysAPI
from .schema import ApiKey, CreateApiKeyRequest, CreateApiKeyResponse, ListApiKeysResponse, Permission

__all__ = [
    "ApiKey",
    "ApiKeysAPI",
    "CreateApiKeyRequest",
    "CreateApiKeyResponse",
    "ListApiKeysResponse",
    "Permission",
]
