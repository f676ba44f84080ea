# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""API keys facade: ``/api-keys`` endpoints."""

from __future__ import annotations

from ...interface.endpoint_base import ResourceAPI, path_segment
from .schema import CreateApiKeyRequest, CreateApiKeyResponse, ListApiKeysResponse


class ApiKeysAPI(ResourceAPI):
    """Manage API keys.

    Access via ``client.api_keys``.
    """

    name = "api-keys"

    def create(self, api_key: CreateApiKeyRequest):
        """Create an API key.

        https://resend.com/docs/api-reference/api-keys/create-api-key
        """
        return self._request("POST", "/api-keys", json=api_key, model=CreateApiKeyResponse)

    def list(self):
        """List all API keys (tokens are not included)."""
        return self._request("GET", "/api-keys", model=ListApiKeysResponse)

    def delete(self, api_key_id: str):
        """Remove an API key."""
        return self._request("DELETE", f"/api-keys/{path_segment(api_key_id)}")
