# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Audiences facade: ``/audiences`` endpoints."""

from __future__ import annotations

from ...interface.endpoint_base import ResourceAPI, path_segment
from .schema import Audience, CreateAudienceRequest, CreateAudienceResponse, ListAudiencesResponse


class AudiencesAPI(ResourceAPI):
    """Manage audiences.

    Access via ``client.audiences``.
    """

    name = "audiences"

    def create(self, name: str):
        """Create an audience.

        https://resend.com/docs/api-reference/audiences/create-audience
        """
        payload = CreateAudienceRequest(name=name)
        return self._request("POST", "/audiences", json=payload, model=CreateAudienceResponse)

    def get(self, audience_id: str):
        """Retrieve a single audience."""
        return self._request("GET", f"/audiences/{path_segment(audience_id)}", model=Audience)

    def delete(self, audience_id: str):
        """Remove an existing audience."""
        return self._request("DELETE", f"/audiences/{path_segment(audience_id)}")

    def list(self):
        """List all audiences."""
        return self._request("GET", "/audiences", model=ListAudiencesResponse)
