# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Domains facade: ``/domains`` endpoints."""

from __future__ import annotations

from ...interface.endpoint_base import ResourceAPI, path_segment
from .schema import CreateDomainRequest, Domain, DomainIdResponse, ListDomainsResponse, UpdateDomainRequest


class DomainsAPI(ResourceAPI):
    """Manage sending domains.

    Access via ``client.domains``.
    """

    name = "domains"

    def add(self, domain: CreateDomainRequest):
        """Add a domain; the response lists the DNS records to configure.

        https://resend.com/docs/api-reference/domains/create-domain
        """
        return self._request("POST", "/domains", json=domain, model=Domain)

    def get(self, domain_id: str):
        """Retrieve a single domain."""
        return self._request("GET", f"/domains/{path_segment(domain_id)}", model=Domain)

    def verify(self, domain_id: str):
        """Trigger verification of a domain's DNS records."""
        return self._request("POST", f"/domains/{path_segment(domain_id)}/verify", model=DomainIdResponse)

    def update(self, domain_id: str, update: UpdateDomainRequest):
        """Update tracking settings of a domain."""
        return self._request(
            "PATCH", f"/domains/{path_segment(domain_id)}", json=update, model=DomainIdResponse
        )

    def delete(self, domain_id: str):
        """Remove a domain."""
        return self._request("DELETE", f"/domains/{path_segment(domain_id)}")

    def list(self):
        """List all domains."""
        return self._request("GET", "/domains", model=ListDomainsResponse)
