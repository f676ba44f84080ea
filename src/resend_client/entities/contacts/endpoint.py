# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Contacts facade: ``/audiences/:id/contacts`` endpoints."""

from __future__ import annotations

from ...interface.endpoint_base import ResourceAPI, path_segment
from .schema import (
    Contact,
    ContactIdResponse,
    CreateContactRequest,
    ListContactsResponse,
    UpdateContactRequest,
)


def _contacts_path(audience_id: str, contact: str | None = None) -> str:
    path = f"/audiences/{path_segment(audience_id)}/contacts"
    if contact is not None:
        path = f"{path}/{path_segment(contact)}"
    return path


class ContactsAPI(ResourceAPI):
    """Manage the contacts of an audience.

    Access via ``client.contacts``.
    """

    name = "contacts"

    def create(self, audience_id: str, contact: CreateContactRequest):
        """Create a contact inside an audience.

        https://resend.com/docs/api-reference/contacts/create-contact
        """
        return self._request("POST", _contacts_path(audience_id), json=contact, model=ContactIdResponse)

    def get(self, contact_id: str, audience_id: str):
        """Retrieve a single contact from an audience."""
        return self._request("GET", _contacts_path(audience_id, contact_id), model=Contact)

    def update(self, contact_id: str, audience_id: str, contact: UpdateContactRequest):
        """Update an existing contact."""
        return self._request(
            "PATCH", _contacts_path(audience_id, contact_id), json=contact, model=ContactIdResponse
        )

    def delete(self, audience_id: str, email_or_id: str):
        """Remove a contact from an audience by email or id."""
        return self._request("DELETE", _contacts_path(audience_id, email_or_id))

    def list(self, audience_id: str):
        """List all contacts of an audience."""
        return self._request("GET", _contacts_path(audience_id), model=ListContactsResponse)
