# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Pydantic schemas for the contact entity."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

from ...interface.schema_base import RequestModel, ResponseModel


class CreateContactRequest(RequestModel):
    """Payload for adding a contact to an audience.

    Attributes:
        email: Email address of the contact.
        first_name: First name.
        last_name: Last name.
        unsubscribed: Subscription status.
        audience_id: Audience the contact belongs to.
    """

    email: Annotated[str, Field(min_length=1, description="Contact email address")]
    first_name: Annotated[str | None, Field(default=None)]
    last_name: Annotated[str | None, Field(default=None)]
    unsubscribed: Annotated[bool | None, Field(default=None)]
    audience_id: Annotated[str | None, Field(default=None)]

    def with_first_name(self, name: str) -> CreateContactRequest:
        self.first_name = name
        return self

    def with_last_name(self, name: str) -> CreateContactRequest:
        self.last_name = name
        return self

    def with_unsubscribed(self, unsubscribed: bool) -> CreateContactRequest:
        self.unsubscribed = unsubscribed
        return self

    def with_audience(self, audience_id: str) -> CreateContactRequest:
        self.audience_id = audience_id
        return self


class UpdateContactRequest(RequestModel):
    """Payload for updating a contact; only set fields are sent."""

    email: Annotated[str | None, Field(default=None)]
    first_name: Annotated[str | None, Field(default=None)]
    last_name: Annotated[str | None, Field(default=None)]
    unsubscribed: Annotated[bool | None, Field(default=None)]

    def with_email(self, email: str) -> UpdateContactRequest:
        self.email = email
        return self

    def with_first_name(self, name: str) -> UpdateContactRequest:
        self.first_name = name
        return self

    def with_last_name(self, name: str) -> UpdateContactRequest:
        self.last_name = name
        return self

    def with_unsubscribed(self, unsubscribed: bool) -> UpdateContactRequest:
        self.unsubscribed = unsubscribed
        return self


class ContactIdResponse(ResponseModel):
    """Response of create/update calls."""

    object: str | None = None
    id: str | None = None


class Contact(ResponseModel):
    """A contact of an audience."""

    object: str | None = None
    id: str | None = None
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    created_at: str | None = None
    unsubscribed: bool | None = None

    def __repr__(self) -> str:
        return f"Contact(id='{self.id}', email='{self.email}')"


class ListContactsResponse(ResponseModel):
    """Contacts of one audience."""

    object: str | None = None
    data: list[Contact] = Field(default_factory=list)
