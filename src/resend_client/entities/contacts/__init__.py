# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Contact entity: facade and schemas."""

from .endpoint import ContactsAPI
from .schema import (
    Contact,
    ContactIdResponse,
    CreateContactRequest,
    ListContactsResponse,
    UpdateContactRequest,
)

__all__ = [
    "Contact",
    "ContactIdResponse",
    "ContactsAPI",
    "CreateContactRequest",
    "ListContactsResponse",
    "UpdateContactRequest",
]
