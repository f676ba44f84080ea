# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Resource entities of the Resend API.

Each subpackage contains:
- endpoint.py: the facade mapping methods to HTTP calls
- schema.py: Pydantic request and response models
"""

from .api_keys import ApiKeysAPI
from .audiences import AudiencesAPI
from .contacts import ContactsAPI
from .domains import DomainsAPI
from .emails import EmailsAPI

__all__ = [
    "ApiKeysAPI",
    "AudiencesAPI",
    "ContactsAPI",
    "DomainsAPI",
    "EmailsAPI",
]
