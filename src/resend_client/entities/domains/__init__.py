# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Domain entity: facade and schemas."""

from .endpoint import DomainsAPI
from .schema import (
    CreateDomainRequest,
    Domain,
    DomainIdResponse,
    DomainRecord,
    ListDomainsResponse,
    Region,
    UpdateDomainRequest,
)

__all__ = [
    "CreateDomainRequest",
    "Domain",
    "DomainIdResponse",
    "DomainRecord",
    "DomainsAPI",
    "ListDomainsResponse",
    "Region",
    "UpdateDomainRequest",
]
