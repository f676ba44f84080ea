# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Pydantic schemas for the domain entity."""

from __future__ import annotations

from enum import Enum
from typing import Annotated

from pydantic import Field

from ...interface.schema_base import RequestModel, ResponseModel


class Region(str, Enum):
    """Regions emails of a domain can be sent from."""

    US_EAST_1 = "us-east-1"
    EU_WEST_1 = "eu-west-1"
    SA_EAST_1 = "sa-east-1"
    AP_NORTHEAST_1 = "ap-northeast-1"


class CreateDomainRequest(RequestModel):
    """Payload for adding a domain.

    Attributes:
        name: Domain name, e.g. ``example.com``.
        region: Sending region, ``us-east-1`` when unset.
    """

    name: Annotated[str, Field(min_length=1, description="Domain name")]
    region: Annotated[Region | None, Field(default=None)]

    def with_region(self, region: Region | str) -> CreateDomainRequest:
        self.region = Region(region)
        return self


class UpdateDomainRequest(RequestModel):
    """Tracking settings of a domain; only set fields are sent."""

    click_tracking: Annotated[bool | None, Field(default=None)]
    open_tracking: Annotated[bool | None, Field(default=None)]

    def with_click_tracking(self, enable: bool) -> UpdateDomainRequest:
        self.click_tracking = enable
        return self

    def with_open_tracking(self, enable: bool) -> UpdateDomainRequest:
        self.open_tracking = enable
        return self


class DomainRecord(ResponseModel):
    """DNS record to configure for a domain.

    Attributes:
        record: Record purpose (``SPF``, ``DKIM``, ...).
        name: Record name.
        type: DNS record type (``MX``, ``TXT``, ...).
        ttl: Record time to live.
        status: Verification status of the record.
        value: Record value.
        priority: MX priority, if any.
    """

    record: str | None = None
    name: str | None = None
    type: str | None = None
    ttl: str | int | None = None
    status: str | None = None
    value: str | None = None
    priority: int | None = None


class Domain(ResponseModel):
    """A sending domain."""

    object: str | None = None
    id: str
    name: str | None = None
    status: str | None = None
    created_at: str | None = None
    region: str | None = None
    records: list[DomainRecord] | None = None

    def __repr__(self) -> str:
        return f"Domain(id='{self.id}', name='{self.name}', status='{self.status}')"


class DomainIdResponse(ResponseModel):
    """Response of verify/update calls."""

    object: str | None = None
    id: str


class ListDomainsResponse(ResponseModel):
    object: str | None = None
    data: list[Domain] = Field(default_factory=list)
