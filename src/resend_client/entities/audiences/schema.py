# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Pydantic schemas for the audience entity."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

from ...interface.schema_base import RequestModel, ResponseModel


class CreateAudienceRequest(RequestModel):
    """Payload for creating an audience."""

    name: Annotated[str, Field(min_length=1, description="Audience name")]


class CreateAudienceResponse(ResponseModel):
    object: str | None = None
    id: str
    name: str | None = None


class Audience(ResponseModel):
    """A list of contacts emails can be sent to."""

    object: str | None = None
    id: str
    name: str | None = None
    created_at: str | None = None

    def __repr__(self) -> str:
        return f"Audience(id='{self.id}', name='{self.name}')"


class ListAudiencesResponse(ResponseModel):
    object: str | None = None
    data: list[Audience] = Field(default_factory=list)
