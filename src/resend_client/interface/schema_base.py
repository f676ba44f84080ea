# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Pydantic base models for request and response payloads."""

from pydantic import BaseModel, ConfigDict


class RequestModel(BaseModel):
    """Outgoing payload: unknown fields are rejected, aliases used on the wire."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class ResponseModel(BaseModel):
    """Incoming payload: fields the client does not know about are ignored."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)
