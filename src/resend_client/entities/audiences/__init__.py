# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Audience entity: facade and schemas."""

from .endpoint import AudiencesAPI
from .schema import Audience, CreateAudienceRequest, CreateAudienceResponse, ListAudiencesResponse

__all__ = [
    "Audience",
    "AudiencesAPI",
    "CreateAudienceRequest",
    "CreateAudienceResponse",
    "ListAudiencesResponse",
]
