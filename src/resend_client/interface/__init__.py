# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Base classes shared by resource facades and their schemas."""

from .endpoint_base import ResourceAPI, dump_body, path_segment
from .schema_base import RequestModel, ResponseModel

__all__ = [
    "RequestModel",
    "ResourceAPI",
    "ResponseModel",
    "dump_body",
    "path_segment",
]
