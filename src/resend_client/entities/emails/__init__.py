# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Email entity: facade and schemas."""

from .endpoint import EmailsAPI
from .schema import (
    Attachment,
    AttachmentContent,
    AttachmentPath,
    ContentOrPath,
    CreateEmailBaseOptions,
    CreateEmailResponse,
    Email,
    SendEmailBatchResponse,
    Tag,
)

__all__ = [
    "Attachment",
    "AttachmentContent",
    "AttachmentPath",
    "ContentOrPath",
    "CreateEmailBaseOptions",
    "CreateEmailResponse",
    "Email",
    "EmailsAPI",
    "SendEmailBatchResponse",
    "Tag",
]
