# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Pydantic schemas for the email entity.

See https://resend.com/docs/api-reference/emails/send-email
"""

from __future__ import annotations

import base64
from collections.abc import Iterable
from typing import Annotated, Any

from pydantic import BeforeValidator, Field, field_serializer, model_serializer

from ...interface.schema_base import RequestModel, ResponseModel


def _as_list(value: Any) -> Any:
    """Accept a single address where a list of addresses is expected."""
    if isinstance(value, str):
        return [value]
    return value


AddressList = Annotated[list[str], BeforeValidator(_as_list)]


class Tag(RequestModel):
    """Name/value tag attached to an email.

    Both parts may only contain ASCII letters, digits, underscores and dashes,
    at most 256 characters.
    """

    name: Annotated[str, Field(min_length=1, description="Tag name")]
    value: Annotated[str, Field(description="Tag value")]


class AttachmentContent(RequestModel):
    """Inline attachment content, sent base64-encoded."""

    content: bytes

    @field_serializer("content")
    def serialize_content(self, value: bytes) -> str:
        return base64.b64encode(value).decode("ascii")


class AttachmentPath(RequestModel):
    """Attachment hosted at a URL the API fetches."""

    path: Annotated[str, Field(min_length=1)]


ContentOrPath = AttachmentContent | AttachmentPath


class Attachment(RequestModel):
    """Email attachment: either inline content or a remote path.

    On the wire the variant is flattened into the attachment object, i.e.
    ``{"content": "<base64>", "filename": ...}`` or ``{"path": "https://..."}``.

    Attributes:
        content_or_path: Inline bytes or remote path.
        filename: Name of the attached file.
        content_type: MIME type; derived from the filename when unset.
    """

    content_or_path: ContentOrPath
    filename: Annotated[str | None, Field(default=None)]
    content_type: Annotated[str | None, Field(default=None, alias="contentType")]

    @classmethod
    def from_content(cls, content: bytes) -> Attachment:
        return cls(content_or_path=AttachmentContent(content=content))

    @classmethod
    def from_path(cls, path: str) -> Attachment:
        return cls(content_or_path=AttachmentPath(path=path))

    def with_filename(self, filename: str) -> Attachment:
        self.filename = filename
        return self

    def with_content_type(self, content_type: str) -> Attachment:
        self.content_type = content_type
        return self

    @model_serializer(mode="wrap")
    def flatten_variant(self, handler: Any) -> dict[str, Any]:
        data = handler(self)
        variant = data.pop("content_or_path")
        return {**variant, **data}


class CreateEmailBaseOptions(RequestModel):
    """Everything needed to send one email.

    Attributes:
        from_addr: Sender, ``Your Name <sender@domain.com>`` allowed (``from``).
        to: Recipients, max 50.
        subject: Subject line.
        html: HTML body.
        text: Plain text body.
        bcc: Blind carbon copy recipients.
        cc: Carbon copy recipients.
        reply_to: Reply-To addresses.
        headers: Custom email headers.
        attachments: Attachments, max 40MB per email.
        tags: Email tags.
        scheduled_at: Natural language or ISO 8601 send time.
    """

    from_addr: Annotated[str, Field(alias="from", min_length=1, description="Sender email address")]
    to: Annotated[AddressList, Field(min_length=1, description="Recipient addresses")]
    subject: Annotated[str, Field(description="Email subject")]

    html: Annotated[str | None, Field(default=None)]
    text: Annotated[str | None, Field(default=None)]

    bcc: Annotated[AddressList | None, Field(default=None)]
    cc: Annotated[AddressList | None, Field(default=None)]
    reply_to: Annotated[AddressList | None, Field(default=None)]

    headers: Annotated[dict[str, str] | None, Field(default=None)]
    attachments: Annotated[list[Attachment] | None, Field(default=None)]
    tags: Annotated[list[Tag] | None, Field(default=None)]
    scheduled_at: Annotated[str | None, Field(default=None)]

    @classmethod
    def new(cls, from_addr: str, to: str | Iterable[str], subject: str) -> CreateEmailBaseOptions:
        """Create options with the three required fields."""
        recipients = [to] if isinstance(to, str) else list(to)
        return cls(from_addr=from_addr, to=recipients, subject=subject)

    def with_html(self, html: str) -> CreateEmailBaseOptions:
        """Set or overwrite the HTML body."""
        self.html = html
        return self

    def with_text(self, text: str) -> CreateEmailBaseOptions:
        """Set or overwrite the plain text body."""
        self.text = text
        return self

    def with_bcc(self, address: str) -> CreateEmailBaseOptions:
        self.bcc = [*(self.bcc or []), address]
        return self

    def with_cc(self, address: str) -> CreateEmailBaseOptions:
        self.cc = [*(self.cc or []), address]
        return self

    def with_reply(self, address: str) -> CreateEmailBaseOptions:
        self.reply_to = [*(self.reply_to or []), address]
        return self

    def with_header(self, name: str, value: str) -> CreateEmailBaseOptions:
        """Add or overwrite a custom email header."""
        self.headers = {**(self.headers or {}), name: value}
        return self

    def with_attachment(self, attachment: Attachment | bytes) -> CreateEmailBaseOptions:
        """Append an attachment; raw bytes become inline content."""
        if isinstance(attachment, (bytes, bytearray)):
            attachment = Attachment.from_content(bytes(attachment))
        self.attachments = [*(self.attachments or []), attachment]
        return self

    def with_tag(self, tag: Tag) -> CreateEmailBaseOptions:
        self.tags = [*(self.tags or []), tag]
        return self

    def with_scheduled_at(self, scheduled_at: str) -> CreateEmailBaseOptions:
        self.scheduled_at = scheduled_at
        return self


class CreateEmailResponse(ResponseModel):
    """Identifier of a sent email."""

    id: str


class SendEmailBatchResponse(ResponseModel):
    """Identifiers of a batch of sent emails, in request order."""

    data: list[CreateEmailResponse]


class Email(ResponseModel):
    """A sent email as returned by the API.

    Attributes:
        id: Email identifier.
        from_addr: Sender address (``from``).
        to: Recipient addresses.
        subject: Subject line.
        created_at: ISO 8601 creation timestamp.
        html: HTML body.
        text: Plain text body.
        bcc: Blind carbon copy recipients.
        cc: Carbon copy recipients.
        reply_to: Reply-To addresses.
        last_event: Latest delivery status, e.g. ``delivered``.
    """

    object: str | None = None
    id: str
    from_addr: Annotated[str, Field(alias="from")]
    to: AddressList
    subject: str
    created_at: str | None = None
    html: str | None = None
    text: str | None = None
    bcc: AddressList | None = None
    cc: AddressList | None = None
    reply_to: AddressList | None = None
    last_event: str | None = None

    def __repr__(self) -> str:
        return f"Email(id='{self.id}', subject='{self.subject[:30]}', last_event='{self.last_event}')"
