# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Emails facade: ``/emails`` endpoints."""

from __future__ import annotations

from collections.abc import Iterable

from ...interface.endpoint_base import ResourceAPI, path_segment
from .schema import CreateEmailBaseOptions, CreateEmailResponse, Email, SendEmailBatchResponse


class EmailsAPI(ResourceAPI):
    """Send and retrieve emails.

    Access via ``client.emails``.
    """

    name = "emails"

    def send(self, email: CreateEmailBaseOptions):
        """Send one email.

        https://resend.com/docs/api-reference/emails/send-email

        Returns:
            CreateEmailResponse with the new email id.
        """
        return self._request("POST", "/emails", json=email, model=CreateEmailResponse)

    def send_batch(self, emails: Iterable[CreateEmailBaseOptions]):
        """Send up to 100 emails in one request.

        https://resend.com/docs/api-reference/emails/send-batch-emails

        Returns:
            SendEmailBatchResponse with one id per email, in order.
        """
        return self._request("POST", "/emails/batch", json=list(emails), model=SendEmailBatchResponse)

    def get(self, email_id: str):
        """Retrieve a single email.

        https://resend.com/docs/api-reference/emails/retrieve-email
        """
        return self._request("GET", f"/emails/{path_segment(email_id)}", model=Email)
