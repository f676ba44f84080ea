# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Python client for the Resend transactional email API.

Features:
    - Non-blocking ``Client`` (aiohttp) and sequential ``BlockingClient`` (requests)
    - One shared dispatcher per client: authentication, routing, rate limiting
    - Sliding-window rate limiter (9 requests per 1.1s by default) with jitter
    - Typed pydantic models for emails, contacts, audiences, domains and API keys
    - Distinct ``RemoteError`` / ``TransportError`` outcomes for failed calls

Example::

    from resend_client import Client, CreateEmailBaseOptions, Tag

    resend = Client("re_123")
    email = (
        CreateEmailBaseOptions.new("Acme <onboarding@resend.dev>", "delivered@resend.dev", "Hello")
        .with_text("Hello World!")
        .with_tag(Tag(name="category", value="welcome"))
    )
    sent = await resend.emails.send(email)
"""

from ._version import USER_AGENT, __version__
from .client import BlockingClient, Client
from .config import ClientConfig, load_client_config
from .dispatcher import BlockingDispatcher, Dispatcher
from .entities.api_keys import ApiKey, CreateApiKeyRequest, CreateApiKeyResponse, ListApiKeysResponse, Permission
from .entities.audiences import Audience, CreateAudienceResponse, ListAudiencesResponse
from .entities.contacts import (
    Contact,
    ContactIdResponse,
    CreateContactRequest,
    ListContactsResponse,
    UpdateContactRequest,
)
from .entities.domains import (
    CreateDomainRequest,
    Domain,
    DomainIdResponse,
    DomainRecord,
    ListDomainsResponse,
    Region,
    UpdateDomainRequest,
)
from .entities.emails import (
    Attachment,
    AttachmentContent,
    AttachmentPath,
    CreateEmailBaseOptions,
    CreateEmailResponse,
    Email,
    SendEmailBatchResponse,
    Tag,
)
from .errors import ConfigurationError, ErrorKind, ErrorResponse, RemoteError, ResendError, TransportError
from .rate_limit import Jitter, RateLimiter
from .transport import ApiRequest, ApiResponse

__all__ = [
    "USER_AGENT",
    "ApiKey",
    "ApiRequest",
    "ApiResponse",
    "Attachment",
    "AttachmentContent",
    "AttachmentPath",
    "Audience",
    "BlockingClient",
    "BlockingDispatcher",
    "Client",
    "ClientConfig",
    "ConfigurationError",
    "Contact",
    "ContactIdResponse",
    "CreateApiKeyRequest",
    "CreateApiKeyResponse",
    "CreateAudienceResponse",
    "CreateContactRequest",
    "CreateDomainRequest",
    "CreateEmailBaseOptions",
    "CreateEmailResponse",
    "Dispatcher",
    "Domain",
    "DomainIdResponse",
    "DomainRecord",
    "Email",
    "ErrorKind",
    "ErrorResponse",
    "Jitter",
    "ListApiKeysResponse",
    "ListAudiencesResponse",
    "ListContactsResponse",
    "ListDomainsResponse",
    "Permission",
    "RateLimiter",
    "Region",
    "RemoteError",
    "ResendError",
    "SendEmailBatchResponse",
    "Tag",
    "TransportError",
    "UpdateDomainRequest",
    "UpdateContactRequest",
    "__version__",
    "load_client_config",
]
