# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Tests for request construction, dispatch and outcome classification."""

import asyncio
from unittest.mock import AsyncMock

import pytest
from pydantic import BaseModel

from resend_client._version import USER_AGENT
from resend_client.config import ClientConfig
from resend_client.dispatcher import BlockingDispatcher, Dispatcher
from resend_client.errors import ConfigurationError, ErrorKind, RemoteError, ResendError, TransportError
from resend_client.rate_limit import NO_JITTER, RateLimiter


class Sent(BaseModel):
    id: str


class TestBuild:
    """build() is pure request construction."""

    def test_resolves_path_and_sets_headers(self, client_config):
        dispatcher = Dispatcher(client_config)
        request = dispatcher.build("post", "/emails")

        assert str(request.url) == "https://api.resend.com/emails"
        assert request.method == "POST"
        assert request.headers["Authorization"] == "Bearer re_test_123"
        assert request.headers["User-Agent"] == USER_AGENT
        assert request.json is None
        assert request.params == {}

    def test_builds_are_independent(self, client_config):
        dispatcher = Dispatcher(client_config)
        first = dispatcher.build("GET", "/domains")
        first.with_header("X-Extra", "1")
        second = dispatcher.build("GET", "/domains")

        assert "X-Extra" not in second.headers
        assert first.url == second.url

    def test_does_not_touch_transport_or_limiter(self, client_config, fake_transport):
        limiter = AsyncMock(spec=RateLimiter)
        dispatcher = Dispatcher(client_config, transport=fake_transport, limiter=limiter)
        dispatcher.build("GET", "/domains")

        assert fake_transport.requests == []
        limiter.acquire.assert_not_called()

    @pytest.mark.parametrize("base", ["https://proxy.example.com/resend", "https://proxy.example.com/resend/"])
    def test_keeps_base_path_prefix(self, base):
        dispatcher = Dispatcher(ClientConfig(api_key="re_1", base_url=base))
        for path in ("/emails", "emails"):
            assert str(dispatcher.build("GET", path).url) == "https://proxy.example.com/resend/emails"

    def test_non_http_target_is_fatal(self, client_config):
        dispatcher = Dispatcher(client_config)
        with pytest.raises(ConfigurationError):
            dispatcher.build("GET", "ftp://files.example.com/emails")

    def test_repr_masks_key(self, client_config):
        assert "re_test_123" not in repr(Dispatcher(client_config))


class TestSend:
    """send() throttles, executes once and classifies."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [200, 201, 204, 302])
    async def test_non_error_status_passes_through(self, client_config, fake_transport, response_factory, status):
        response = response_factory(status, {"id": "x"})
        fake_transport.queue(response)
        dispatcher = Dispatcher(client_config, transport=fake_transport)

        result = await dispatcher.send(dispatcher.build("GET", "/emails/x"))

        assert result is response
        assert len(fake_transport.requests) == 1

    @pytest.mark.asyncio
    async def test_validation_error_becomes_remote_error(self, client_config, fake_transport, response_factory):
        fake_transport.queue(response_factory(422, {
            "statusCode": 422,
            "name": "validation_error",
            "message": "Invalid `to` field.",
        }))
        dispatcher = Dispatcher(client_config, transport=fake_transport)

        with pytest.raises(RemoteError) as exc_info:
            await dispatcher.send(dispatcher.build("POST", "/emails"))

        error = exc_info.value
        assert error.kind == ErrorKind.VALIDATION_ERROR
        assert error.message == "Invalid `to` field."
        assert error.status == 422
        assert error.response.status_code == 422
        assert len(fake_transport.requests) == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [400, 401, 403, 404, 429, 500, 503, 599])
    async def test_every_error_status_is_classified(self, client_config, fake_transport, response_factory, status):
        fake_transport.queue(response_factory(status, {"name": "application_error", "message": "boom"}))
        dispatcher = Dispatcher(client_config, transport=fake_transport)

        with pytest.raises(RemoteError) as exc_info:
            await dispatcher.send(dispatcher.build("GET", "/domains"))
        assert exc_info.value.status == status

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [
        b"<html>Bad Gateway</html>",
        b'{"name": "application_error"}',
        b"",
    ])
    async def test_undecodable_error_body_is_transport_error(self, client_config, fake_transport, response_factory, body):
        fake_transport.queue(response_factory(502, body=body))
        dispatcher = Dispatcher(client_config, transport=fake_transport)

        with pytest.raises(TransportError) as exc_info:
            await dispatcher.send(dispatcher.build("GET", "/domains"))
        assert exc_info.value.status == 502
        assert not isinstance(exc_info.value, RemoteError)

    @pytest.mark.asyncio
    async def test_waits_on_limiter_before_transport(self, client_config, fake_transport):
        limiter = AsyncMock(spec=RateLimiter)
        dispatcher = Dispatcher(client_config, transport=fake_transport, limiter=limiter)

        await dispatcher.send(dispatcher.build("GET", "/domains"))

        limiter.acquire.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_concurrent_sends_respect_budget(self, fake_transport):
        config = ClientConfig(api_key="re_1", rate_limit=2, rate_period=0.25)
        dispatcher = Dispatcher(config, transport=fake_transport, jitter=NO_JITTER)

        await asyncio.gather(*(dispatcher.send(dispatcher.build("GET", "/domains")) for _ in range(5)))

        sent = sorted(fake_transport.sent_at)
        assert len(sent) == 5
        for i in range(len(sent) - 2):
            assert sent[i + 2] - sent[i] >= 0.25 - 0.01

    @pytest.mark.asyncio
    async def test_transport_failure_propagates(self, client_config):
        transport = AsyncMock()
        transport.send.side_effect = TransportError("connection refused")
        dispatcher = Dispatcher(client_config, transport=transport)

        with pytest.raises(ResendError):
            await dispatcher.send(dispatcher.build("GET", "/domains"))


class TestRequest:
    """request() chains build, send and decode."""

    @pytest.mark.asyncio
    async def test_decodes_model(self, client_config, fake_transport, response_factory):
        fake_transport.queue(response_factory(200, {"id": "49a3999c"}))
        dispatcher = Dispatcher(client_config, transport=fake_transport)

        result = await dispatcher.request("POST", "/emails", json={"subject": "hi"}, model=Sent)

        assert result == Sent(id="49a3999c")
        assert fake_transport.bodies == [{"subject": "hi"}]
        assert fake_transport.requests[0].headers["Content-Type"] == "application/json"

    @pytest.mark.asyncio
    async def test_passes_query_params(self, client_config, fake_transport):
        dispatcher = Dispatcher(client_config, transport=fake_transport)

        await dispatcher.request("GET", "/domains", params={"limit": 10, "after": None, "all": True})

        assert fake_transport.requests[0].params == {"limit": "10", "all": "true"}

    @pytest.mark.asyncio
    async def test_mismatched_body_is_transport_error(self, client_config, fake_transport, response_factory):
        fake_transport.queue(response_factory(200, {"unexpected": True}))
        dispatcher = Dispatcher(client_config, transport=fake_transport)

        with pytest.raises(TransportError):
            await dispatcher.request("GET", "/emails/x", model=Sent)

    @pytest.mark.asyncio
    async def test_without_model_discards_body(self, client_config, fake_transport, response_factory):
        fake_transport.queue(response_factory(200, {"deleted": True}))
        dispatcher = Dispatcher(client_config, transport=fake_transport)

        assert await dispatcher.request("DELETE", "/domains/d1") is None


class TestBlockingDispatcher:

    def test_has_no_limiter(self, client_config, fake_sync_transport):
        dispatcher = BlockingDispatcher(client_config, transport=fake_sync_transport)
        assert not hasattr(dispatcher, "limiter")

    def test_request_returns_value(self, client_config, fake_sync_transport, response_factory):
        fake_sync_transport.queue(response_factory(200, {"id": "abc"}))
        dispatcher = BlockingDispatcher(client_config, transport=fake_sync_transport)

        assert dispatcher.request("GET", "/emails/abc", model=Sent) == Sent(id="abc")

    def test_classifies_errors(self, client_config, fake_sync_transport, response_factory):
        fake_sync_transport.queue(response_factory(404, {"name": "not_found", "message": "Not found"}))
        dispatcher = BlockingDispatcher(client_config, transport=fake_sync_transport)

        with pytest.raises(RemoteError) as exc_info:
            dispatcher.request("GET", "/emails/missing", model=Sent)
        assert exc_info.value.kind == ErrorKind.NOT_FOUND


class TestTimeout:
    """The configured timeout lives on the transport only."""

    def test_async_transport_receives_timeout(self):
        dispatcher = Dispatcher(ClientConfig(api_key="re_1", timeout=5.0))

        assert dispatcher.transport._timeout.total == 5.0
        assert not hasattr(dispatcher, "timeout")

    def test_blocking_transport_receives_timeout(self):
        dispatcher = BlockingDispatcher(ClientConfig(api_key="re_1", timeout=7.0))

        assert dispatcher.transport._timeout == 7.0
        assert not hasattr(dispatcher, "timeout")
