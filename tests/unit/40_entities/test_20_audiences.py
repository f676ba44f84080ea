# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
import pytest

from resend_client.entities.audiences import Audience, CreateAudienceResponse, ListAudiencesResponse


@pytest.mark.asyncio
async def test_create(client, fake_transport, response_factory):
    fake_transport.queue(response_factory(201, {"object": "audience", "id": "a1", "name": "Registered Users"}))

    result = await client.audiences.create("Registered Users")

    assert result == CreateAudienceResponse(object="audience", id="a1", name="Registered Users")
    assert fake_transport.bodies[0] == {"name": "Registered Users"}


@pytest.mark.asyncio
async def test_get_and_delete(client, fake_transport, response_factory):
    fake_transport.queue(response_factory(200, {"id": "a1", "name": "Registered Users", "created_at": "2023-10-06"}))

    audience = await client.audiences.get("a1")
    deleted = await client.audiences.delete("a1")

    assert isinstance(audience, Audience)
    assert deleted is None
    assert [(r.method, r.url.path) for r in fake_transport.requests] == [
        ("GET", "/audiences/a1"),
        ("DELETE", "/audiences/a1"),
    ]


@pytest.mark.asyncio
async def test_list(client, fake_transport, response_factory):
    fake_transport.queue(response_factory(200, {"object": "list", "data": [{"id": "a1"}, {"id": "a2"}]}))

    result = await client.audiences.list()

    assert isinstance(result, ListAudiencesResponse)
    assert len(result.data) == 2
