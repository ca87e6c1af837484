import json

import httpx
import pytest

from wellness.infra.Service_Client import ServiceClient
from wellness.logic.shaping.request_shaper import RequestPayload
from wellness.utilities.errors import DecodeFailure, ServiceError, TransportFailure


def client_for(handler) -> ServiceClient:
    return ServiceClient("http://service.test", transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_post_json_sends_payload_as_json():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["body"] = json.loads(request.content)
        seen["content_type"] = request.headers["content-type"]
        return httpx.Response(200, json={"ok": True})

    async with client_for(handler) as client:
        data = await client.post_json("/api/custom-meal", RequestPayload({"dish": "pasta", "tags": ["a"]}))
    assert data == {"ok": True}
    assert seen["body"] == {"dish": "pasta", "tags": ["a"]}
    assert seen["content_type"] == "application/json"


@pytest.mark.asyncio
async def test_non_2xx_is_service_error():
    async with client_for(lambda request: httpx.Response(503, json={"detail": "down"})) as client:
        with pytest.raises(ServiceError) as info:
            await client.post_json("/api/nutrition/generate", {})
    assert info.value.status == 503
    assert info.value.label == "service 503"


@pytest.mark.asyncio
async def test_ack_ignores_body_but_not_status():
    async with client_for(lambda request: httpx.Response(200, content=b"not json")) as client:
        assert await client.post_ack("/api/preferences/update", {}) is None
    async with client_for(lambda request: httpx.Response(400)) as client:
        with pytest.raises(ServiceError):
            await client.post_ack("/api/preferences/update", {})


@pytest.mark.asyncio
async def test_unreachable_service_is_transport_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with client_for(handler) as client:
        with pytest.raises(TransportFailure) as info:
            await client.get_json("/api/pantry/list")
    assert info.value.status is None
    assert info.value.kind == "transport"


@pytest.mark.asyncio
async def test_invalid_json_is_decode_failure():
    async with client_for(lambda request: httpx.Response(200, content=b"<html>")) as client:
        with pytest.raises(DecodeFailure):
            await client.get_json("/api/pantry/suggest")


@pytest.mark.asyncio
async def test_empty_body_allowed_only_when_asked():
    async with client_for(lambda request: httpx.Response(200, content=b"")) as client:
        assert await client.get_json("/api/nutrition/groceries", allow_empty=True) is None
        with pytest.raises(DecodeFailure):
            await client.get_json("/api/nutrition/groceries")
