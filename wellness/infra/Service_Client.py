"""Async HTTP client for the remote wellness service.

Wraps a single ``httpx.AsyncClient`` and maps every failure onto the
RemoteCallError taxonomy. Calls are never retried and never time out.
"""
from __future__ import annotations
import logging
from typing import Any, Mapping, Optional

import httpx

from wellness.logic.shaping.request_shaper import RequestPayload
from wellness.utilities.config import BACKEND_URL
from wellness.utilities.errors import DecodeFailure, ServiceError, TransportFailure

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


def _body(payload: Mapping[str, Any] | None) -> Any:
    if payload is None:
        return {}
    if isinstance(payload, RequestPayload):
        return payload.as_json()
    return dict(payload)


class ServiceClient:
    def __init__(self, base_url: str = BACKEND_URL, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers=JSON_HEADERS,
            timeout=None,
            transport=transport,
        )

    async def aclose(self):
        await self._client.aclose()

    async def __aenter__(self) -> "ServiceClient":
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()

    async def _send(self, method: str, path: str, payload: Mapping[str, Any] | None = None) -> httpx.Response:
        logger.debug("%s %s", method, path)
        try:
            if method == "GET":
                response = await self._client.get(path)
            else:
                response = await self._client.request(method, path, json=_body(payload))
        except httpx.DecodingError as e:
            raise DecodeFailure(f"Could not decode response from {path}: {e}") from e
        except httpx.RequestError as e:
            raise TransportFailure(f"{method} {path} failed: {e.__class__.__name__}") from e
        if not response.is_success:
            raise ServiceError(f"{method} {path} returned {response.status_code}", status=response.status_code)
        return response

    @staticmethod
    def _json(response: httpx.Response, allow_empty: bool = False) -> Any:
        if allow_empty and not response.content.strip():
            return None
        try:
            return response.json()
        except ValueError as e:
            raise DecodeFailure(f"Response from {response.request.url.path} is not valid JSON") from e

    async def get_json(self, path: str, allow_empty: bool = False) -> Any:
        response = await self._send("GET", path)
        return self._json(response, allow_empty=allow_empty)

    async def post_json(self, path: str, payload: Mapping[str, Any] | None = None) -> Any:
        response = await self._send("POST", path, payload)
        return self._json(response)

    async def post_ack(self, path: str, payload: Mapping[str, Any] | None = None) -> None:
        """POST where only the status matters; the body is not decoded."""
        await self._send("POST", path, payload)


__all__ = ["ServiceClient"]
