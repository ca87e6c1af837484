"""Pantry synchronizer: three write paths, one shared read model.

Writes (manual add, receipt scan, photo upload) never touch the local
snapshot. Each write is followed by an unconditional refresh(), and refresh()
is the only place the snapshot changes. A refresh fetches the item list and
the suggestions concurrently and commits them together, or keeps the previous
snapshot and flags the error.
"""
from __future__ import annotations
import asyncio
import base64
import logging
from typing import Any, Optional, Union

from wellness.domain.AsyncResult import AsyncResult, Status
from wellness.domain.Pantry import Detection, PantryItem, PantrySnapshot
from wellness.domain.ResponseModel import decode, decode_list, decode_strings
from wellness.events.Event_Bus import EventBus
from wellness.events.event_helpers import (
    publish_notice, publish_pantry_refreshed, publish_pantry_refresh_failed
)
from wellness.infra.Service_Client import ServiceClient
from wellness.logic.controller import ModuleController
from wellness.logic.shaping.request_shaper import RequestPayload
from wellness.utilities.constants import (
    PANTRY_ADD, PANTRY_LIST, PANTRY_PHOTO, PANTRY_SCAN_RECEIPT, PANTRY_SUGGEST
)
from wellness.utilities.errors import RemoteCallError

logger = logging.getLogger(__name__)

Image = Union[bytes, str, None]


def encode_image(image: Image) -> str:
    """bytes -> base64 text; text is assumed already encoded; None -> ''."""
    if image is None:
        return ""
    if isinstance(image, (bytes, bytearray)):
        return base64.b64encode(bytes(image)).decode("ascii")
    return image


class PantrySynchronizer:
    def __init__(self, client: ServiceClient, bus: EventBus, module: str = "pantry"):
        self.client = client
        self.bus = bus
        self.module = module
        self.snapshot = PantrySnapshot()
        self.add_controller: ModuleController[None] = ModuleController(module, "add", bus)
        self.receipt_controller: ModuleController[Detection] = ModuleController(module, "scan_receipt", bus)
        self.photo_controller: ModuleController[Detection] = ModuleController(module, "upload_photo", bus)
        self._refreshing = 0
        # start order of refreshes, and the newest one that has settled into the snapshot
        self._started = 0
        self._committed = 0

    @property
    def busy(self) -> bool:
        controllers = (self.add_controller, self.receipt_controller, self.photo_controller)
        return self._refreshing > 0 or any(c.in_flight for c in controllers)

    # --- Read path ---------------------------------------------------------
    async def refresh(self) -> bool:
        """Fetch list and suggestions together; commit both or neither.

        Refreshes are ordered by start: one that settles after a later-started
        refresh has already committed is discarded. Returns True only on commit.
        """
        self._started += 1
        seq = self._started
        self._refreshing += 1
        try:
            results = await asyncio.gather(
                self.client.get_json(PANTRY_LIST),
                self.client.get_json(PANTRY_SUGGEST),
                return_exceptions=True,
            )
            try:
                for r in results:
                    if isinstance(r, BaseException):
                        raise r
                items = decode_list(PantryItem, results[0])
                suggestions = decode_strings(results[1])
            except RemoteCallError as e:
                return self._keep_stale(seq, e)
            except Exception as e:
                logger.exception("Pantry refresh failed unexpectedly")
                return self._keep_stale(seq, RemoteCallError(str(e) or e.__class__.__name__))
        finally:
            self._refreshing -= 1
        if self._superseded(seq):
            return False
        self._committed = seq
        self.snapshot = PantrySnapshot.fresh(items, suggestions)
        logger.debug("Pantry refreshed: %d items, %d suggestions", len(items), len(suggestions))
        publish_pantry_refreshed(self.bus, len(items), len(suggestions))
        return True

    def _superseded(self, seq: int) -> bool:
        if seq < self._committed:
            logger.debug("Discarding pantry refresh #%d, #%d already committed", seq, self._committed)
            return True
        return False

    def _keep_stale(self, seq: int, error: RemoteCallError) -> bool:
        if self._superseded(seq):
            return False
        logger.warning("Pantry refresh failed [%s]: %s", error.label, error)
        self._committed = seq
        self.snapshot = self.snapshot.with_error(error)
        publish_pantry_refresh_failed(self.bus, error)
        return False

    # --- Write paths -------------------------------------------------------
    async def add_item(self, name: str) -> Optional[AsyncResult[None]]:
        """Add one item by name, then refresh. Blank names are ignored (no request)."""
        if not name or not name.strip():
            return None
        result = await self.add_controller.invoke(
            lambda: RequestPayload({"name": name}),
            lambda payload: self.client.post_ack(PANTRY_ADD, payload),
        )
        if result.status is Status.FAILED:
            self._notify_failure("Could not add item", result)
        await self.refresh()
        return result

    async def scan_receipt(self, image: Image) -> AsyncResult[Detection]:
        return await self._detect(self.receipt_controller, PANTRY_SCAN_RECEIPT, image)

    async def upload_photo(self, image: Image) -> AsyncResult[Detection]:
        return await self._detect(self.photo_controller, PANTRY_PHOTO, image)

    async def _detect(self, controller: ModuleController[Detection], path: str, image: Image) -> AsyncResult[Detection]:
        async def call(payload: RequestPayload) -> Detection:
            return decode(Detection, await self.client.post_json(path, payload))

        result = await controller.invoke(lambda: RequestPayload({"image_base64": encode_image(image)}), call)
        if result.status is Status.SUCCEEDED and result.data is not None:
            publish_notice(self.bus, self.module, result.data.message())
        else:
            self._notify_failure("Could not read image", result)
        await self.refresh()
        return result

    def _notify_failure(self, text: str, result: AsyncResult[Any]):
        label = result.reason.label if result.reason is not None else "error"
        publish_notice(self.bus, self.module, f"{text} ({label})", level="error")


__all__ = ["PantrySynchronizer", "encode_image"]
