"""Smart pantry: add items, scan receipts, upload pantry photos."""
from __future__ import annotations
from typing import Optional

from wellness.domain.AsyncResult import AsyncResult, Status
from wellness.domain.Pantry import Detection
from wellness.events.Event_Bus import EventBus
from wellness.infra.Service_Client import ServiceClient
from wellness.logic.modules.base import FeatureModule
from wellness.logic.pantry.synchronizer import Image, PantrySynchronizer
from wellness.logic.reporting.views import PantryView, render_pantry


class SmartPantry(FeatureModule):
    name = "pantry"
    title = "Smart Pantry"
    defaults = {"name": ""}

    def __init__(self, client: ServiceClient, bus: EventBus):
        super().__init__(client, bus)
        self.sync = PantrySynchronizer(client, bus, module=self.name)

    async def add(self) -> Optional[AsyncResult[None]]:
        result = await self.sync.add_item(self.form.get("name"))
        if result is not None and result.status is Status.SUCCEEDED:
            self.form.reset("name")
        return result

    async def scan_receipt(self, image: Image = None) -> AsyncResult[Detection]:
        return await self.sync.scan_receipt(image)

    async def upload_photo(self, image: Image = None) -> AsyncResult[Detection]:
        return await self.sync.upload_photo(image)

    async def refresh(self) -> bool:
        return await self.sync.refresh()

    def actions(self):
        controllers = (self.sync.add_controller, self.sync.receipt_controller, self.sync.photo_controller)
        return {c.action: c.state.to_dict() for c in controllers}

    def view(self) -> PantryView:
        return render_pantry(self.sync.snapshot, busy=self.sync.busy)
