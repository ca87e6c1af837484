"""Smart product scanner: barcode / QR lookup."""
from __future__ import annotations

from wellness.domain.AsyncResult import AsyncResult
from wellness.domain.Product import ProductScan
from wellness.domain.ResponseModel import decode
from wellness.logic.modules.base import FeatureModule
from wellness.logic.reporting.views import ProductView, render_product
from wellness.logic.shaping.request_shaper import FieldSpec, FieldType, RequestPayload, shape
from wellness.utilities.constants import PRODUCT_SCAN

SCHEMA = {"code": FieldSpec(FieldType.STRING)}


class ProductScanner(FeatureModule):
    name = "product"
    title = "Smart Product Scanner"
    defaults = {"code": ""}

    async def _scan(self, payload: RequestPayload) -> ProductScan:
        return decode(ProductScan, await self.client.post_json(PRODUCT_SCAN, payload))

    async def scan(self) -> AsyncResult[ProductScan]:
        return await self.controller("scan").invoke(lambda: shape(self.form.snapshot(), SCHEMA), self._scan)

    def view(self) -> ProductView:
        return render_product(self.controller("scan").state)
