"""Custom meal planner: ingredients and nutrition for a dish."""
from __future__ import annotations

from wellness.domain.AsyncResult import AsyncResult
from wellness.domain.CustomMeal import CustomMeal
from wellness.domain.ResponseModel import decode
from wellness.logic.modules.base import FeatureModule, as_options
from wellness.logic.reporting.views import CustomMealView, render_custom_meal
from wellness.logic.shaping.request_shaper import FieldSpec, FieldType, RequestPayload, shape
from wellness.utilities.constants import CUSTOM_MEAL, DIET_TYPES

SCHEMA = {
    "dish": FieldSpec(FieldType.STRING),
    "portions": FieldSpec(FieldType.INTEGER),
    "diet_type": FieldSpec(FieldType.ENUM),
}


class CustomMealBuilder(FeatureModule):
    name = "custom_meal"
    title = "Custom Meal Planner"
    defaults = {"dish": "", "portions": 1, "diet_type": "omnivore"}

    async def _build(self, payload: RequestPayload) -> CustomMeal:
        return decode(CustomMeal, await self.client.post_json(CUSTOM_MEAL, payload))

    async def build(self) -> AsyncResult[CustomMeal]:
        return await self.controller("build").invoke(lambda: shape(self.form.snapshot(), SCHEMA), self._build)

    def choices(self):
        return {"diet_type": as_options(DIET_TYPES)}

    def view(self) -> CustomMealView:
        return render_custom_meal(self.controller("build").state)
