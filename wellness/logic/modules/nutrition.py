"""Nutrition & fitness generator: personal plan plus the saved grocery list."""
from __future__ import annotations
from typing import Any

from wellness.domain.AsyncResult import AsyncResult, Status
from wellness.domain.Plan import Plan
from wellness.domain.ResponseModel import decode
from wellness.logic.modules.base import FeatureModule, as_options
from wellness.logic.reporting.views import PlanView, render_groceries, render_plan
from wellness.logic.shaping.request_shaper import FieldSpec, FieldType, RequestPayload, shape
from wellness.utilities.constants import (
    DIET_TYPES, GENDERS, GOALS, NUTRITION_GENERATE, NUTRITION_GROCERIES, WORKOUT_PREFERENCES
)

SCHEMA = {
    "age": FieldSpec(FieldType.NUMBER, optional=True),
    "weight": FieldSpec(FieldType.NUMBER, optional=True),
    "height": FieldSpec(FieldType.NUMBER, optional=True),
    "gender": FieldSpec(FieldType.ENUM),
    "goal": FieldSpec(FieldType.ENUM),
    "workout_preference": FieldSpec(FieldType.ENUM),
    "diet_type": FieldSpec(FieldType.ENUM),
    "allergies": FieldSpec(FieldType.CSV),
    "dislikes": FieldSpec(FieldType.CSV),
}


class NutritionGenerator(FeatureModule):
    name = "nutrition"
    title = "Nutrition & Fitness Generator"
    defaults = {
        "age": "",
        "weight": "",
        "height": "",
        "gender": "female",
        "goal": "lose weight",
        "workout_preference": "Home",
        "diet_type": "omnivore",
        "allergies": "",
        "dislikes": "",
    }

    def payload(self) -> RequestPayload:
        return shape(self.form.snapshot(), SCHEMA)

    async def _generate(self, payload: RequestPayload) -> Plan:
        return decode(Plan, await self.client.post_json(NUTRITION_GENERATE, payload))

    async def generate(self) -> AsyncResult[Plan]:
        return await self.controller("generate").invoke(self.payload, self._generate)

    async def view_groceries(self) -> AsyncResult[Any]:
        """Fetch the saved grocery list and show it as a notice."""
        result = await self.controller("groceries").invoke(
            lambda: None,
            lambda _: self.client.get_json(NUTRITION_GROCERIES, allow_empty=True),
        )
        if result.status is Status.SUCCEEDED:
            self.notify(render_groceries(result.data))
        else:
            self.notify_failure("Could not load groceries", result)
        return result

    def choices(self):
        return {
            "gender": as_options(GENDERS),
            "goal": as_options(GOALS),
            "workout_preference": as_options(WORKOUT_PREFERENCES),
            "diet_type": as_options(DIET_TYPES),
        }

    def view(self) -> PlanView:
        return render_plan(self.controller("generate").state)
