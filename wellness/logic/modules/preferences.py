"""Meal plan settings: allergy / dislike / diet preferences and plan regeneration.

Saving preferences has no readable local effect. The service applies them to
future plan generations; this module only reports whether the write landed.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence

from wellness.domain.AsyncResult import AsyncResult, Status
from wellness.domain.Plan import Plan
from wellness.domain.ResponseModel import decode
from wellness.logic.modules.base import FeatureModule, as_options
from wellness.logic.reporting.views import StatusView, failure_text
from wellness.logic.shaping.request_shaper import FieldSpec, FieldType, RequestPayload, shape
from wellness.utilities.constants import (
    DIET_TYPES, NUTRITION_GENERATE, PLAN_REGENERATED, PREFERENCES_SAVED,
    PREFERENCES_UPDATE, REGENERATE_PAYLOAD
)

SCHEMA = {
    "allergies": FieldSpec(FieldType.CSV),
    "dislikes": FieldSpec(FieldType.CSV),
    "diet_type": FieldSpec(FieldType.ENUM),
}


@dataclass(frozen=True)
class PreferencesView(StatusView):
    regenerating: bool = False


class MealPlanSettings(FeatureModule):
    name = "preferences"
    title = "Meal Plan Settings"
    defaults = {"allergies": "", "dislikes": "", "diet_type": "omnivore"}

    async def propagate(self, allergies: Sequence[str], dislikes: Sequence[str], diet_type: str) -> AsyncResult[None]:
        """Fire-and-forget write of the preferences; acknowledged with a notice."""
        payload = RequestPayload({"allergies": list(allergies), "dislikes": list(dislikes), "diet_type": diet_type})
        return await self._push(lambda: payload)

    async def save(self) -> AsyncResult[None]:
        return await self._push(lambda: shape(self.form.snapshot(), SCHEMA))

    async def _push(self, action) -> AsyncResult[None]:
        result = await self.controller("save").invoke(
            action, lambda payload: self.client.post_ack(PREFERENCES_UPDATE, payload)
        )
        if result.status is Status.SUCCEEDED:
            self.notify(PREFERENCES_SAVED)
        else:
            self.notify_failure("Could not save preferences", result)
        return result

    async def regenerate(self) -> AsyncResult[Plan]:
        """Ask the service for a fresh maintenance plan; only the acknowledgment is shown."""
        result = await self.controller("regenerate").invoke(
            lambda: RequestPayload(REGENERATE_PAYLOAD),
            self._regenerate,
        )
        if result.status is Status.SUCCEEDED:
            self.notify(PLAN_REGENERATED)
        else:
            self.notify_failure("Could not regenerate plan", result)
        return result

    async def _regenerate(self, payload: RequestPayload) -> Plan:
        return decode(Plan, await self.client.post_json(NUTRITION_GENERATE, payload))

    @property
    def regenerating(self) -> bool:
        return self.controller("regenerate").state.is_loading

    def choices(self):
        return {"diet_type": as_options(DIET_TYPES)}

    def view(self) -> PreferencesView:
        state = self.controller("save").state
        if state.is_loading:
            status = "loading"
        else:
            status = "error" if state.status is Status.FAILED else "idle"
        return PreferencesView(status=status, error=failure_text(state), regenerating=self.regenerating)
