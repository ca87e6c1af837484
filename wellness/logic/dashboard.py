"""Dashboard session: the six feature modules sharing one service client.

Modules are independent; the only things they share are the HTTP client and
the event bus. Each bus event bumps the revision counter of the module that
raised it, so a client polling one module redraws only that module.
"""
from __future__ import annotations
import logging
from collections import Counter
from typing import Any, Dict, Optional

from wellness.events.Event_Bus import (
    EventBus, FORM_CHANGED, NOTICE, PANTRY_REFRESHED, PANTRY_REFRESH_FAILED, STATE_CHANGED
)
from wellness.events.web_observers import NoticeBoard
from wellness.infra.Service_Client import ServiceClient
from wellness.logic.modules.base import FeatureModule
from wellness.logic.modules.custom_meal import CustomMealBuilder
from wellness.logic.modules.nutrition import NutritionGenerator
from wellness.logic.modules.pantry import SmartPantry
from wellness.logic.modules.preferences import MealPlanSettings
from wellness.logic.modules.product import ProductScanner
from wellness.logic.modules.restaurants import RestaurantFinder
from wellness.utilities.config import MAX_NOTICES

logger = logging.getLogger(__name__)

MODULE_TYPES = (
    RestaurantFinder,
    NutritionGenerator,
    CustomMealBuilder,
    MealPlanSettings,
    SmartPantry,
    ProductScanner,
)


class Dashboard:
    def __init__(self, client: Optional[ServiceClient] = None, bus: Optional[EventBus] = None,
                 max_notices: int = MAX_NOTICES):
        self.client = client or ServiceClient()
        self.bus = bus or EventBus()
        self.notices = NoticeBoard(max_notices).attach(self.bus)
        self.modules: Dict[str, FeatureModule] = {m.name: m(self.client, self.bus) for m in MODULE_TYPES}
        self.revisions: Counter = Counter()
        for event_name in (FORM_CHANGED, STATE_CHANGED, NOTICE):
            self.bus.subscribe(event_name, self._bump)
        for event_name in (PANTRY_REFRESHED, PANTRY_REFRESH_FAILED):
            self.bus.subscribe(event_name, self._bump_pantry)

    def _bump(self, event_name: str, payload: Any):
        module = payload.get("module") if isinstance(payload, dict) else None
        if module:
            self.revisions[module] += 1

    def _bump_pantry(self, event_name: str, payload: Any):
        self.revisions[self.pantry.name] += 1

    # --- Typed accessors ---------------------------------------------------
    @property
    def restaurants(self) -> RestaurantFinder:
        return self.modules[RestaurantFinder.name]  # type: ignore[return-value]

    @property
    def nutrition(self) -> NutritionGenerator:
        return self.modules[NutritionGenerator.name]  # type: ignore[return-value]

    @property
    def custom_meal(self) -> CustomMealBuilder:
        return self.modules[CustomMealBuilder.name]  # type: ignore[return-value]

    @property
    def preferences(self) -> MealPlanSettings:
        return self.modules[MealPlanSettings.name]  # type: ignore[return-value]

    @property
    def pantry(self) -> SmartPantry:
        return self.modules[SmartPantry.name]  # type: ignore[return-value]

    @property
    def product(self) -> ProductScanner:
        return self.modules[ProductScanner.name]  # type: ignore[return-value]

    def module(self, name: str) -> FeatureModule:
        try:
            return self.modules[name]
        except KeyError:
            raise KeyError(f"Unknown module '{name}'") from None

    # --- Lifecycle ---------------------------------------------------------
    async def start(self):
        """Populate the pantry read cache, as the pantry does on mount."""
        logger.info("Dashboard session started against %s", self.client.base_url)
        await self.pantry.refresh()

    async def aclose(self):
        self.notices.detach()
        await self.client.aclose()

    def module_state(self, name: str) -> Dict[str, Any]:
        module = self.module(name)
        return {
            "module": name,
            "revision": self.revisions[name],
            "form": module.form.snapshot(),
            "actions": module.actions(),
            "view": module.view().to_dict(),
        }

    def contexts(self) -> Dict[str, Dict[str, Any]]:
        return {name: module.context() for name, module in self.modules.items()}


__all__ = ["Dashboard", "MODULE_TYPES"]
