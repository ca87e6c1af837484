"""Restaurant finder: location / cuisine / budget search."""
from __future__ import annotations
from typing import List

from wellness.domain.AsyncResult import AsyncResult
from wellness.domain.ResponseModel import decode_list
from wellness.domain.Restaurant import Restaurant
from wellness.logic.modules.base import FeatureModule, as_options
from wellness.logic.reporting.views import RestaurantsView, render_restaurants
from wellness.logic.shaping.request_shaper import FieldSpec, FieldType, RequestPayload, shape
from wellness.utilities.constants import BUDGETS, COORDINATE_DECIMALS, RESTAURANT_SEARCH

SCHEMA = {
    "location": FieldSpec(FieldType.STRING),
    "cuisine_or_dish": FieldSpec(FieldType.STRING),
    "budget": FieldSpec(FieldType.ENUM),
}


def format_coordinates(latitude: float, longitude: float) -> str:
    return f"{latitude:.{COORDINATE_DECIMALS}f}, {longitude:.{COORDINATE_DECIMALS}f}"


class RestaurantFinder(FeatureModule):
    name = "restaurants"
    title = "Find Restaurants"
    defaults = {"location": "", "cuisine_or_dish": "", "budget": "medium"}

    async def _search(self, payload: RequestPayload) -> List[Restaurant]:
        return decode_list(Restaurant, await self.client.post_json(RESTAURANT_SEARCH, payload))

    async def search(self) -> AsyncResult[List[Restaurant]]:
        return await self.controller("search").invoke(lambda: shape(self.form.snapshot(), SCHEMA), self._search)

    def use_coordinates(self, latitude: float, longitude: float):
        """Fill the location field from a device GPS fix."""
        self.form.set("location", format_coordinates(latitude, longitude))

    def choices(self):
        return {"budget": as_options(BUDGETS)}

    def view(self) -> RestaurantsView:
        return render_restaurants(self.controller("search").state)
