"""Response rendering: AsyncResult -> read-only view models.

Every render_* function is a pure projection. NotStarted renders an empty
view, Loading a placeholder, Failed a neutral error line, Succeeded the
populated view. Missing values render as '' (never 'None').
"""
from __future__ import annotations
from dataclasses import asdict, dataclass
from typing import Any, List, Optional, Tuple

from wellness.domain.AsyncResult import AsyncResult, Status
from wellness.domain.CustomMeal import CustomMeal
from wellness.domain.Pantry import PantrySnapshot
from wellness.domain.Plan import Plan
from wellness.domain.Product import ProductScan
from wellness.domain.Restaurant import Restaurant
from wellness.utilities.constants import NO_GROCERIES

_STATUS_LABELS = {
    Status.NOT_STARTED: "idle",
    Status.LOADING: "loading",
    Status.SUCCEEDED: "ready",
    Status.FAILED: "error",
}


def fmt(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def failure_text(result: AsyncResult) -> str:
    if result.status is not Status.FAILED:
        return ""
    if result.reason is None:
        return "Request failed"
    return f"Request failed ({result.reason.label})"


@dataclass(frozen=True)
class StatusView:
    status: str = "idle"
    error: str = ""

    @property
    def loading(self) -> bool:
        return self.status == "loading"

    @property
    def ready(self) -> bool:
        return self.status == "ready"

    def to_dict(self) -> dict:
        return asdict(self)


def _status(result: AsyncResult) -> dict:
    return {"status": _STATUS_LABELS[result.status], "error": failure_text(result)}


# -------------------- Restaurants --------------------
@dataclass(frozen=True)
class RestaurantCard:
    name: str
    cuisine: str
    details: str
    tags: Tuple[str, ...]
    rating: str


@dataclass(frozen=True)
class RestaurantsView(StatusView):
    results: Tuple[RestaurantCard, ...] = ()


def restaurant_card(r: Restaurant) -> RestaurantCard:
    return RestaurantCard(
        name=fmt(r.name),
        cuisine=fmt(r.cuisine),
        details=f"{fmt(r.address)} • {fmt(r.distance_km)} km • {fmt(r.price_range)}",
        tags=tuple(r.dietary_tags),
        rating=fmt(r.rating),
    )


def render_restaurants(result: AsyncResult[List[Restaurant]]) -> RestaurantsView:
    if result.status is Status.SUCCEEDED:
        return RestaurantsView(results=tuple(restaurant_card(r) for r in result.data or []), **_status(result))
    return RestaurantsView(**_status(result))


# -------------------- Nutrition plan --------------------
@dataclass(frozen=True)
class PlanView(StatusView):
    has_plan: bool = False
    calories: str = ""
    meals: Tuple[str, ...] = ()
    program_setting: str = ""
    days: Tuple[str, ...] = ()


def render_plan(result: AsyncResult[Plan]) -> PlanView:
    """Daily target, one line per meal and one line per workout day."""
    plan: Optional[Plan] = result.data if result.status is Status.SUCCEEDED else None
    if plan is None:
        return PlanView(**_status(result))
    meals = tuple(
        f"{fmt(m.title)} — {fmt(m.calories)} kcal • P{fmt(m.protein_g)}/C{fmt(m.carbs_g)}/F{fmt(m.fats_g)}"
        for m in plan.meal_plan.meals
    )
    days = tuple(f"{fmt(d.day)}: {', '.join(d.workout)}" for d in plan.fitness_program.days)
    return PlanView(
        has_plan=True,
        calories=fmt(plan.daily_calorie_target),
        meals=meals,
        program_setting=fmt(plan.fitness_program.setting),
        days=days,
        **_status(result),
    )


def render_groceries(data: Any) -> str:
    """Grocery notice text: one item per line, or a placeholder when nothing is saved."""
    if isinstance(data, list):
        return "\n".join(fmt(item) for item in data)
    return NO_GROCERIES


# -------------------- Custom meal --------------------
@dataclass(frozen=True)
class CustomMealView(StatusView):
    ingredients: Tuple[str, ...] = ()
    nutrition: str = ""


def render_custom_meal(result: AsyncResult[CustomMeal]) -> CustomMealView:
    if result.status is not Status.SUCCEEDED or result.data is None:
        return CustomMealView(**_status(result))
    n = result.data.nutrition
    return CustomMealView(
        ingredients=tuple(result.data.ingredients),
        nutrition=f"Calories: {fmt(n.calories)} • P{fmt(n.protein_g)} / C{fmt(n.carbs_g)} / F{fmt(n.fats_g)}",
        **_status(result),
    )


# -------------------- Product scanner --------------------
@dataclass(frozen=True)
class ProductView(StatusView):
    calories: str = ""
    processed: str = ""
    health_rating: str = ""
    tone: str = ""


def render_product(result: AsyncResult[ProductScan]) -> ProductView:
    if result.status is not Status.SUCCEEDED or result.data is None:
        return ProductView(**_status(result))
    p = result.data
    return ProductView(
        calories=fmt(p.calories),
        processed=f"{fmt(p.processed_percent)}%",
        health_rating=fmt(p.health_rating),
        tone=p.tone,
        **_status(result),
    )


# -------------------- Pantry --------------------
@dataclass(frozen=True)
class PantryView(StatusView):
    loaded: bool = False
    items: Tuple[str, ...] = ()
    suggestions: Tuple[str, ...] = ()
    busy: bool = False


def render_pantry(snapshot: PantrySnapshot, busy: bool = False) -> PantryView:
    """The pantry renders its committed snapshot, not a single AsyncResult."""
    error = f"Could not refresh pantry ({snapshot.error.label})" if snapshot.error is not None else ""
    if error:
        status = "error"
    elif busy:
        status = "loading"
    else:
        status = "ready" if snapshot.loaded else "idle"
    return PantryView(
        status=status,
        error=error,
        loaded=snapshot.loaded,
        items=tuple(item.label for item in snapshot.items),
        suggestions=tuple(snapshot.suggestions),
        busy=busy,
    )


__all__ = [
    "fmt", "failure_text", "StatusView",
    "RestaurantCard", "RestaurantsView", "render_restaurants",
    "PlanView", "render_plan", "render_groceries",
    "CustomMealView", "render_custom_meal",
    "ProductView", "render_product",
    "PantryView", "render_pantry",
]
