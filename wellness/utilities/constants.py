from typing import Final

# --- Form choices (first entry of each tuple is not necessarily the default) ---
BUDGETS: Final[tuple[tuple[str, str], ...]] = (
    ("cheap", "Cheap"),
    ("medium", "Medium"),
    ("expensive", "Expensive"),
)
GENDERS: Final[tuple[str, ...]] = ("female", "male", "other")
GOALS: Final[tuple[str, ...]] = ("lose weight", "get lean", "build muscle", "bulk", "maintain weight")
WORKOUT_PREFERENCES: Final[tuple[str, ...]] = ("Home", "Gym", "Outdoor")
DIET_TYPES: Final[tuple[str, ...]] = ("omnivore", "vegan", "vegetarian", "gluten-free", "lactose-intolerant")

# Payload sent by the "Regenerate Plan" button
REGENERATE_PAYLOAD: Final[dict[str, str]] = {"goal": "maintain weight", "workout_preference": "Home"}

# Product health rating -> display tone; anything unlisted is "poor"
HEALTH_RATING_TONES: Final[dict[str, str]] = {"Good": "good", "Moderate": "moderate"}

# GPS coordinates are rounded to this many decimals in the location field
COORDINATE_DECIMALS: Final[int] = 4

# --- Remote service endpoints ---
RESTAURANT_SEARCH: Final[str] = "/api/restaurants/search"
NUTRITION_GENERATE: Final[str] = "/api/nutrition/generate"
NUTRITION_GROCERIES: Final[str] = "/api/nutrition/groceries"
CUSTOM_MEAL: Final[str] = "/api/custom-meal"
PREFERENCES_UPDATE: Final[str] = "/api/preferences/update"
PANTRY_ADD: Final[str] = "/api/pantry/add"
PANTRY_LIST: Final[str] = "/api/pantry/list"
PANTRY_SUGGEST: Final[str] = "/api/pantry/suggest"
PANTRY_SCAN_RECEIPT: Final[str] = "/api/pantry/scan-receipt"
PANTRY_PHOTO: Final[str] = "/api/pantry/photo"
PRODUCT_SCAN: Final[str] = "/api/product/scan"

# --- Notice messages ---
PREFERENCES_SAVED: Final[str] = "Preferences saved"
PLAN_REGENERATED: Final[str] = "New plan generated"
NO_GROCERIES: Final[str] = "No groceries saved yet"
