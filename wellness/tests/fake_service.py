"""Fake remote service used by the module and web tests."""
import json

import httpx

from wellness.infra.Service_Client import ServiceClient

SAMPLE_PLAN = {
    "daily_calorie_target": 2600,
    "meal_plan": {
        "meals": [
            {"title": "Oats & berries", "calories": 450, "protein_g": 20, "carbs_g": 70, "fats_g": 9},
            {"title": "Chicken bowl", "calories": 700, "protein_g": 55, "carbs_g": 60, "fats_g": 18},
        ]
    },
    "fitness_program": {
        "setting": "Gym",
        "days": [
            {"day": "Monday", "workout": ["Squat 5x5", "Bench 5x5"]},
            {"day": "Wednesday", "workout": ["Deadlift 3x5"]},
        ],
    },
}

SAMPLE_RESTAURANTS = [
    {
        "name": "Green Fork",
        "cuisine": "Mediterranean",
        "address": "12 Olive St",
        "distance_km": 1.2,
        "price_range": "$$",
        "dietary_tags": ["vegan", "gluten-free"],
        "rating": 4.6,
    }
]


class FakeService:
    """In-memory stand-in for the remote service, served through httpx.MockTransport."""

    def __init__(self):
        self.pantry = [{"name": "rice", "quantity": "1 kg"}]
        self.calls = []
        self.overrides = {}

    def paths(self):
        return [path for _, path, _ in self.calls]

    def suggestions(self):
        if not self.pantry:
            return []
        return ["Stir fry with " + ", ".join(item["name"] for item in self.pantry)]

    def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        body = json.loads(request.content) if request.content else None
        self.calls.append((request.method, path, body))
        if path in self.overrides:
            return self.overrides[path](request)

        if path == "/api/restaurants/search":
            return httpx.Response(200, json=SAMPLE_RESTAURANTS)
        if path == "/api/nutrition/generate":
            return httpx.Response(200, json=SAMPLE_PLAN)
        if path == "/api/nutrition/groceries":
            return httpx.Response(200, json=["oats", "berries", "chicken"])
        if path == "/api/custom-meal":
            portions = body.get("portions") or 1
            return httpx.Response(200, json={
                "ingredients": ["pasta", "tomato", "basil"],
                "nutrition": {"calories": 520 * portions, "protein_g": 18, "carbs_g": 90, "fats_g": 10},
            })
        if path == "/api/preferences/update":
            return httpx.Response(200, json={"ok": True})
        if path == "/api/pantry/add":
            self.pantry.append({"name": body["name"]})
            return httpx.Response(200, json={"ok": True})
        if path == "/api/pantry/list":
            return httpx.Response(200, json=self.pantry)
        if path == "/api/pantry/suggest":
            return httpx.Response(200, json=self.suggestions())
        if path == "/api/pantry/scan-receipt":
            detected = ["milk", "bread"]
            self.pantry.extend({"name": n} for n in detected)
            return httpx.Response(200, json={"detected": detected})
        if path == "/api/pantry/photo":
            detected = ["apples"]
            self.pantry.extend({"name": n, "quantity": "6"} for n in detected)
            return httpx.Response(200, json={"detected": detected})
        if path == "/api/product/scan":
            if body.get("code") == "0000000000000":
                return httpx.Response(200, json={})
            return httpx.Response(200, json={"calories": 250, "processed_percent": 35, "health_rating": "Moderate"})
        return httpx.Response(404, json={"detail": "Not Found"})

    def client(self) -> ServiceClient:
        return ServiceClient("http://service.test", transport=httpx.MockTransport(self.handler))


def status(code: int, body=None):
    """Override factory: always answer with ``code``."""
    def respond(request: httpx.Request) -> httpx.Response:
        return httpx.Response(code, json=body if body is not None else {"detail": "boom"})
    return respond
