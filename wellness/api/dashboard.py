from contextlib import asynccontextmanager
from datetime import datetime
from typing import Optional
import logging

from fastapi import (
    FastAPI,
    Request,
    Query,
    Form,
    File,
    UploadFile,
    HTTPException,
)
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from wellness.infra.paths import STATIC_DIR, TEMPLATES_DIR
from wellness.logic.dashboard import Dashboard
from wellness.logic.modules.base import FeatureModule

# Logging
logger = logging.getLogger("wellness_app")

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def _ts() -> int:
    """Cache-busting timestamp for static assets."""
    return int(datetime.now().timestamp())


def _session(request: Request) -> Dashboard:
    return request.app.state.dashboard


def _module(request: Request, name: str) -> FeatureModule:
    try:
        return _session(request).module(name)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown module '{name}'")


async def _apply_form(request: Request, module: FeatureModule):
    """Copy posted form fields into the module's FormState (one set() per field)."""
    form = await request.form()
    for key, value in form.items():
        if key not in module.form:
            raise HTTPException(status_code=400, detail=f"Unknown field '{key}' for module '{module.name}'")
        if isinstance(value, str):
            module.form.set(key, value)


def _back(module: str) -> RedirectResponse:
    return RedirectResponse(url=f"/#{module}", status_code=303)


def create_app(dashboard: Optional[Dashboard] = None) -> FastAPI:
    """Build the dashboard web app around one in-memory session."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        session = dashboard or Dashboard()
        app.state.dashboard = session
        await session.start()
        try:
            yield
        finally:
            await session.aclose()
            logger.info("Dashboard session closed")

    app = FastAPI(title="Wellness & Food Companion", lifespan=lifespan)
    if STATIC_DIR.is_dir():
        app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    # -------------------- UI PAGE --------------------
    @app.get("/", response_class=HTMLResponse)
    def main_page(request: Request):
        session = _session(request)
        return templates.TemplateResponse(
            request,
            "index.html",
            {
                "modules": session.contexts(),
                "notices": session.notices.get_notices()["notices"][-5:],
                "time": _ts(),
            },
        )

    # -------------------- Field edits --------------------
    @app.post("/modules/{name}/fields")
    async def set_fields(request: Request, name: str):
        module = _module(request, name)
        await _apply_form(request, module)
        return _back(name)

    # -------------------- Restaurants --------------------
    @app.post("/restaurants/search")
    async def restaurants_search(request: Request):
        finder = _session(request).restaurants
        await _apply_form(request, finder)
        await finder.search()
        return _back(finder.name)

    @app.post("/restaurants/location")
    async def restaurants_location(request: Request, latitude: float = Form(...), longitude: float = Form(...)):
        finder = _session(request).restaurants
        finder.use_coordinates(latitude, longitude)
        return _back(finder.name)

    # -------------------- Nutrition --------------------
    @app.post("/nutrition/generate")
    async def nutrition_generate(request: Request):
        generator = _session(request).nutrition
        await _apply_form(request, generator)
        await generator.generate()
        return _back(generator.name)

    @app.post("/nutrition/groceries")
    async def nutrition_groceries(request: Request):
        generator = _session(request).nutrition
        await _apply_form(request, generator)
        await generator.view_groceries()
        return _back(generator.name)

    # -------------------- Custom meal --------------------
    @app.post("/custom-meal/build")
    async def custom_meal_build(request: Request):
        builder = _session(request).custom_meal
        await _apply_form(request, builder)
        await builder.build()
        return _back(builder.name)

    # -------------------- Preferences --------------------
    @app.post("/preferences/save")
    async def preferences_save(request: Request):
        settings = _session(request).preferences
        await _apply_form(request, settings)
        await settings.save()
        return _back(settings.name)

    @app.post("/preferences/regenerate")
    async def preferences_regenerate(request: Request):
        settings = _session(request).preferences
        await _apply_form(request, settings)
        await settings.regenerate()
        return _back(settings.name)

    # -------------------- Pantry --------------------
    @app.post("/pantry/add")
    async def pantry_add(request: Request):
        pantry = _session(request).pantry
        await _apply_form(request, pantry)
        await pantry.add()
        return _back(pantry.name)

    @app.post("/pantry/scan-receipt")
    async def pantry_scan_receipt(request: Request, image: Optional[UploadFile] = File(None)):
        pantry = _session(request).pantry
        await pantry.scan_receipt(await image.read() if image is not None else None)
        return _back(pantry.name)

    @app.post("/pantry/photo")
    async def pantry_photo(request: Request, image: Optional[UploadFile] = File(None)):
        pantry = _session(request).pantry
        await pantry.upload_photo(await image.read() if image is not None else None)
        return _back(pantry.name)

    @app.post("/pantry/refresh")
    async def pantry_refresh(request: Request):
        pantry = _session(request).pantry
        await pantry.refresh()
        return _back(pantry.name)

    # -------------------- Product --------------------
    @app.post("/product/scan")
    async def product_scan(request: Request):
        scanner = _session(request).product
        await _apply_form(request, scanner)
        await scanner.scan()
        return _back(scanner.name)

    # -------------------- API: module state (polled by frontend) --------------------
    @app.get("/api/modules/{name}")
    def api_module_state(request: Request, name: str):
        _module(request, name)
        return _session(request).module_state(name)

    @app.get("/api/notices")
    def api_notices(
        request: Request,
        since: Optional[int] = Query(default=None, description="Return notices with id greater than this value")
    ):
        """
        Return user notices (acknowledgments and errors).

        Client polling strategy:
            1. First call without 'since' to load the current backlog.
            2. Store 'next_cursor' from response.
            3. Subsequent polls: /api/notices?since=<next_cursor>
        """
        return _session(request).notices.get_notices(since)

    return app


app = create_app()
