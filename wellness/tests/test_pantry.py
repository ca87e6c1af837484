import asyncio
import base64

import httpx
import pytest

from fake_service import status
from wellness.domain.AsyncResult import Status
from wellness.events.Event_Bus import EventBus, PANTRY_REFRESH_FAILED
from wellness.events.web_observers import NoticeBoard
from wellness.infra.Service_Client import ServiceClient
from wellness.logic.modules.pantry import SmartPantry
from wellness.logic.pantry.synchronizer import encode_image

REFRESH = ["/api/pantry/list", "/api/pantry/suggest"]


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def board(bus):
    return NoticeBoard().attach(bus)


@pytest.fixture
def pantry(service, bus):
    return SmartPantry(service.client(), bus)


def messages(board):
    return [(n["level"], n["message"]) for n in board.get_notices()["notices"]]


def test_encode_image():
    assert encode_image(None) == ""
    assert encode_image(b"\x89PNG") == base64.b64encode(b"\x89PNG").decode("ascii")
    assert encode_image("aGVsbG8=") == "aGVsbG8="


@pytest.mark.asyncio
async def test_first_refresh_loads_list_and_suggestions(service, pantry):
    assert pantry.view().status == "idle"
    assert await pantry.refresh() is True
    view = pantry.view()
    assert view.loaded
    assert view.items == ("rice (1 kg)",)
    assert view.suggestions == ("Stir fry with rice",)
    assert sorted(service.paths()) == sorted(REFRESH)


@pytest.mark.asyncio
async def test_blank_name_is_ignored(service, pantry):
    await pantry.refresh()
    before = pantry.sync.snapshot
    service.calls.clear()

    for blank in ("", "   "):
        pantry.form.set("name", blank)
        assert await pantry.add() is None
    assert service.calls == []
    assert pantry.sync.snapshot is before


@pytest.mark.asyncio
async def test_add_then_refresh(service, pantry):
    pantry.form.set("name", "eggs")
    result = await pantry.add()

    assert result.status is Status.SUCCEEDED
    assert service.calls[0] == ("POST", "/api/pantry/add", {"name": "eggs"})
    assert sorted(service.paths()[1:]) == sorted(REFRESH)
    assert "eggs" in pantry.view().items
    assert pantry.view().suggestions == ("Stir fry with rice, eggs",)
    assert pantry.form.get("name") == ""


@pytest.mark.asyncio
async def test_failed_add_still_refreshes(service, pantry, board):
    service.overrides["/api/pantry/add"] = status(500)
    pantry.form.set("name", "eggs")
    result = await pantry.add()

    assert result.status is Status.FAILED
    assert sorted(service.paths()[1:]) == sorted(REFRESH)
    assert pantry.view().items == ("rice (1 kg)",)
    assert pantry.form.get("name") == "eggs"
    assert ("error", "Could not add item (service 500)") in messages(board)


@pytest.mark.asyncio
async def test_scan_receipt_reports_detected_items(service, pantry, board):
    result = await pantry.scan_receipt(b"receipt-bytes")

    assert result.status is Status.SUCCEEDED
    method, path, body = service.calls[0]
    assert path == "/api/pantry/scan-receipt"
    assert body == {"image_base64": base64.b64encode(b"receipt-bytes").decode("ascii")}
    assert ("info", "Detected: milk, bread") in messages(board)
    assert pantry.view().items == ("rice (1 kg)", "milk", "bread")


@pytest.mark.asyncio
async def test_scan_without_image_sends_empty_string(service, pantry):
    await pantry.scan_receipt()
    assert service.calls[0][2] == {"image_base64": ""}


@pytest.mark.asyncio
async def test_photo_upload(service, pantry, board):
    result = await pantry.upload_photo(b"photo")

    assert result.data.detected == ["apples"]
    assert ("info", "Detected: apples") in messages(board)
    assert "apples (6)" in pantry.view().items


@pytest.mark.asyncio
async def test_unreadable_image(service, pantry, board):
    service.overrides["/api/pantry/photo"] = status(413)
    result = await pantry.upload_photo(b"huge")

    assert result.status is Status.FAILED
    assert ("error", "Could not read image (service 413)") in messages(board)
    assert sorted(service.paths()[1:]) == sorted(REFRESH)


@pytest.mark.asyncio
async def test_partial_refresh_failure_keeps_stale_snapshot(service, pantry, bus):
    failures = []
    bus.subscribe(PANTRY_REFRESH_FAILED, lambda _, payload: failures.append(payload["reason"]))
    await pantry.refresh()

    service.overrides["/api/pantry/suggest"] = status(500)
    pantry.form.set("name", "eggs")
    await pantry.add()

    view = pantry.view()
    assert view.items == ("rice (1 kg)",)
    assert view.suggestions == ("Stir fry with rice",)
    assert view.error == "Could not refresh pantry (service 500)"
    assert failures[0].status == 500

    del service.overrides["/api/pantry/suggest"]
    assert await pantry.refresh() is True
    view = pantry.view()
    assert view.error == ""
    assert view.items == ("rice (1 kg)", "eggs")
    assert view.suggestions == ("Stir fry with rice, eggs",)


@pytest.mark.asyncio
async def test_malformed_list_keeps_stale_snapshot(service, pantry):
    await pantry.refresh()
    service.overrides["/api/pantry/list"] = status(200, {"items": []})
    assert await pantry.refresh() is False
    assert pantry.view().items == ("rice (1 kg)",)
    assert pantry.sync.snapshot.error.kind == "decode"


@pytest.mark.asyncio
async def test_not_busy_once_settled(pantry):
    await pantry.refresh()
    pantry.form.set("name", "tofu")
    await pantry.add()
    assert pantry.sync.busy is False


@pytest.mark.asyncio
async def test_slow_mount_refresh_does_not_overwrite_newer_list(service, bus):
    held = asyncio.Event()
    list_calls = []

    async def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/api/pantry/list":
            list_calls.append(request)
            if len(list_calls) == 1:
                response = service.handler(request)
                await held.wait()
                return response
        return service.handler(request)

    pantry = SmartPantry(ServiceClient("http://service.test", transport=httpx.MockTransport(handler)), bus)
    mount = asyncio.create_task(pantry.refresh())
    while not list_calls:
        await asyncio.sleep(0)

    pantry.form.set("name", "eggs")
    await pantry.add()
    assert pantry.view().items == ("rice (1 kg)", "eggs")

    held.set()
    assert await mount is False
    assert pantry.view().items == ("rice (1 kg)", "eggs")
    assert pantry.view().suggestions == ("Stir fry with rice, eggs",)


@pytest.mark.asyncio
async def test_slow_failing_refresh_does_not_flag_newer_snapshot(service, bus):
    held = asyncio.Event()
    suggest_calls = []

    async def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/api/pantry/suggest":
            suggest_calls.append(request)
            if len(suggest_calls) == 1:
                await held.wait()
                return httpx.Response(502)
        return service.handler(request)

    pantry = SmartPantry(ServiceClient("http://service.test", transport=httpx.MockTransport(handler)), bus)
    slow = asyncio.create_task(pantry.refresh())
    while not suggest_calls:
        await asyncio.sleep(0)

    assert await pantry.refresh() is True
    held.set()
    assert await slow is False
    assert pantry.sync.snapshot.error is None
    assert pantry.view().status == "ready"
