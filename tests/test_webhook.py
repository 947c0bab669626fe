"""Tests for the webhook HTTP endpoint."""

from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from config import Settings
from webhook import create_app

SETTINGS = Settings(telegram_token="123:abc", webhook_path="/webhook")

UPDATE = {
    "update_id": 10,
    "message": {
        "message_id": 1,
        "date": 1700000000,
        "chat": {"id": 5, "type": "private"},
        "from": {"id": 7, "is_bot": False, "first_name": "Ann"},
        "text": "hello",
    },
}


def _application(bot=None) -> SimpleNamespace:
    return SimpleNamespace(
        bot=bot,
        initialize=AsyncMock(),
        start=AsyncMock(),
        stop=AsyncMock(),
        shutdown=AsyncMock(),
        process_update=AsyncMock(),
    )


def test_update_is_routed():
    application = _application()
    client = TestClient(create_app(SETTINGS, application=application))
    response = client.post("/webhook", json=UPDATE)
    assert response.status_code == 200
    assert response.json() == {"ok": True}
    application.process_update.assert_awaited_once()
    update = application.process_update.await_args.args[0]
    assert update.update_id == 10
    assert update.message.text == "hello"


def test_malformed_body_is_dropped():
    application = _application()
    client = TestClient(create_app(SETTINGS, application=application))
    response = client.post("/webhook", content=b"{not json", headers={"Content-Type": "application/json"})
    assert response.status_code == 200
    assert response.json() == {"ok": False}
    application.process_update.assert_not_awaited()


def test_null_body_is_dropped():
    application = _application()
    client = TestClient(create_app(SETTINGS, application=application))
    response = client.post("/webhook", content=b"null", headers={"Content-Type": "application/json"})
    assert response.json() == {"ok": False}
    application.process_update.assert_not_awaited()


def test_healthz():
    client = TestClient(create_app(SETTINGS, application=_application()))
    assert client.get("/healthz").json() == {"status": "ok"}


def test_application_lifecycle():
    info = SimpleNamespace(last_error_date=1700000000, last_error_message="Connection refused")
    bot = SimpleNamespace(get_webhook_info=AsyncMock(return_value=info))
    application = _application(bot)
    with TestClient(create_app(SETTINGS, application=application)):
        application.initialize.assert_awaited_once()
        application.start.assert_awaited_once()
        bot.get_webhook_info.assert_awaited_once()
    application.stop.assert_awaited_once()
    application.shutdown.assert_awaited_once()


@pytest.mark.parametrize("body", [b"[1, 2]", b'"text"', b"42", b"true"])
def test_non_object_body_is_dropped(body):
    application = _application()
    client = TestClient(create_app(SETTINGS, application=application))
    response = client.post("/webhook", content=body, headers={"Content-Type": "application/json"})
    assert response.status_code == 200
    assert response.json() == {"ok": False}
    application.process_update.assert_not_awaited()


@pytest.mark.parametrize("payload", [{}, {"update_id": 3, "message": "not an object"}])
def test_object_that_is_not_an_update_is_dropped(payload):
    application = _application()
    client = TestClient(create_app(SETTINGS, application=application))
    response = client.post("/webhook", json=payload)
    assert response.status_code == 200
    assert response.json() == {"ok": False}
    application.process_update.assert_not_awaited()
