from __future__ import annotations

import importlib

import pytest

from src.shift_tracker.shift_tracker.main import create_app


@pytest.fixture
def app(monkeypatch, data_file):
    monkeypatch.setenv("APP_ENV", "testing")
    settings = importlib.import_module("config.testing")
    monkeypatch.setattr(settings, "DATA_FILE", str(data_file))

    app = create_app(start_autosave=False)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


def _post(client, text, identity="U1", **extra):
    return client.post("/commands", json={"identity": identity, "display_name": "Alice", "text": text, **extra})


def test_startup_creates_data_file(app, data_file):
    assert data_file.exists()


def test_register_and_clock_in(client, data_file):
    resp = _post(client, "!register Manager a@x.com")
    assert resp.status_code == 200
    assert resp.get_json()["ok"] is True

    resp = _post(client, "!clockin")
    assert resp.get_json()["ok"] is True

    resp = _post(client, "!clockin")
    assert resp.get_json() == {"ok": False, "reply": "You are already clocked in!"}

    assert '"userId": "U1"' in data_file.read_text(encoding="utf-8")


def test_non_command_is_no_content(client):
    assert _post(client, "good morning").status_code == 204


def test_bad_payloads(client):
    assert client.post("/commands", data="nope", content_type="text/plain").status_code == 400
    assert client.post("/commands", json={"text": "!ping"}).status_code == 400


def test_admin_flag_is_forwarded(client):
    assert _post(client, "!admin-stats").get_json()["reply"] == "Admin only."
    assert _post(client, "!admin-stats", is_admin=True).get_json()["ok"] is True


def test_ping(client):
    _post(client, "!register Manager a@x.com")
    body = client.get("/ping").get_json()

    assert body == {"status": "online", "staff": 1, "shifts": 0, "active": 0}


@pytest.mark.parametrize("flag", ["true", "false", "0", 1])
def test_admin_flag_must_be_json_boolean(client, flag):
    assert _post(client, "!admin-stats", is_admin=flag).get_json()["reply"] == "Admin only."
