import threading

from fastapi.testclient import TestClient

from authapi.main import create_app
from authapi.shared import Environment
from authapi.store import SqlStore


def test_root_reports_server_up(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "message": "Your server is up and running....",
    }


def test_root_does_not_touch_the_store(config):
    class DeadStore(SqlStore):
        def select(self, table, where, limit=None):
            raise ConnectionError("connection refused")

    with TestClient(create_app(config, store=DeadStore("sqlite://"))) as client:
        response = client.get("/")

    assert response.status_code == 200
    assert response.json()["success"] is True


def test_debug_env_reports_presence_only(client, config):
    response = client.get("/debug-env")

    assert response.status_code == 200
    assert response.json() == {"SUPABASE_URL": "✅ Set", "SUPABASE_ANON_KEY": "✅ Set"}
    assert config.env.supabase_url not in response.text
    assert config.env.supabase_anon_key not in response.text


def test_debug_env_unset(config, store):
    unset = config.model_copy(update={"env": Environment(_env_file=None)})

    with TestClient(create_app(unset, store=store)) as client:
        response = client.get("/debug-env")

    assert response.json() == {
        "SUPABASE_URL": "❌ Not Set",
        "SUPABASE_ANON_KEY": "❌ Not Set",
    }


def test_cors_preflight_allows_any_origin(client):
    response = client.options(
        "/login",
        headers={
            "Origin": "https://frontend.example.com",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"
    assert "POST" in response.headers["access-control-allow-methods"]


def test_startup_does_not_wait_for_store(config):
    answered = threading.Event()

    class HangingStore(SqlStore):
        def ping(self, table):
            answered.wait(timeout=5)
            return super().ping(table)

    try:
        with TestClient(create_app(config, store=HangingStore("sqlite://"))) as client:
            response = client.get("/")
            probe_pending = not client.app.state.store_probe.done()
            answered.set()
    finally:
        answered.set()

    assert response.status_code == 200
    assert probe_pending
