import pytest
from fastapi.testclient import TestClient

from authapi.main import create_app
from authapi.shared import Config, Environment
from authapi.store import SqlStore


@pytest.fixture(scope="session")
def config(tmp_path_factory):
    """Config for an app on an in-memory SQL store, with Supabase credentials set."""
    return Config(
        general={"title": "authapi tests"},
        paths={"logs": str(tmp_path_factory.mktemp("logs"))},
        logging={"level": "DEBUG"},
        network={"host": "127.0.0.1", "port": 5000, "reload": False},
        store={"backend": "sql", "table": "users", "database_url": "sqlite://"},
        env=Environment(
            _env_file=None,
            supabase_url="https://example.supabase.co",
            supabase_anon_key="test-anon-key",
            app_env="development",
        ),
    )


@pytest.fixture
def store():
    return SqlStore("sqlite://")


@pytest.fixture
def client(config, store):
    with TestClient(create_app(config, store=store)) as c:
        yield c
