import pytest
from sqlalchemy import Engine

from authapi.core.errors import StoreError
from authapi.store import SqlStore


@pytest.fixture
def alice(store):
    return store.insert(
        "users",
        {"username": "alice", "email": "alice@x.com", "password": "h", "islogin": False},
    )[0]


def test_db_engine_exists(store):
    """
    Test that the database engine is created.
    """
    assert store.engine is not None
    assert isinstance(store.engine, Engine)


def test_insert_returns_row_with_defaults(alice):
    assert alice["id"] is not None
    assert alice["islogin"] is False
    assert alice["created_at"] is not None


def test_select_by_predicate(store, alice):
    store.insert(
        "users",
        {"username": "bob", "email": "bob@x.com", "password": "h", "islogin": True},
    )

    assert [r["username"] for r in store.select("users", {"email": "bob@x.com"})] == ["bob"]
    assert [r["username"] for r in store.select("users", {"islogin": False})] == ["alice"]
    assert len(store.select("users", {})) == 2
    assert len(store.select("users", {}, limit=1)) == 1


def test_update_by_predicate(store, alice):
    rows = store.update("users", {"islogin": True}, {"email": "alice@x.com"})

    assert [r["islogin"] for r in rows] == [True]
    assert store.select("users", {"email": "alice@x.com"})[0]["islogin"] is True


def test_update_without_match_returns_nothing(store, alice):
    assert store.update("users", {"islogin": True}, {"email": "nobody@x.com"}) == []


def test_unique_email(store, alice):
    with pytest.raises(StoreError, match="UNIQUE"):
        store.insert(
            "users",
            {"username": "eve", "email": "alice@x.com", "password": "h", "islogin": False},
        )


def test_unknown_table(store):
    with pytest.raises(StoreError, match="does not exist"):
        store.select("accounts", {})


def test_unknown_column(store):
    with pytest.raises(StoreError, match="does not exist"):
        store.select("users", {"mail": "alice@x.com"})


def test_ping(store, alice):
    assert len(store.ping("users")) == 1


def test_file_database(tmp_path):
    url = f"sqlite:///{tmp_path / 'users.db'}"
    SqlStore(url).insert(
        "users",
        {"username": "alice", "email": "alice@x.com", "password": "h", "islogin": False},
    )

    assert len(SqlStore(url).select("users", {})) == 1
