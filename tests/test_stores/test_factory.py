"""
Tests for configuration-driven store selection.
"""

import pytest

from app.config import get_settings
from app.stores import (
    DatabaseAvatarStore,
    HttpAvatarStore,
    MemoryAvatarStore,
    get_avatar_store_backend,
)


@pytest.fixture(autouse=True)
def clear_caches():
    get_settings.cache_clear()
    get_avatar_store_backend.cache_clear()
    yield
    get_settings.cache_clear()
    get_avatar_store_backend.cache_clear()


def test_memory_backend_is_default(monkeypatch):
    monkeypatch.delenv("AVATAR_STORE_BACKEND", raising=False)

    store = get_avatar_store_backend()

    assert isinstance(store, MemoryAvatarStore)
    assert get_avatar_store_backend() is store


def test_database_backend(monkeypatch, tmp_path):
    monkeypatch.setenv("AVATAR_STORE_BACKEND", "database")
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'factory.db'}")

    store = get_avatar_store_backend()

    assert isinstance(store, DatabaseAvatarStore)
    assert store.engine.url.database.endswith("factory.db")


def test_database_backend_requires_url_without_fallback(monkeypatch):
    monkeypatch.setenv("AVATAR_STORE_BACKEND", "database")
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setenv("USE_SQLITE_FALLBACK", "false")

    with pytest.raises(ValueError):
        get_avatar_store_backend()


def test_http_backend(monkeypatch):
    monkeypatch.setenv("AVATAR_STORE_BACKEND", "http")
    monkeypatch.setenv("AVATAR_API_URL", "http://avatars.example/api/")

    store = get_avatar_store_backend()

    assert isinstance(store, HttpAvatarStore)
    assert store.base_url == "http://avatars.example/api"


def test_resolve_database_url(monkeypatch):
    """The configured URL wins; otherwise the SQLite fallback URL is used."""
    from app.config import Settings
    from app.db.session import resolve_database_url

    monkeypatch.delenv("DATABASE_URL", raising=False)

    assert resolve_database_url(Settings(DATABASE_URL="postgresql+asyncpg://db/avatars")) == (
        "postgresql+asyncpg://db/avatars"
    )
    assert resolve_database_url(Settings(SQLITE_FALLBACK_URL="sqlite+aiosqlite:///./x.db")) == (
        "sqlite+aiosqlite:///./x.db"
    )
