"""
Pytest configuration and fixtures for Avatar Registry API tests.
"""

from collections.abc import AsyncGenerator
from datetime import datetime, timedelta, timezone
from typing import Any

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from app.config import Settings, get_settings
from app.main import app
from app.stores import AvatarStore, MemoryAvatarStore, get_store


class FakeClock:
    """Deterministic clock advancing one second per reading."""

    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        self.now += timedelta(seconds=1)
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    """Fake clock for stores under test."""
    return FakeClock()


@pytest.fixture
def app_settings() -> Settings:
    """Settings used by the app under test."""
    return Settings(
        AVATAR_STORE_BACKEND="memory",
        AVATAR_ASSET_BASE_URL="http://cdn.test/models",
        HIDE_INACTIVE_AVATARS=False,
    )


@pytest.fixture
def store(clock: FakeClock) -> AvatarStore:
    """Fresh in-memory store per test."""
    return MemoryAvatarStore(clock=clock)


@pytest_asyncio.fixture(scope="function")
async def client(store: AvatarStore, app_settings: Settings) -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client."""

    def override_get_store():
        return store

    def override_get_settings():
        return app_settings

    app.dependency_overrides[get_store] = override_get_store
    app.dependency_overrides[get_settings] = override_get_settings

    # Unhandled errors are rendered by the catch-all handler, not re-raised
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def sample_avatar_data() -> dict[str, Any]:
    """Sample create request body."""
    return {
        "adUserId": "u1",
        "avatar": "male1",
        "avatarUrl": "http://x/a.glb",
        "gender": "male",
    }
