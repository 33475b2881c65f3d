"""
Avatar store factory.
Provides configuration-driven backend selection.
"""

from functools import lru_cache

from app.config import get_settings
from app.db.session import resolve_database_url
from app.stores.base import AvatarStore
from app.stores.database import DatabaseAvatarStore
from app.stores.http import HttpAvatarStore
from app.stores.memory import MemoryAvatarStore


@lru_cache
def get_avatar_store_backend() -> AvatarStore:
    """
    Get the configured avatar store.

    Uses LRU cache to ensure only one instance is created, so the memory
    store keeps its records across requests.
    Backend selection is based on the AVATAR_STORE_BACKEND setting.

    Returns:
        Configured AvatarStore instance

    Raises:
        ValueError: If unknown store backend is configured
    """
    settings = get_settings()
    backend = settings.AVATAR_STORE_BACKEND.lower()

    if backend == "memory":
        return MemoryAvatarStore()
    elif backend == "database":
        database_url = resolve_database_url(settings)
        return DatabaseAvatarStore(database_url=database_url, echo=settings.DEBUG)
    elif backend == "http":
        return HttpAvatarStore(
            base_url=settings.AVATAR_API_URL,
            timeout=settings.AVATAR_API_TIMEOUT,
        )
    else:
        raise ValueError(f"Unknown avatar store backend: {backend}")


def get_store() -> AvatarStore:
    """
    Dependency function for FastAPI.

    Usage:
        @router.get("/avatar/{ad_user_id}")
        async def get_avatar(store: AvatarStore = Depends(get_store)):
            ...
    """
    return get_avatar_store_backend()
