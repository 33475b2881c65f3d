"""
FastAPI dependency injection functions.
Provides common dependencies used across endpoints.
"""

from typing import Annotated

from fastapi import Depends

from app.config import Settings, get_settings
from app.services.avatar_service import AvatarService
from app.stores import AvatarStore, get_store


# Type aliases for cleaner endpoint signatures
Store = Annotated[AvatarStore, Depends(get_store)]
AppSettings = Annotated[Settings, Depends(get_settings)]


def get_avatar_service(store: Store, settings: AppSettings) -> AvatarService:
    """Build the avatar service for the configured store and policy."""
    return AvatarService(
        store,
        asset_base_url=settings.AVATAR_ASSET_BASE_URL,
        hide_inactive=settings.HIDE_INACTIVE_AVATARS,
    )


Avatars = Annotated[AvatarService, Depends(get_avatar_service)]
