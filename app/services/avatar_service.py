"""
Avatar service - Business logic for the avatar record lifecycle.
Resolves preset defaults and applies the soft-delete visibility policy
on top of a store backend.
"""

import logging

from app.core.exceptions import AvatarAlreadyExistsException, AvatarNotFoundException
from app.models.avatar import AvatarType, Gender
from app.schemas.avatar import AvatarData, AvatarPreset, AvatarRecord
from app.stores.base import AvatarStore

logger = logging.getLogger(__name__)


class AvatarService:
    """
    Service class for avatar operations.

    With hide_inactive off, logically deleted avatars stay readable and
    block re-creation. With it on, they read as absent and a create
    reactivates them.
    """

    def __init__(
        self,
        store: AvatarStore,
        asset_base_url: str = "/models",
        hide_inactive: bool = False,
    ):
        self.store = store
        self.asset_base_url = asset_base_url
        self.hide_inactive = hide_inactive

    async def create(
        self,
        user_id: str,
        avatar_type: AvatarType,
        avatar_url: str | None = None,
        gender: Gender | None = None,
    ) -> AvatarRecord:
        """
        Create the avatar for a user.

        Missing gender and URL fall back to the preset's defaults.

        Raises:
            AvatarAlreadyExistsException: If the user already has an avatar
        """
        data = AvatarData(
            avatar_type=avatar_type,
            avatar_url=avatar_url or avatar_type.default_url(self.asset_base_url),
            gender=gender or avatar_type.gender,
        )

        try:
            return await self.store.create(user_id, data)
        except AvatarAlreadyExistsException:
            if not self.hide_inactive:
                raise
            existing = await self.store.get(user_id)
            if existing is None or existing.is_active:
                raise
            logger.info(f"Reactivating inactive avatar for user: {user_id}")
            return await self.store.restore(user_id, data)

    async def get(self, user_id: str) -> AvatarRecord:
        """
        Get the avatar for a user.

        Raises:
            AvatarNotFoundException: If no visible avatar exists
        """
        record = await self.store.get(user_id)
        if record is None or not self._visible(record):
            raise AvatarNotFoundException(user_id)
        return record

    async def update(
        self,
        user_id: str,
        avatar_type: AvatarType,
        avatar_url: str | None = None,
        gender: Gender | None = None,
    ) -> AvatarRecord:
        """
        Update the avatar for a user. Omitted URL and gender are kept.

        Raises:
            AvatarNotFoundException: If no visible avatar exists
        """
        if self.hide_inactive:
            await self.get(user_id)

        data = AvatarData(avatar_type=avatar_type, avatar_url=avatar_url, gender=gender)
        return await self.store.update(user_id, data)

    async def delete(self, user_id: str) -> None:
        """
        Logically delete the avatar for a user.

        Raises:
            AvatarNotFoundException: If no visible avatar exists
        """
        if self.hide_inactive:
            await self.get(user_id)

        if not await self.store.delete(user_id):
            raise AvatarNotFoundException(user_id)

    def list_presets(self) -> list[AvatarPreset]:
        """List every preset avatar with its default asset URL."""
        return [
            AvatarPreset(
                avatar_type=avatar_type,
                gender=avatar_type.gender,
                avatar_url=avatar_type.default_url(self.asset_base_url),
            )
            for avatar_type in AvatarType
        ]

    def _visible(self, record: AvatarRecord) -> bool:
        return record.is_active or not self.hide_inactive
