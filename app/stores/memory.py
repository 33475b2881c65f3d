"""
In-memory avatar store.
Default backend for development and tests; state lives for the process.
"""

import asyncio
import logging
from collections.abc import Callable
from datetime import datetime

from app.core.exceptions import AvatarAlreadyExistsException, AvatarNotFoundException
from app.schemas.avatar import AvatarData, AvatarRecord
from app.stores.base import AvatarStore, new_avatar_id, utcnow

logger = logging.getLogger(__name__)


class MemoryAvatarStore(AvatarStore):
    """
    Dict-backed avatar store keyed by user id.

    Every operation runs under one asyncio.Lock. Records are copied on the
    way in and out so callers never hold a reference to stored state.
    """

    name = "memory"

    def __init__(self, clock: Callable[[], datetime] = utcnow):
        """
        Initialize the in-memory store.

        Args:
            clock: Source of timestamps (injectable for tests)
        """
        self._records: dict[str, AvatarRecord] = {}
        self._lock = asyncio.Lock()
        self._clock = clock

    async def create(self, user_id: str, data: AvatarData) -> AvatarRecord:
        async with self._lock:
            if user_id in self._records:
                raise AvatarAlreadyExistsException(user_id)

            now = self._clock()
            record = AvatarRecord(
                id=new_avatar_id(),
                user_id=user_id,
                avatar_type=data.avatar_type,
                avatar_url=data.avatar_url,
                gender=data.gender,
                is_active=True,
                created_at=now,
                updated_at=now,
            )
            self._records[user_id] = record
            logger.info(f"Avatar record created for user: {user_id}")
            return record.model_copy()

    async def get(self, user_id: str) -> AvatarRecord | None:
        async with self._lock:
            record = self._records.get(user_id)
            return record.model_copy() if record else None

    async def update(self, user_id: str, data: AvatarData) -> AvatarRecord:
        async with self._lock:
            existing = self._records.get(user_id)
            if existing is None:
                raise AvatarNotFoundException(user_id)

            updated = existing.model_copy(update=self._changes(existing, data))
            self._records[user_id] = updated
            logger.info(f"Avatar record updated for user: {user_id}")
            return updated.model_copy()

    async def delete(self, user_id: str) -> bool:
        async with self._lock:
            existing = self._records.get(user_id)
            if existing is None:
                return False

            self._records[user_id] = existing.model_copy(
                update={"is_active": False, "updated_at": self._clock()}
            )
            logger.info(f"Avatar deleted for user: {user_id}")
            return True

    async def restore(self, user_id: str, data: AvatarData) -> AvatarRecord:
        async with self._lock:
            existing = self._records.get(user_id)
            if existing is None:
                raise AvatarNotFoundException(user_id)
            if existing.is_active:
                raise AvatarAlreadyExistsException(user_id)

            changes = self._changes(existing, data)
            changes["is_active"] = True
            restored = existing.model_copy(update=changes)
            self._records[user_id] = restored
            logger.info(f"Avatar record restored for user: {user_id}")
            return restored.model_copy()

    def _changes(self, existing: AvatarRecord, data: AvatarData) -> dict:
        """Field updates for applying data over an existing record."""
        return {
            "avatar_type": data.avatar_type,
            "avatar_url": data.avatar_url or existing.avatar_url,
            "gender": data.gender or existing.gender,
            "updated_at": self._clock(),
        }
