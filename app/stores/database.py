"""
SQL database avatar store.
Supports PostgreSQL (asyncpg) and SQLite (aiosqlite) through async SQLAlchemy.
"""

import logging
from datetime import timezone

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from app.core.exceptions import (
    AvatarAlreadyExistsException,
    AvatarNotFoundException,
    StoreException,
)
from app.db.base import Base
from app.db.session import build_engine, build_session_factory
from app.models.avatar import Avatar
from app.schemas.avatar import AvatarData, AvatarRecord
from app.stores.base import AvatarStore, new_avatar_id, utcnow

logger = logging.getLogger(__name__)


class DatabaseAvatarStore(AvatarStore):
    """
    Database-backed avatar store.

    Each operation runs in its own transaction. The unique index on
    user_id backs the one-record-per-user rule when two creates race.
    """

    name = "database"

    def __init__(
        self,
        database_url: str | None = None,
        engine: AsyncEngine | None = None,
        echo: bool = False,
    ):
        """
        Initialize the database store.

        Args:
            database_url: SQLAlchemy async URL (ignored when engine is given)
            engine: Existing async engine to use
            echo: Log emitted SQL
        """
        if engine is None:
            if not database_url:
                raise StoreException(
                    message="Database URL not configured",
                    details={"required": "DATABASE_URL"},
                )
            engine = build_engine(database_url, echo=echo)

        self.engine = engine
        self._session_factory = build_session_factory(engine)

    async def init_schema(self) -> None:
        """Create the avatars table if it does not exist."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def create(self, user_id: str, data: AvatarData) -> AvatarRecord:
        now = utcnow()
        try:
            async with self._session_factory.begin() as session:
                if await self._find(session, user_id) is not None:
                    raise AvatarAlreadyExistsException(user_id)

                row = Avatar(
                    id=new_avatar_id(),
                    user_id=user_id,
                    avatar_type=data.avatar_type,
                    avatar_url=data.avatar_url,
                    gender=data.gender,
                    is_active=True,
                    created_at=now,
                    updated_at=now,
                )
                session.add(row)
                await session.flush()
                record = self._to_record(row)
        except IntegrityError as e:
            raise AvatarAlreadyExistsException(user_id) from e
        except SQLAlchemyError as e:
            raise StoreException(message=f"Failed to create avatar: {e}") from e

        logger.info(f"Avatar record created for user: {user_id}")
        return record

    async def get(self, user_id: str) -> AvatarRecord | None:
        try:
            async with self._session_factory() as session:
                row = await self._find(session, user_id)
                return self._to_record(row) if row else None
        except SQLAlchemyError as e:
            raise StoreException(message=f"Failed to fetch avatar: {e}") from e

    async def update(self, user_id: str, data: AvatarData) -> AvatarRecord:
        try:
            async with self._session_factory.begin() as session:
                row = await self._find(session, user_id, for_update=True)
                if row is None:
                    raise AvatarNotFoundException(user_id)

                self._apply(row, data)
                await session.flush()
                record = self._to_record(row)
        except SQLAlchemyError as e:
            raise StoreException(message=f"Failed to update avatar: {e}") from e

        logger.info(f"Avatar record updated for user: {user_id}")
        return record

    async def delete(self, user_id: str) -> bool:
        try:
            async with self._session_factory.begin() as session:
                row = await self._find(session, user_id, for_update=True)
                if row is None:
                    return False

                row.is_active = False
                row.updated_at = utcnow()
        except SQLAlchemyError as e:
            raise StoreException(message=f"Failed to delete avatar: {e}") from e

        logger.info(f"Avatar deleted for user: {user_id}")
        return True

    async def restore(self, user_id: str, data: AvatarData) -> AvatarRecord:
        try:
            async with self._session_factory.begin() as session:
                row = await self._find(session, user_id, for_update=True)
                if row is None:
                    raise AvatarNotFoundException(user_id)
                if row.is_active:
                    raise AvatarAlreadyExistsException(user_id)

                self._apply(row, data)
                row.is_active = True
                await session.flush()
                record = self._to_record(row)
        except SQLAlchemyError as e:
            raise StoreException(message=f"Failed to restore avatar: {e}") from e

        logger.info(f"Avatar record restored for user: {user_id}")
        return record

    async def close(self) -> None:
        await self.engine.dispose()

    async def _find(
        self,
        session: AsyncSession,
        user_id: str,
        for_update: bool = False,
    ) -> Avatar | None:
        query = select(Avatar).where(Avatar.user_id == user_id)
        if for_update:
            query = query.with_for_update()
        result = await session.execute(query)
        return result.scalar_one_or_none()

    @staticmethod
    def _apply(row: Avatar, data: AvatarData) -> None:
        row.avatar_type = data.avatar_type
        if data.avatar_url:
            row.avatar_url = data.avatar_url
        if data.gender:
            row.gender = data.gender
        row.updated_at = utcnow()

    @staticmethod
    def _to_record(row: Avatar) -> AvatarRecord:
        record = AvatarRecord.model_validate(row)
        # SQLite drops tzinfo on DateTime(timezone=True) columns
        for field in ("created_at", "updated_at"):
            value = getattr(record, field)
            if value.tzinfo is None:
                setattr(record, field, value.replace(tzinfo=timezone.utc))
        return record
