"""
Tests for the in-memory avatar store.
"""

import asyncio

import pytest

from app.core.exceptions import AvatarAlreadyExistsException, AvatarNotFoundException
from app.models.avatar import AvatarType, Gender
from app.schemas.avatar import AvatarData
from app.stores.memory import MemoryAvatarStore


def make_data(avatar_type=AvatarType.MALE1, url="http://x/a.glb", gender=Gender.MALE) -> AvatarData:
    return AvatarData(avatar_type=avatar_type, avatar_url=url, gender=gender)


class TestMemoryAvatarStore:
    """Tests for the dict-backed store."""

    @pytest.fixture
    def store(self, clock) -> MemoryAvatarStore:
        return MemoryAvatarStore(clock=clock)

    @pytest.mark.asyncio
    async def test_create_then_get(self, store: MemoryAvatarStore):
        """A created record is returned by get with the same fields."""
        created = await store.create("u1", make_data())

        fetched = await store.get("u1")

        assert fetched == created
        assert fetched.user_id == "u1"
        assert fetched.avatar_type == AvatarType.MALE1
        assert fetched.avatar_url == "http://x/a.glb"
        assert fetched.gender == Gender.MALE
        assert fetched.is_active is True
        assert fetched.created_at == fetched.updated_at

    @pytest.mark.asyncio
    async def test_get_missing(self, store: MemoryAvatarStore):
        assert await store.get("nobody") is None

    @pytest.mark.asyncio
    async def test_create_twice_fails(self, store: MemoryAvatarStore):
        await store.create("u1", make_data())

        with pytest.raises(AvatarAlreadyExistsException):
            await store.create("u1", make_data(AvatarType.MALE2))

    @pytest.mark.asyncio
    async def test_create_after_delete_fails(self, store: MemoryAvatarStore):
        """Existence, not the active flag, blocks a create."""
        await store.create("u1", make_data())
        await store.delete("u1")

        with pytest.raises(AvatarAlreadyExistsException):
            await store.create("u1", make_data())

    @pytest.mark.asyncio
    async def test_concurrent_creates(self, store: MemoryAvatarStore):
        """Only one of two racing creates for a user succeeds."""
        results = await asyncio.gather(
            store.create("u1", make_data()),
            store.create("u1", make_data(AvatarType.MALE3)),
            return_exceptions=True,
        )

        failures = [r for r in results if isinstance(r, AvatarAlreadyExistsException)]
        assert len(failures) == 1

    @pytest.mark.asyncio
    async def test_update(self, store: MemoryAvatarStore):
        """Update overwrites mutable fields and preserves identity."""
        created = await store.create("u1", make_data())

        updated = await store.update(
            "u1",
            make_data(AvatarType.FEMALE1, "http://x/b.glb", Gender.FEMALE),
        )

        assert updated.id == created.id
        assert updated.created_at == created.created_at
        assert updated.updated_at > created.updated_at
        assert updated.avatar_type == AvatarType.FEMALE1
        assert updated.avatar_url == "http://x/b.glb"
        assert updated.gender == Gender.FEMALE
        assert updated.is_active is True
        assert await store.get("u1") == updated

    @pytest.mark.asyncio
    async def test_update_keeps_omitted_fields(self, store: MemoryAvatarStore):
        await store.create("u1", make_data())

        updated = await store.update("u1", AvatarData(avatar_type=AvatarType.MALE2))

        assert updated.avatar_type == AvatarType.MALE2
        assert updated.avatar_url == "http://x/a.glb"
        assert updated.gender == Gender.MALE

    @pytest.mark.asyncio
    async def test_update_missing(self, store: MemoryAvatarStore):
        with pytest.raises(AvatarNotFoundException):
            await store.update("nobody", make_data())

    @pytest.mark.asyncio
    async def test_update_preserves_inactive_flag(self, store: MemoryAvatarStore):
        await store.create("u1", make_data())
        await store.delete("u1")

        updated = await store.update("u1", make_data(AvatarType.MALE2))

        assert updated.is_active is False

    @pytest.mark.asyncio
    async def test_delete(self, store: MemoryAvatarStore):
        """Delete is logical: the record stays readable and inactive."""
        created = await store.create("u1", make_data())

        assert await store.delete("u1") is True

        record = await store.get("u1")
        assert record is not None
        assert record.is_active is False
        assert record.id == created.id
        assert record.updated_at > created.updated_at

    @pytest.mark.asyncio
    async def test_delete_missing(self, store: MemoryAvatarStore):
        assert await store.delete("nobody") is False

    @pytest.mark.asyncio
    async def test_restore(self, store: MemoryAvatarStore):
        created = await store.create("u1", make_data())
        await store.delete("u1")

        restored = await store.restore("u1", make_data(AvatarType.FEMALE2, gender=Gender.FEMALE))

        assert restored.is_active is True
        assert restored.id == created.id
        assert restored.avatar_type == AvatarType.FEMALE2

    @pytest.mark.asyncio
    async def test_restore_active_fails(self, store: MemoryAvatarStore):
        await store.create("u1", make_data())

        with pytest.raises(AvatarAlreadyExistsException):
            await store.restore("u1", make_data())

    @pytest.mark.asyncio
    async def test_restore_missing_fails(self, store: MemoryAvatarStore):
        with pytest.raises(AvatarNotFoundException):
            await store.restore("nobody", make_data())

    @pytest.mark.asyncio
    async def test_returned_records_are_copies(self, store: MemoryAvatarStore):
        """Mutating a returned record does not change stored state."""
        record = await store.create("u1", make_data())
        record.avatar_url = "http://evil/x.glb"

        assert (await store.get("u1")).avatar_url == "http://x/a.glb"
