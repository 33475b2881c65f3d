"""
Abstract avatar store interface.
Defines the contract for all avatar store implementations.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from uuid import uuid4

from app.schemas.avatar import AvatarData, AvatarRecord


class AvatarStore(ABC):
    """
    Abstract base class for avatar stores.

    A store holds at most one avatar record per user id. All
    implementations (memory, database, http) must perform each mutating
    operation as a single check-and-set so the uniqueness invariant holds
    under concurrent requests.
    """

    name: str = "abstract"

    @abstractmethod
    async def create(self, user_id: str, data: AvatarData) -> AvatarRecord:
        """
        Create the avatar record for a user.

        Args:
            user_id: External user id, the store key
            data: Fully resolved avatar fields

        Returns:
            The stored record, active, with both timestamps set to now

        Raises:
            AvatarAlreadyExistsException: If any record exists for user_id
        """
        pass

    @abstractmethod
    async def get(self, user_id: str) -> AvatarRecord | None:
        """
        Look up the record for a user, active or not.

        Returns:
            The stored record, or None when absent
        """
        pass

    @abstractmethod
    async def update(self, user_id: str, data: AvatarData) -> AvatarRecord:
        """
        Replace the mutable fields of an existing record.

        id, createdAt, isActive and the user id are preserved; fields left
        as None in data keep their stored value.

        Raises:
            AvatarNotFoundException: If no record exists for user_id
        """
        pass

    @abstractmethod
    async def delete(self, user_id: str) -> bool:
        """
        Logically delete a record by clearing its active flag.

        Returns:
            True if a record was marked inactive, False if none exists
        """
        pass

    @abstractmethod
    async def restore(self, user_id: str, data: AvatarData) -> AvatarRecord:
        """
        Reactivate an inactive record with new avatar fields.

        Raises:
            AvatarNotFoundException: If no record exists for user_id
            AvatarAlreadyExistsException: If the record is still active
        """
        pass

    async def close(self) -> None:
        """Release backend resources."""
        return None


def utcnow() -> datetime:
    """Timezone-aware current UTC time."""
    return datetime.now(timezone.utc)


def new_avatar_id() -> str:
    """Generate an opaque avatar record id."""
    return f"avatar_{uuid4().hex}"
