"""
Avatar SQLAlchemy model and preset enumerations.
"""

import enum
from datetime import datetime

from sqlalchemy import Boolean, DateTime, Enum, String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Gender(str, enum.Enum):
    """Avatar gender."""
    MALE = "male"
    FEMALE = "female"


class AvatarType(str, enum.Enum):
    """
    Preset avatar variants.
    Each preset belongs to exactly one gender.
    """
    MALE1 = "male1"
    MALE2 = "male2"
    MALE3 = "male3"
    FEMALE1 = "female1"
    FEMALE2 = "female2"

    @property
    def gender(self) -> Gender:
        """Gender the preset is modelled for."""
        if self.value.startswith("female"):
            return Gender.FEMALE
        return Gender.MALE

    def default_url(self, base_url: str) -> str:
        """Default GLB asset URL for the preset under base_url."""
        return f"{base_url.rstrip('/')}/{self.value}.glb"


class Avatar(Base):
    """
    Avatar record table used by the database store.

    One row per external user id; deletion only clears is_active.
    """
    __tablename__ = "avatars"

    id: Mapped[str] = mapped_column(
        String(64),
        primary_key=True,
        comment="Avatar record identifier",
    )
    user_id: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="External Active Directory user id",
    )
    avatar_type: Mapped[AvatarType] = mapped_column(
        Enum(AvatarType),
        nullable=False,
        comment="Preset avatar variant",
    )
    avatar_url: Mapped[str] = mapped_column(
        String(2048),
        nullable=False,
        comment="URL of the renderable GLB asset",
    )
    gender: Mapped[Gender] = mapped_column(
        Enum(Gender),
        nullable=False,
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        comment="False once logically deleted",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Avatar(user_id={self.user_id}, avatar_type={self.avatar_type})>"
