"""
Pydantic schemas for Avatar request/response validation.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.models.avatar import AvatarType, Gender


class AvatarCreate(BaseModel):
    """
    Request body for creating an avatar.

    Presence of adUserId and avatar is checked by the endpoint so that
    missing input is reported with a single bad-request message.
    """

    ad_user_id: str | None = Field(default=None, alias="adUserId")
    avatar: AvatarType | None = Field(
        default=None,
        description="Preset avatar variant",
        examples=["male1", "female2"],
    )
    avatar_url: str | None = Field(
        default=None,
        alias="avatarUrl",
        description="GLB model URL; defaults to the preset asset",
    )
    gender: Gender | None = Field(
        default=None,
        description="Defaults to the preset's gender",
    )

    model_config = ConfigDict(populate_by_name=True)


class AvatarUpdate(BaseModel):
    """Request body for updating an avatar. Omitted optional fields are kept."""

    avatar: AvatarType | None = None
    avatar_url: str | None = Field(default=None, alias="avatarUrl")
    gender: Gender | None = None

    model_config = ConfigDict(populate_by_name=True)


class AvatarData(BaseModel):
    """
    Mutable avatar fields handed to a store.

    On create every field is resolved; on update a None field keeps
    the stored value.
    """

    avatar_type: AvatarType
    avatar_url: str | None = None
    gender: Gender | None = None


class AvatarRecord(BaseModel):
    """A stored avatar record, serialized with camelCase keys."""

    id: str
    user_id: str = Field(alias="userId")
    avatar_type: AvatarType = Field(alias="avatarType")
    avatar_url: str = Field(alias="avatarUrl")
    gender: Gender
    is_active: bool = Field(default=True, alias="isActive")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )


class AvatarPreset(BaseModel):
    """A preset avatar variant and its default asset."""

    avatar_type: AvatarType = Field(alias="avatarType")
    gender: Gender
    avatar_url: str = Field(alias="avatarUrl")

    model_config = ConfigDict(populate_by_name=True)
