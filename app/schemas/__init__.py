"""Pydantic schemas for request/response validation."""

from app.schemas.avatar import (
    AvatarCreate,
    AvatarData,
    AvatarPreset,
    AvatarRecord,
    AvatarUpdate,
)

__all__ = [
    "AvatarCreate",
    "AvatarData",
    "AvatarPreset",
    "AvatarRecord",
    "AvatarUpdate",
]
