"""
SQLAlchemy ORM models and enumerations for the Avatar Registry API.
"""

from app.models.avatar import Avatar, AvatarType, Gender

__all__ = [
    "Avatar",
    "AvatarType",
    "Gender",
]
