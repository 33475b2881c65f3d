"""
Business logic services for the Avatar Registry API.
Services handle core operations separate from API endpoints.
"""

from app.services.avatar_service import AvatarService

__all__ = [
    "AvatarService",
]
