"""
Avatar store abstraction layer.
Supports multiple backends: in-memory, SQL database, remote avatar API.
"""

from app.stores.base import AvatarStore
from app.stores.memory import MemoryAvatarStore
from app.stores.database import DatabaseAvatarStore
from app.stores.http import HttpAvatarStore
from app.stores.factory import get_avatar_store_backend, get_store

__all__ = [
    "AvatarStore",
    "MemoryAvatarStore",
    "DatabaseAvatarStore",
    "HttpAvatarStore",
    "get_avatar_store_backend",
    "get_store",
]
