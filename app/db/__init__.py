"""Database module for the Avatar Registry API."""

from app.db.base import Base
from app.db.session import build_engine, build_session_factory, resolve_database_url

__all__ = ["Base", "build_engine", "build_session_factory", "resolve_database_url"]
