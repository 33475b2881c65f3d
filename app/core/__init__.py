"""Core utilities and exceptions for the Avatar Registry API."""

from app.core.exceptions import (
    AvatarAPIException,
    AvatarAlreadyExistsException,
    AvatarNotFoundException,
    BadRequestException,
    StoreException,
)
from app.core.responses import build_envelope, create_error_response, envelope_response

__all__ = [
    "AvatarAPIException",
    "AvatarAlreadyExistsException",
    "AvatarNotFoundException",
    "BadRequestException",
    "StoreException",
    "build_envelope",
    "create_error_response",
    "envelope_response",
]
