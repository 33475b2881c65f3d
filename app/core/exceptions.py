"""
Custom exceptions for the Avatar Registry API.
Every exception renders to the standard {data, error, message} envelope.
"""

from typing import Any


class AvatarAPIException(Exception):
    """Base exception for all Avatar Registry API errors."""

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to an error envelope."""
        return {
            "data": None,
            "error": True,
            "message": self.message,
        }


class BadRequestException(AvatarAPIException):
    """400 - Missing or malformed request input."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            code="bad_request",
            message=message,
            status_code=400,
            details=details,
        )


class AvatarAlreadyExistsException(AvatarAPIException):
    """400 - An avatar record already exists for the user."""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(
            code="already_exists",
            message="Avatar already exists",
            status_code=400,
        )


class AvatarNotFoundException(AvatarAPIException):
    """404 - No avatar record for the user."""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(
            code="not_found",
            message="Avatar not found",
            status_code=404,
        )


class StoreException(AvatarAPIException):
    """500 - Avatar store backend error."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            code="store_error",
            message=message,
            status_code=500,
            details=details,
        )
