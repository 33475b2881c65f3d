"""
Response utilities for the Avatar Registry API.
Every outcome, success or failure, is wrapped in the same envelope.
"""

from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def build_envelope(data: Any, error: bool, message: str) -> dict[str, Any]:
    """
    Build the standard response envelope.

    Args:
        data: Response payload (None for errors and deletions)
        error: Whether this is an error response
        message: Human-readable message

    Returns:
        Dict with data, error and message keys
    """
    return {
        "data": data,
        "error": error,
        "message": message,
    }


def envelope_response(
    data: Any,
    message: str,
    status_code: int = 200,
    error: bool = False,
) -> JSONResponse:
    """
    Create a JSONResponse carrying the standard envelope.

    Args:
        data: Response payload, encoded with FastAPI's jsonable_encoder
        message: Human-readable message
        status_code: HTTP status code (default 200)
        error: Whether this is an error response

    Returns:
        JSONResponse with envelope payload
    """
    return JSONResponse(
        status_code=status_code,
        content=build_envelope(jsonable_encoder(data), error, message),
    )


def create_error_response(message: str, status_code: int) -> JSONResponse:
    """Create an error envelope response with a null payload."""
    return envelope_response(None, message, status_code=status_code, error=True)
