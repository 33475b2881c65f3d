"""
Health endpoint.
No dependencies on the store state; reports liveness and the configured backend.
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.core.responses import envelope_response
from app.dependencies import AppSettings

router = APIRouter()


@router.get("/health")
async def health_check(settings: AppSettings) -> JSONResponse:
    """
    Service health check endpoint.

    Returns:
        Envelope with {"status": "ok", "store": <configured backend>}
    """
    return envelope_response(
        {"status": "ok", "store": settings.AVATAR_STORE_BACKEND},
        "Server is running",
    )
