"""
API Router - Aggregates all avatar endpoints.
Base Path: /api
"""

from fastapi import APIRouter

from app.api.v1 import avatars

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(avatars.router, tags=["avatars"])
