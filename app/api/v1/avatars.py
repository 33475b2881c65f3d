"""
Avatar endpoints.
One avatar record per user, addressed by the external adUserId.
"""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.core.exceptions import BadRequestException
from app.core.responses import envelope_response
from app.dependencies import Avatars
from app.schemas.avatar import AvatarCreate, AvatarUpdate

logger = logging.getLogger(__name__)

router = APIRouter()

MISSING_USER_ID = "Bad request: Missing adUserId"


def _require_user_id(ad_user_id: str | None, message: str = MISSING_USER_ID) -> str:
    """Reject absent or blank user ids."""
    if not ad_user_id or not ad_user_id.strip():
        logger.warning("Bad request: Missing adUserId")
        raise BadRequestException(message)
    return ad_user_id


@router.post("/avatar", status_code=201)
async def create_avatar(payload: AvatarCreate, avatars: Avatars) -> JSONResponse:
    """
    Create the avatar for a user.

    Requires adUserId and avatar. avatarUrl and gender default to the
    preset's asset and gender. Fails with 400 if the user already has one.
    """
    message = "Bad request: Missing adUserId or avatar"
    ad_user_id = _require_user_id(payload.ad_user_id, message)
    if payload.avatar is None:
        logger.warning("Bad request: Missing required fields")
        raise BadRequestException(message)

    record = await avatars.create(
        ad_user_id,
        payload.avatar,
        avatar_url=payload.avatar_url,
        gender=payload.gender,
    )

    logger.info(f"Avatar created successfully for user: {ad_user_id}")
    return envelope_response(record, "Avatar created successfully", status_code=201)


@router.get("/avatar/{ad_user_id}")
async def get_avatar(ad_user_id: str, avatars: Avatars) -> JSONResponse:
    """Get the avatar for a user."""
    _require_user_id(ad_user_id)

    record = await avatars.get(ad_user_id)
    return envelope_response(record, "Avatar retrieved successfully")


@router.put("/avatar/{ad_user_id}")
async def update_avatar(ad_user_id: str, payload: AvatarUpdate, avatars: Avatars) -> JSONResponse:
    """
    Update the avatar for a user.

    Requires avatar; avatarUrl and gender keep their stored values when
    omitted.
    """
    message = "Bad request: Missing required fields"
    _require_user_id(ad_user_id, message)
    if payload.avatar is None:
        logger.warning(message)
        raise BadRequestException(message)

    record = await avatars.update(
        ad_user_id,
        payload.avatar,
        avatar_url=payload.avatar_url,
        gender=payload.gender,
    )

    logger.info(f"Avatar updated successfully for user: {ad_user_id}")
    return envelope_response(record, "Avatar updated successfully")


@router.delete("/avatar/{ad_user_id}")
async def delete_avatar(ad_user_id: str, avatars: Avatars) -> JSONResponse:
    """Logically delete the avatar for a user. The record stays stored as inactive."""
    _require_user_id(ad_user_id)

    await avatars.delete(ad_user_id)

    logger.info(f"Avatar deleted successfully for user: {ad_user_id}")
    return envelope_response(None, "Avatar deleted successfully")


@router.api_route("/avatar", methods=["GET", "PUT", "DELETE"], include_in_schema=False)
async def avatar_without_user_id() -> JSONResponse:
    """Calls that address an avatar but carry no user id."""
    logger.warning("Bad request: Missing adUserId")
    raise BadRequestException(MISSING_USER_ID)


@router.get("/avatars/presets")
async def list_avatar_presets(avatars: Avatars) -> JSONResponse:
    """
    List preset avatars.

    Returns every avatar type with its gender and default asset URL.
    """
    presets = avatars.list_presets()
    return envelope_response(presets, "Avatar presets retrieved successfully")
