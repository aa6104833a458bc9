"""Router for the authenticated user's own profile."""

import logging

from fastapi import APIRouter, status

from warden_api.dependencies import CurrentUserId, DBSession, ProfileService
from warden_api.schemas import (
    ErrorResponse,
    StatusResponse,
    UserPatchRequest,
    UserResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/me",
    summary="Get current user",
    responses={
        200: {"description": "Current user profile"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        404: {"model": ErrorResponse, "description": "User no longer exists"},
    },
)
async def get_me(
    user_id: CurrentUserId,
    profile_service: ProfileService,
) -> UserResponse:
    user = await profile_service.get_user(user_id)
    return UserResponse.from_user(user)


@router.patch(
    "/me",
    summary="Update profile fields",
    responses={
        200: {"description": "Updated profile"},
        400: {"model": ErrorResponse, "description": "No fields to update"},
        409: {"model": ErrorResponse, "description": "Username already taken"},
    },
)
async def patch_me(
    request: UserPatchRequest,
    user_id: CurrentUserId,
    profile_service: ProfileService,
    session: DBSession,
) -> UserResponse:
    """
    Change any of name, surname, username and phone number.

    Omitted or empty fields keep their current value.
    """
    user = await profile_service.patch_user(user_id, request.to_patch())
    await session.commit()
    return UserResponse.from_user(user)


@router.delete(
    "/me",
    status_code=status.HTTP_200_OK,
    summary="Delete current user",
)
async def delete_me(
    user_id: CurrentUserId,
    profile_service: ProfileService,
    session: DBSession,
) -> StatusResponse:
    await profile_service.delete_user(user_id)
    await session.commit()
    return StatusResponse()
