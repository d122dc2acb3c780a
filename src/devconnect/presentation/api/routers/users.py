"""Users router: the authenticated user's own profile."""

from fastapi import APIRouter

from devconnect.presentation.api.dependencies import (
    CurrentUserContext,
    DBSession,
    ProfileServiceDep,
    commit_session,
)
from devconnect.presentation.api.schemas.common import (
    ErrorResponse,
    ValidationErrorResponse,
)
from devconnect.presentation.api.schemas.users import (
    UpdateProfileRequest,
    UserResponse,
)

router = APIRouter()


@router.get(
    "/me",
    summary="Get current user",
    responses={
        200: {"description": "Current user profile"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
    },
)
async def get_me(
    context: CurrentUserContext,
    profile_service: ProfileServiceDep,
) -> UserResponse:
    """Return the authenticated user's profile."""
    return UserResponse.from_user(profile_service.get_profile(context))


@router.patch(
    "/me",
    summary="Update current user's profile",
    responses={
        200: {"description": "Updated profile"},
        400: {"model": ValidationErrorResponse, "description": "Invalid input"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
    },
)
async def update_me(
    request: UpdateProfileRequest,
    context: CurrentUserContext,
    profile_service: ProfileServiceDep,
    session: DBSession,
) -> UserResponse:
    """
    Partially update the authenticated user's profile.

    Email and password cannot be changed through this endpoint.
    """
    user = await profile_service.update_profile(context, request.to_changes())
    await commit_session(session)

    return UserResponse.from_user(user)
