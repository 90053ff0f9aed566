from fastapi import APIRouter
from pydantic import BaseModel, Field

from mesto.core.modules.user.models import UserView
from mesto.web.deps import AppDep, AuthTokenDep
from mesto.web.openapi import ErrorResponse

router = APIRouter(tags=["users"])


class UpdateProfileRequest(BaseModel):
    """Request to change name and about of the current user."""

    name: str = Field(..., description="Display name, 2 to 30 characters")
    about: str = Field(..., description="Short bio, 2 to 30 characters")


class UpdateAvatarRequest(BaseModel):
    """Request to change avatar of the current user."""

    avatar: str = Field(..., description="Avatar URL")


@router.get(
    "/users",
    summary="List all users",
    description="Get all users in the system.",
    operation_id="listUsers",
    responses={
        200: {"description": "List of all users"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
    },
)
async def list_users(app: AppDep, auth_token: AuthTokenDep) -> list[UserView]:
    return await app.get_all_users(auth_token)


@router.get(
    "/users/me",
    summary="Get current user profile",
    description="Get the profile of the currently authenticated user.",
    operation_id="getCurrentUser",
    responses={
        200: {"description": "Current user profile"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        404: {"model": ErrorResponse, "description": "User no longer exists"},
    },
)
async def get_current_user(app: AppDep, auth_token: AuthTokenDep) -> UserView:
    return await app.get_current_user(auth_token)


@router.patch(
    "/users/me",
    summary="Update profile",
    description="Change name and about of the currently authenticated user.",
    operation_id="updateProfile",
    responses={
        200: {"description": "Updated profile"},
        400: {"model": ErrorResponse, "description": "Invalid user data"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        404: {"model": ErrorResponse, "description": "User not found"},
    },
)
async def update_profile(req: UpdateProfileRequest, app: AppDep, auth_token: AuthTokenDep) -> UserView:
    return await app.update_profile(auth_token, req.name, req.about)


@router.patch(
    "/users/me/avatar",
    summary="Update avatar",
    description="Change avatar URL of the currently authenticated user.",
    operation_id="updateAvatar",
    responses={
        200: {"description": "Updated profile"},
        400: {"model": ErrorResponse, "description": "Invalid avatar URL"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        404: {"model": ErrorResponse, "description": "User not found"},
    },
)
async def update_avatar(req: UpdateAvatarRequest, app: AppDep, auth_token: AuthTokenDep) -> UserView:
    return await app.update_avatar(auth_token, req.avatar)


@router.get(
    "/users/{user_id}",
    summary="Get user by ID",
    description="Get the profile of any user by ID.",
    operation_id="getUserById",
    responses={
        200: {"description": "User profile"},
        400: {"model": ErrorResponse, "description": "Malformed user ID"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        404: {"model": ErrorResponse, "description": "User not found"},
    },
)
async def get_user_by_id(user_id: str, app: AppDep, auth_token: AuthTokenDep) -> UserView:
    return await app.get_user_by_id(auth_token, user_id)
