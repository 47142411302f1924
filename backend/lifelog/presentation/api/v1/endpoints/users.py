"""Profile endpoints for the authenticated user."""

from fastapi import APIRouter, Depends

from lifelog.application.schemas import ApiResponse, UserProfileUpdate, UserResponse
from lifelog.application.services import UserService
from lifelog.infrastructure.dependencies import get_current_user_id, get_user_service
from lifelog.presentation.api.responses import success

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("/me", response_model=ApiResponse)
async def get_profile(
    user_id: str = Depends(get_current_user_id),
    service: UserService = Depends(get_user_service),
) -> ApiResponse:
    """Return the caller's profile."""
    user = await service.get_profile(user_id)
    return success(UserResponse.model_validate(user, from_attributes=True))


@router.patch("/me", response_model=ApiResponse)
async def update_profile(
    data: UserProfileUpdate,
    user_id: str = Depends(get_current_user_id),
    service: UserService = Depends(get_user_service),
) -> ApiResponse:
    """Update the caller's display name and/or timezone."""
    user = await service.update_profile(user_id, data)
    return success(
        UserResponse.model_validate(user, from_attributes=True),
        "Profile updated successfully",
    )
