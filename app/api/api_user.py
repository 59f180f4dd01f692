from typing import Any

from fastapi import APIRouter, Depends

from app.schemas.sche_base import DataResponse
from app.schemas.sche_user import UserProfileResponse, UserProfileUpdateRequest
from app.services.srv_user import UserService

router = APIRouter()


@router.get('/{user_id}', response_model=DataResponse[UserProfileResponse])
def get_profile(user_id: str, user_service: UserService = Depends()) -> Any:
    profile = user_service.get_profile(user_id)
    return DataResponse().success_response(data=profile)


@router.put('/{user_id}/profile', response_model=DataResponse[UserProfileResponse])
def update_profile(user_id: str, profile_data: UserProfileUpdateRequest, user_service: UserService = Depends()) -> Any:
    """Onboarding: create or update the profile and mark onboarding completed."""
    profile = user_service.upsert_profile(user_id, profile_data)
    return DataResponse().success_response(data=profile)
