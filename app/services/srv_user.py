import logging

from fastapi import Depends
from starlette import status

from app.core.config import settings
from app.helpers.exception_handler import CustomException
from app.models.model_user import UserProfile
from app.repository.repo_user import UserRepository
from app.schemas.sche_user import UserProfileUpdateRequest

logger = logging.getLogger(__name__)


def level_for_xp(xp: int) -> int:
    return xp // settings.XP_PER_LEVEL + 1


def award_xp(profile: UserProfile, xp: int) -> None:
    """Add XP for one completed task and recompute the level. Caller commits."""
    profile.xp = (profile.xp or 0) + xp
    profile.tasks_completed = (profile.tasks_completed or 0) + 1
    profile.level = level_for_xp(profile.xp)


class UserService:
    def __init__(self, user_repo: UserRepository = Depends()):
        self.user_repo = user_repo

    def get_profile(self, user_id: str) -> UserProfile:
        profile = self.user_repo.get_by_id(user_id)
        if not profile:
            raise CustomException(http_code=status.HTTP_404_NOT_FOUND, message="User profile not found")
        return profile

    def upsert_profile(self, user_id: str, data: UserProfileUpdateRequest) -> UserProfile:
        """Save onboarding answers; a first save creates the profile at level 1 with 0 XP."""
        profile = self.user_repo.get_by_id(user_id)
        fields = data.model_dump()

        if profile is None:
            profile = UserProfile(
                user_id=user_id,
                xp=0,
                level=1,
                tasks_completed=0,
                streak=0,
                onboarding_completed=True,
                **fields
            )
            logger.info(f"Creating profile for user {user_id}")
            return self.user_repo.create(profile)

        for key, value in fields.items():
            setattr(profile, key, value)
        profile.onboarding_completed = True
        logger.info(f"Updating profile for user {user_id}")
        return self.user_repo.update(profile)
