import logging
from typing import Optional

from fittrack.core.exceptions import ProfileExistsError
from fittrack.models.user import UserProfile
from fittrack.repositories.profile_repository import ProfileRepository
from fittrack.schemas.nutrition import MacroTargets
from fittrack.schemas.profile import ProfileCreate, ProfileUpdate
from fittrack.services.metrics import FitnessCalculator

logger = logging.getLogger(__name__)


class ProfileService:
    def __init__(self, repo: ProfileRepository):
        self.repo = repo

    async def get_profile(self) -> Optional[UserProfile]:
        return await self.repo.get()

    async def onboard(self, data: ProfileCreate) -> UserProfile:
        """Создать единственный профиль пользователя"""
        if await self.repo.count() > 0:
            raise ProfileExistsError("Profile already exists")

        profile = UserProfile(**data.model_dump(mode="json"))
        profile = await self.repo.create(profile)
        logger.info("Профиль создан: %s", profile.name)
        return profile

    async def update_profile(self, data: ProfileUpdate) -> Optional[UserProfile]:
        profile = await self.repo.get()
        if profile is None:
            return None

        # Обновляем только переданные поля
        update_data = data.model_dump(exclude_unset=True, mode="json")
        for field, value in update_data.items():
            setattr(profile, field, value)
        return await self.repo.save(profile)

    async def macro_targets(self) -> Optional[MacroTargets]:
        profile = await self.repo.get()
        if profile is None:
            return None
        return FitnessCalculator.macro_targets(profile)
