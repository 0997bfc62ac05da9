from typing import Optional

from sqlalchemy import select, func

from fittrack.models.user import UserProfile
from fittrack.repositories.base import BaseRepository


class ProfileRepository(BaseRepository):
    async def get(self) -> Optional[UserProfile]:
        """Единственный профиль на устройстве (или None до онбординга)."""
        return await self._scalar_one_or_none(select(UserProfile).order_by(UserProfile.id).limit(1))

    async def count(self) -> int:
        return await self._scalar(select(func.count(UserProfile.id)))

    async def create(self, profile: UserProfile) -> UserProfile:
        self.add(profile)
        await self.commit()
        await self.refresh(profile)
        return profile

    async def save(self, profile: UserProfile) -> UserProfile:
        await self.commit(restore=[profile])
        return profile
