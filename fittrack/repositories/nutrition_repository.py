from datetime import date
from typing import List, Optional

from sqlalchemy import select, func

from fittrack.models.nutrition import FoodItem, NutritionLog
from fittrack.repositories.base import BaseRepository


class NutritionRepository(BaseRepository):
    async def get_log(self, day: date) -> Optional[NutritionLog]:
        return await self._scalar_one_or_none(select(NutritionLog).where(NutritionLog.date == day))

    async def create_log(self, log: NutritionLog) -> NutritionLog:
        self.add(log)
        await self.commit()
        return log

    async def save(self, *instances) -> None:
        await self.commit(restore=instances)

    async def search_foods(self, query: str) -> List[FoodItem]:
        # % и _ во вводе ищутся как обычные символы
        escaped = query.lower().replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
        return await self._scalars(
            select(FoodItem)
            .where(func.lower(FoodItem.name).like(f"%{escaped}%", escape="\\"))
            .order_by(FoodItem.name.asc())
        )

    async def recent_foods(self, limit: int) -> List[FoodItem]:
        return await self._scalars(
            select(FoodItem).order_by(FoodItem.created_at.desc(), FoodItem.id.desc()).limit(limit)
        )

    async def create_food(self, food: FoodItem) -> FoodItem:
        self.add(food)
        await self.commit()
        return food
