"""
Сервис питания: дневные журналы, добавление продуктов, прогресс по БЖУ
"""
import logging
from datetime import date, datetime
from typing import Callable, List, Optional

from fittrack.core.config import settings
from fittrack.models.nutrition import FoodItem, NutritionLog, NutritionEntry
from fittrack.repositories.nutrition_repository import NutritionRepository
from fittrack.schemas.nutrition import FoodItemCreate, MealTypeEnum, NutritionTotals

logger = logging.getLogger(__name__)


class NutritionService:
    def __init__(self, repo: NutritionRepository, now: Callable[[], datetime] = datetime.now):
        self.repo = repo
        self._now = now

    async def log_for_date(self, day: date) -> Optional[NutritionLog]:
        if isinstance(day, datetime):
            day = day.date()
        return await self.repo.get_log(day)

    async def today_log(self) -> NutritionLog:
        """Журнал за сегодня; создаётся при первом обращении"""
        today = self._now().date()
        existing = await self.repo.get_log(today)
        if existing is not None:
            return existing
        return await self.repo.create_log(NutritionLog(date=today))

    async def add_food(
            self,
            food: FoodItem,
            log: NutritionLog,
            servings: float = 1.0,
            meal_type: MealTypeEnum = MealTypeEnum.breakfast,
    ) -> NutritionEntry:
        if servings <= 0:
            raise ValueError("servings must be positive")
        entry = NutritionEntry.from_food(food, meal_type, servings)
        log.entries.append(entry)
        await self.repo.save(log)
        return entry

    async def remove_entry(self, entry: NutritionEntry, log: NutritionLog) -> None:
        # delete-orphan удалит запись при коммите
        log.entries.remove(entry)
        await self.repo.save(log)

    async def create_custom_food(self, data: FoodItemCreate) -> FoodItem:
        food = FoodItem(**data.model_dump(), is_custom=True)
        await self.repo.create_food(food)
        logger.info("Создан пользовательский продукт: %s", food.name)
        return food

    async def search_foods(self, query: str) -> List[FoodItem]:
        query = query.strip()
        if not query:
            return []
        return await self.repo.search_foods(query)

    async def recent_foods(self) -> List[FoodItem]:
        return await self.repo.recent_foods(settings.RECENT_FOODS_LIMIT)

    @staticmethod
    def totals(log: NutritionLog) -> NutritionTotals:
        return NutritionTotals(
            calories=log.total_calories,
            protein_g=log.total_protein_g,
            carbs_g=log.total_carbs_g,
            fat_g=log.total_fat_g,
            fiber_g=log.total_fiber_g,
        )

    @staticmethod
    def calorie_progress(log: NutritionLog, target: int) -> float:
        if target <= 0:
            return 0.0
        return min(log.total_calories / target, 1.0)

    @staticmethod
    def macro_progress(current: float, target: int) -> float:
        if target <= 0:
            return 0.0
        return min(current / target, 1.0)

    @staticmethod
    def remaining_calories(log: NutritionLog, target: int) -> float:
        return target - log.total_calories
