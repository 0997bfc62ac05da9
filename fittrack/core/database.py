import logging

from sqlalchemy.ext.asyncio import AsyncEngine

from fittrack.core.base import Base
from fittrack.core.config import settings
from fittrack.core.db import engine as default_engine

# Импортируем ВСЕ модели, чтобы они попали в Base.metadata
from fittrack.models.user import UserProfile
from fittrack.models.program import WorkoutProgram, WorkoutDay, WorkoutExercise
from fittrack.models.workout_log import WorkoutLog, ExerciseSetLog, PersonalRecord
from fittrack.models.measurement import BodyMeasurement
from fittrack.models.nutrition import FoodItem, NutritionLog, NutritionEntry

logger = logging.getLogger(__name__)


async def init_database(engine: AsyncEngine = default_engine, reset: bool = None):
    """Инициализация базы данных"""
    if reset is None:
        reset = settings.RESET_DATABASE

    async with engine.begin() as conn:
        # Удаляем все таблицы если RESET_DATABASE=true
        if reset:
            logger.warning("RESET_DATABASE=true - пересоздаем БД")
            await conn.run_sync(Base.metadata.drop_all)

        await conn.run_sync(Base.metadata.create_all)
        logger.info("Таблицы БД созданы/проверены")
