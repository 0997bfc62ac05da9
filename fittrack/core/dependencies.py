"""
Фабрики репозиториев и сервисов.
Всё собирается поверх одной AsyncSession, чтобы сервисы работали в общей транзакции
"""
from typing import Callable, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from fittrack.repositories.measurement_repository import MeasurementRepository
from fittrack.repositories.nutrition_repository import NutritionRepository
from fittrack.repositories.profile_repository import ProfileRepository
from fittrack.repositories.program_repository import ProgramRepository
from fittrack.repositories.workout_log_repository import WorkoutLogRepository, PersonalRecordRepository
from fittrack.services.analytics import ProgressService
from fittrack.services.nutrition_service import NutritionService
from fittrack.services.overload import ProgressiveOverloadAdvisor
from fittrack.services.profile_service import ProfileService
from fittrack.services.program_templates import ProgramTemplateRegistry
from fittrack.services.scheduler import ProgramScheduler
from fittrack.services.ticker import AsyncioTicker, Ticker
from fittrack.services.workout_session import WorkoutSession


def get_profile_service(db: AsyncSession) -> ProfileService:
    return ProfileService(ProfileRepository(db))


def get_scheduler(db: AsyncSession, templates: Optional[ProgramTemplateRegistry] = None) -> ProgramScheduler:
    return ProgramScheduler(ProgramRepository(db), templates or ProgramTemplateRegistry.default())


def get_overload_advisor(db: AsyncSession) -> ProgressiveOverloadAdvisor:
    return ProgressiveOverloadAdvisor(WorkoutLogRepository(db), PersonalRecordRepository(db))


def get_workout_session(
        db: AsyncSession,
        templates: Optional[ProgramTemplateRegistry] = None,
        ticker_factory: Callable[[], Ticker] = AsyncioTicker,
) -> WorkoutSession:
    """Сессия тренировки со всеми зависимостями на одной AsyncSession."""
    return WorkoutSession(
        advisor=get_overload_advisor(db),
        workouts=WorkoutLogRepository(db),
        scheduler=get_scheduler(db, templates),
        ticker_factory=ticker_factory,
    )


def get_progress_service(db: AsyncSession) -> ProgressService:
    return ProgressService(
        WorkoutLogRepository(db),
        PersonalRecordRepository(db),
        MeasurementRepository(db),
    )


def get_nutrition_service(db: AsyncSession) -> NutritionService:
    return NutritionService(NutritionRepository(db))
