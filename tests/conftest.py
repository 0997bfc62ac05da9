"""
Общие фикстуры для тестов FitTrack.

Стратегия:
- Модульные тесты работают с объектами моделей в памяти (без flush в БД),
  репозитории заменяются на AsyncMock(spec=...).
- Таймеры тренировки подменяются ManualTicker: время идёт только по advance().
- Интеграционные тесты получают отдельную in-memory SQLite (aiosqlite + StaticPool)
  со свежей схемой на каждый тест.
"""

import pytest
from datetime import datetime
from typing import AsyncGenerator
from unittest.mock import AsyncMock

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from fittrack.core.database import init_database
from fittrack.models.program import WorkoutProgram, WorkoutDay, WorkoutExercise
from fittrack.models.user import UserProfile
from fittrack.repositories.program_repository import ProgramRepository
from fittrack.repositories.workout_log_repository import WorkoutLogRepository, PersonalRecordRepository
from fittrack.schemas.exercise import ExerciseCategory
from fittrack.schemas.profile import GoalEnum, ExperienceLevelEnum

# Среда, 18 марта 2026
FIXED_NOW = datetime(2026, 3, 18, 10, 0, 0)


# ---------------------------------------------------------------------------
# Вспомогательные функции
# ---------------------------------------------------------------------------

def make_day(name: str, day_number: int, exercises) -> WorkoutDay:
    """exercises: список (exercise_id, sets, rest_seconds)."""
    day = WorkoutDay(name=name, day_number=day_number, focus=ExerciseCategory.full_body)
    for order_index, (exercise_id, sets, rest_seconds) in enumerate(exercises):
        day.exercises.append(WorkoutExercise(
            exercise_id=exercise_id,
            exercise_name=exercise_id.replace("_", " ").title(),
            sets=sets,
            rep_min=8,
            rep_max=12,
            rest_seconds=rest_seconds,
            order_index=order_index,
        ))
    return day


def make_program(days_per_week: int = 3, duration_weeks: int = 4) -> WorkoutProgram:
    program = WorkoutProgram(
        name="Test Program",
        duration_weeks=duration_weeks,
        days_per_week=days_per_week,
        goal=GoalEnum.build_muscle,
        level=ExperienceLevelEnum.beginner,
    )
    for number in range(1, days_per_week + 1):
        program.days.append(make_day(
            f"Day {number}",
            number,
            [("barbell_bench_press", 2, 60), ("dumbbell_curl", 1, 0)],
        ))
    return program


# ---------------------------------------------------------------------------
# Доменные фикстуры
# ---------------------------------------------------------------------------

@pytest.fixture
def now():
    return lambda: FIXED_NOW


@pytest.fixture
def program() -> WorkoutProgram:
    """Программа 3 дня x 4 недели, в каждом дне жим 2x(отдых 60с) и сгибания 1x(без отдыха)."""
    return make_program()


@pytest.fixture
def day(program) -> WorkoutDay:
    return program.days[0]


@pytest.fixture
def profile() -> UserProfile:
    return UserProfile(
        name="Alex",
        age=30,
        height_cm=180,
        weight_kg=80,
        goal=GoalEnum.build_muscle,
        experience_level=ExperienceLevelEnum.beginner,
        days_per_week=4,
    )


# ---------------------------------------------------------------------------
# Моки репозиториев
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_workouts() -> AsyncMock:
    """WorkoutLogRepository без истории."""
    repo = AsyncMock(spec=WorkoutLogRepository)
    repo.list_recent.return_value = []
    repo.list_chronological.return_value = []
    repo.count.return_value = 0
    repo.total_volume.return_value = 0.0
    repo.save_finished.side_effect = lambda log, records=(), restore=(): log
    return repo


@pytest.fixture
def mock_records() -> AsyncMock:
    """PersonalRecordRepository без рекордов."""
    repo = AsyncMock(spec=PersonalRecordRepository)
    repo.get_map.return_value = {}
    repo.list_all.return_value = []
    repo.count.return_value = 0
    return repo


@pytest.fixture
def mock_programs() -> AsyncMock:
    repo = AsyncMock(spec=ProgramRepository)
    repo.list_active.return_value = []
    repo.get_active.return_value = None
    return repo


# ---------------------------------------------------------------------------
# База данных для интеграционных тестов
# ---------------------------------------------------------------------------

@pytest.fixture
async def engine():
    test_engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await init_database(test_engine, reset=True)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
async def db(engine) -> AsyncGenerator[AsyncSession, None]:
    session_factory = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session


@pytest.fixture
def program_factory():
    return make_program


@pytest.fixture
def day_factory():
    return make_day
