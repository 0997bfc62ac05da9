"""
Модульные тесты для аналитики прогресса.

Покрываемые функции:
- current_streak: дни подряд с тренировкой, начиная с сегодня
- weekly_workout_count: недели с понедельника, от старых к новым
- volume_history / total_volume_lifted / total_workouts_completed
- ProgressService: загрузка через репозитории, замеры, сводка
"""

import pytest
from datetime import date, datetime, timedelta
from unittest.mock import AsyncMock

from fittrack.models.measurement import BodyMeasurement
from fittrack.models.workout_log import WorkoutLog, ExerciseSetLog
from fittrack.repositories.measurement_repository import MeasurementRepository
from fittrack.schemas.measurement import MeasurementCreate
from fittrack.schemas.progress import TimeRange, WeeklyCount
from fittrack.services.analytics import (
    ProgressService,
    current_streak,
    total_volume_lifted,
    total_workouts_completed,
    volume_history,
    weekly_workout_count,
)

pytestmark = pytest.mark.unit

TODAY = date(2026, 3, 18)


# ---------------------------------------------------------------------------
# Вспомогательные фабрики
# ---------------------------------------------------------------------------

def make_log(day: date, sets=(), hour: int = 18) -> WorkoutLog:
    log = WorkoutLog(
        program_name="Test Program",
        day_name="Day",
        date=datetime(day.year, day.month, day.day, hour),
    )
    for exercise_id, weight, reps in sets:
        log.sets.append(ExerciseSetLog(
            exercise_id=exercise_id,
            exercise_name=exercise_id,
            set_number=len(log.sets) + 1,
            reps=reps,
            weight_kg=weight,
        ))
    return log


# ---------------------------------------------------------------------------
# current_streak
# ---------------------------------------------------------------------------

def test_streak_stops_at_gap():
    """Сегодня, вчера и три дня назад: серия 2."""
    logs = [make_log(TODAY), make_log(TODAY - timedelta(days=1)), make_log(TODAY - timedelta(days=3))]
    assert current_streak(logs, TODAY) == 2


def test_streak_counts_day_once():
    logs = [make_log(TODAY, hour=8), make_log(TODAY, hour=19)]
    assert current_streak(logs, TODAY) == 1


def test_streak_zero_without_workout_today():
    assert current_streak([make_log(TODAY - timedelta(days=1))], TODAY) == 0
    assert current_streak([], TODAY) == 0


# ---------------------------------------------------------------------------
# weekly_workout_count
# ---------------------------------------------------------------------------

def test_weekly_count_buckets_by_monday():
    logs = [
        make_log(date(2026, 3, 17)),
        make_log(date(2026, 3, 16)),
        make_log(date(2026, 3, 10)),
        make_log(date(2026, 2, 20)),
    ]

    counts = weekly_workout_count(logs, weeks=3, today=TODAY)

    assert counts == [
        WeeklyCount(week_start=date(2026, 3, 2), count=0),
        WeeklyCount(week_start=date(2026, 3, 9), count=1),
        WeeklyCount(week_start=date(2026, 3, 16), count=2),
    ]


def test_weekly_count_sunday_belongs_to_previous_week():
    counts = weekly_workout_count([make_log(date(2026, 3, 15))], weeks=2, today=TODAY)
    assert [c.count for c in counts] == [1, 0]


# ---------------------------------------------------------------------------
# Объём
# ---------------------------------------------------------------------------

def test_volume_history_chronological_and_filtered():
    logs = [
        make_log(date(2026, 3, 16), [("barbell_bench_press", 80, 8), ("barbell_bench_press", 80, 6)]),
        make_log(date(2026, 3, 12), [("barbell_bench_press", 75, 8)]),
        make_log(date(2026, 3, 14), [("barbell_squat", 100, 5)]),
    ]

    points = volume_history(logs, "barbell_bench_press")

    assert [p.date.date() for p in points] == [date(2026, 3, 12), date(2026, 3, 16)]
    assert [p.volume for p in points] == [600, 1120]


def test_total_volume_and_count():
    logs = [
        make_log(date(2026, 3, 16), [("barbell_bench_press", 80, 8)]),
        make_log(date(2026, 3, 14), [("plank", 0, 60), ("barbell_squat", 100, 5)]),
    ]
    assert total_volume_lifted(logs) == 1140
    assert total_workouts_completed(logs) == 2
    assert total_volume_lifted([]) == 0


def test_time_range_days():
    assert TimeRange("3M").days == 90
    assert TimeRange.all_time.days > TimeRange.one_year.days


# ---------------------------------------------------------------------------
# ProgressService
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_measurements() -> AsyncMock:
    return AsyncMock(spec=MeasurementRepository)


@pytest.fixture
def service(mock_workouts, mock_records, mock_measurements, now) -> ProgressService:
    return ProgressService(mock_workouts, mock_records, mock_measurements, now=now)


@pytest.mark.asyncio
async def test_workout_history_uses_cutoff(service, mock_workouts, now):
    await service.workout_history(days=30)
    mock_workouts.list_chronological.assert_awaited_once_with(since=now() - timedelta(days=30))


@pytest.mark.asyncio
async def test_service_current_streak(service, mock_workouts):
    mock_workouts.list_chronological.return_value = [
        make_log(TODAY - timedelta(days=1)),
        make_log(TODAY),
    ]
    assert await service.current_streak() == 2


@pytest.mark.asyncio
async def test_summary(service, mock_workouts, mock_records):
    mock_workouts.list_chronological.return_value = [make_log(TODAY)]
    mock_workouts.count.return_value = 12
    mock_workouts.total_volume.return_value = 45250.0
    mock_records.count.return_value = 4

    summary = await service.summary()

    assert summary.current_streak == 1
    assert summary.total_workouts == 12
    assert summary.total_volume_kg == 45250.0
    assert summary.personal_records == 4


@pytest.mark.asyncio
async def test_add_measurement(service, mock_measurements):
    data = MeasurementCreate(date=datetime(2026, 3, 18, 7), weight_kg=81.2, body_fat_percentage=18)

    measurement = await service.add_measurement(data)

    assert isinstance(measurement, BodyMeasurement)
    assert measurement.weight_kg == 81.2
    assert measurement.waist_cm is None
    mock_measurements.create.assert_awaited_once_with(measurement)


@pytest.mark.asyncio
async def test_add_measurement_defaults_date(service):
    measurement = await service.add_measurement(MeasurementCreate(waist_cm=84))
    assert measurement.date is not None
    assert measurement.notes == ""
