"""
Аналитика по сохранённым тренировкам: серии, недельные счётчики, объём.

Функции модуля чистые и принимают журналы и "сегодня" явно;
ProgressService достаёт данные из репозиториев и вызывает их.
"""
import logging
from datetime import date, datetime, timedelta
from typing import Callable, Iterable, List, Optional

from fittrack.core.config import settings
from fittrack.models.measurement import BodyMeasurement
from fittrack.models.workout_log import WorkoutLog, PersonalRecord
from fittrack.repositories.measurement_repository import MeasurementRepository
from fittrack.repositories.workout_log_repository import WorkoutLogRepository, PersonalRecordRepository
from fittrack.schemas.measurement import MeasurementCreate
from fittrack.schemas.progress import ProgressSummary, VolumePoint, WeeklyCount

logger = logging.getLogger(__name__)


def _as_date(value) -> date:
    return value.date() if isinstance(value, datetime) else value


def _week_start(day: date) -> date:
    return day - timedelta(days=day.weekday())


def current_streak(logs: Iterable[WorkoutLog], today: date) -> int:
    """Сколько дней подряд, начиная с сегодняшнего, есть хотя бы одна тренировка."""
    workout_days = {_as_date(log.date) for log in logs}
    streak = 0
    check_day = today
    while check_day in workout_days:
        streak += 1
        check_day -= timedelta(days=1)
    return streak


def weekly_workout_count(logs: Iterable[WorkoutLog], weeks: int, today: date) -> List[WeeklyCount]:
    """Количество тренировок по ISO-неделям (с понедельника), от старых к новым."""
    this_week = _week_start(today)
    counts = {this_week - timedelta(weeks=offset): 0 for offset in range(weeks)}
    for log in logs:
        week = _week_start(_as_date(log.date))
        if week in counts:
            counts[week] += 1
    return [WeeklyCount(week_start=week, count=counts[week]) for week in sorted(counts)]


def volume_history(logs: Iterable[WorkoutLog], exercise_id: str) -> List[VolumePoint]:
    points = []
    for log in sorted(logs, key=lambda l: l.date):
        sets = log.sets_for(exercise_id)
        if not sets:
            continue
        points.append(VolumePoint(date=log.date, volume=sum(s.volume for s in sets)))
    return points


def total_volume_lifted(logs: Iterable[WorkoutLog]) -> float:
    return sum(log.total_volume for log in logs)


def total_workouts_completed(logs: Iterable[WorkoutLog]) -> int:
    return sum(1 for _ in logs)


class ProgressService:
    def __init__(
            self,
            workouts: WorkoutLogRepository,
            records: PersonalRecordRepository,
            measurements: Optional[MeasurementRepository] = None,
            now: Callable[[], datetime] = datetime.now,
    ):
        self.workouts = workouts
        self.records = records
        self.measurements = measurements
        self._now = now

    async def workout_history(self, days: int = 30) -> List[WorkoutLog]:
        cutoff = self._now() - timedelta(days=days)
        return await self.workouts.list_chronological(since=cutoff)

    async def current_streak(self) -> int:
        logs = await self.workout_history(days=settings.STREAK_LOOKBACK_DAYS)
        return current_streak(logs, self._now().date())

    async def weekly_workout_count(self, weeks: int = 12) -> List[WeeklyCount]:
        logs = await self.workout_history(days=weeks * 7)
        return weekly_workout_count(logs, weeks, self._now().date())

    async def volume_history(self, exercise_id: str) -> List[VolumePoint]:
        logs = await self.workouts.list_chronological()
        return volume_history(logs, exercise_id)

    async def total_volume_lifted(self) -> float:
        return await self.workouts.total_volume()

    async def total_workouts_completed(self) -> int:
        return await self.workouts.count()

    async def personal_records(self) -> List[PersonalRecord]:
        return await self.records.list_all()

    async def weight_history(self) -> List[BodyMeasurement]:
        return await self.measurements.list_with_weight()

    async def latest_measurement(self) -> Optional[BodyMeasurement]:
        return await self.measurements.latest()

    async def add_measurement(self, data: MeasurementCreate) -> BodyMeasurement:
        values = data.model_dump(exclude_none=True)
        measurement = BodyMeasurement(**values)
        await self.measurements.create(measurement)
        logger.info("Добавлен замер от %s", measurement.date.date())
        return measurement

    async def summary(self) -> ProgressSummary:
        return ProgressSummary(
            current_streak=await self.current_streak(),
            total_workouts=await self.total_workouts_completed(),
            total_volume_kg=await self.total_volume_lifted(),
            personal_records=await self.records.count(),
        )
