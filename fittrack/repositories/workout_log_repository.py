from datetime import datetime
from typing import Dict, Iterable, List, Optional

from sqlalchemy import select, func

from fittrack.models.workout_log import WorkoutLog, ExerciseSetLog, PersonalRecord
from fittrack.repositories.base import BaseRepository


class WorkoutLogRepository(BaseRepository):
    async def list_recent(self, limit: Optional[int] = None) -> List[WorkoutLog]:
        """Журналы тренировок от новых к старым."""
        stmt = select(WorkoutLog).order_by(WorkoutLog.date.desc(), WorkoutLog.id.desc())
        if limit is not None:
            stmt = stmt.limit(limit)
        return await self._scalars(stmt)

    async def list_chronological(self, since: Optional[datetime] = None) -> List[WorkoutLog]:
        stmt = select(WorkoutLog).order_by(WorkoutLog.date.asc(), WorkoutLog.id.asc())
        if since is not None:
            stmt = stmt.where(WorkoutLog.date >= since)
        return await self._scalars(stmt)

    async def count(self) -> int:
        return await self._scalar(select(func.count(WorkoutLog.id)))

    async def total_volume(self) -> float:
        total = await self._scalar(
            select(func.coalesce(func.sum(ExerciseSetLog.weight_kg * ExerciseSetLog.reps), 0.0))
        )
        return float(total)

    async def save_finished(
            self,
            log: WorkoutLog,
            records: Iterable[PersonalRecord] = (),
            restore: Iterable = (),
    ) -> WorkoutLog:
        """Журнал, обновлённые рекорды и прогресс программы фиксируются одной транзакцией."""
        records = list(records)
        self.add(log)
        for record in records:
            self.add(record)
        await self.commit(restore=[*records, *restore])
        return log


class PersonalRecordRepository(BaseRepository):
    async def list_all(self) -> List[PersonalRecord]:
        return await self._scalars(select(PersonalRecord).order_by(PersonalRecord.date.desc()))

    async def get_map(self) -> Dict[str, PersonalRecord]:
        records = await self._scalars(select(PersonalRecord))
        return {record.exercise_id: record for record in records}

    async def get(self, exercise_id: str) -> Optional[PersonalRecord]:
        return await self._scalar_one_or_none(
            select(PersonalRecord).where(PersonalRecord.exercise_id == exercise_id)
        )

    async def count(self) -> int:
        return await self._scalar(select(func.count(PersonalRecord.id)))
