import logging
from datetime import datetime
from typing import Callable, Dict, Iterable, List, Optional

from fittrack.core.config import settings
from fittrack.models.program import WorkoutDay
from fittrack.models.workout_log import WorkoutLog, ExerciseSetLog, PersonalRecord
from fittrack.repositories.workout_log_repository import WorkoutLogRepository, PersonalRecordRepository

logger = logging.getLogger(__name__)


class ProgressiveOverloadAdvisor:
    """
    Подсказки по весу на основе прошлой тренировки и поиск личных рекордов.

    previous_sets хранит подходы из самого свежего журнала, где упражнение
    встречалось, отдельно для каждого упражнения дня.
    """

    def __init__(
            self,
            workouts: WorkoutLogRepository,
            records: Optional[PersonalRecordRepository] = None,
            rpe_threshold: float = None,
            increment_kg: float = None,
            now: Callable[[], datetime] = datetime.now,
    ):
        self.workouts = workouts
        self.records = records
        self.rpe_threshold = rpe_threshold if rpe_threshold is not None else settings.OVERLOAD_RPE_THRESHOLD
        self.increment_kg = increment_kg if increment_kg is not None else settings.OVERLOAD_INCREMENT_KG
        self._now = now
        self.previous_sets: Dict[str, List[ExerciseSetLog]] = {}

    async def load_previous_sets(self, day: WorkoutDay) -> Dict[str, List[ExerciseSetLog]]:
        logs = await self.workouts.list_recent()

        previous: Dict[str, List[ExerciseSetLog]] = {}
        for exercise in day.exercises:
            if exercise.exercise_id in previous:
                continue
            for log in logs:
                sets = log.sets_for(exercise.exercise_id)
                if sets:
                    previous[exercise.exercise_id] = sets
                    break

        self.previous_sets = previous
        logger.debug("История загружена для %d из %d упражнений", len(previous), len(day.exercises))
        return previous

    def suggested_weight(self, exercise_id: str) -> Optional[float]:
        sets = self.previous_sets.get(exercise_id)
        if not sets:
            return None

        avg_rpe = sum(s.rpe for s in sets) / len(sets)
        max_weight = max(s.weight_kg for s in sets)
        # Прошлые подходы дались легко - добавляем вес
        if avg_rpe < self.rpe_threshold:
            return max_weight + self.increment_kg
        return max_weight

    def previous_performance_summary(self, exercise_id: str) -> Optional[str]:
        sets = self.previous_sets.get(exercise_id)
        if not sets:
            return None
        max_weight = max(s.weight_kg for s in sets)
        total_reps = sum(s.reps for s in sets)
        return f"Last: {max_weight:.1f} kg · {total_reps} total reps"

    def check_personal_records(
            self,
            sets: Iterable[ExerciseSetLog],
            records: Dict[str, PersonalRecord],
    ) -> List[PersonalRecord]:
        """
        Отметить рекордные подходы и обновить рекорды в records.

        На каждое упражнение в журнале рекордом может стать только один подход:
        с максимальным расчётным 1ПМ (при равенстве - более ранний), и только
        если он строго превышает сохранённый рекорд. Возвращает созданные или
        изменённые записи рекордов.
        """
        sets = list(sets)
        best: Dict[str, ExerciseSetLog] = {}
        for set_log in sets:
            set_log.is_personal_record = False
            current = best.get(set_log.exercise_id)
            if current is None or set_log.estimated_1rm > current.estimated_1rm:
                best[set_log.exercise_id] = set_log

        changed = []
        for exercise_id, set_log in best.items():
            record = records.get(exercise_id)
            if record is None:
                record = PersonalRecord(
                    exercise_id=exercise_id,
                    exercise_name=set_log.exercise_name,
                    weight_kg=set_log.weight_kg,
                    reps=set_log.reps,
                    estimated_1rm=set_log.estimated_1rm,
                    date=self._now(),
                )
                records[exercise_id] = record
            elif set_log.estimated_1rm > record.estimated_1rm:
                record.weight_kg = set_log.weight_kg
                record.reps = set_log.reps
                record.estimated_1rm = set_log.estimated_1rm
                record.date = self._now()
            else:
                continue

            set_log.is_personal_record = True
            changed.append(record)

        return changed

    async def detect_personal_records(self, log: WorkoutLog) -> List[PersonalRecord]:
        records = await self.records.get_map()
        changed = self.check_personal_records(log.sets, records)
        if changed:
            logger.info("Новые рекорды: %s", ", ".join(r.exercise_name for r in changed))
        return changed
