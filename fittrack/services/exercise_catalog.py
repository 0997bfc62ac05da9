from typing import Dict, Iterable, List, Optional

from fittrack.core.initial_exercises import INITIAL_EXERCISES
from fittrack.schemas.exercise import ExerciseCategory, ExerciseMetadata, MuscleGroup
from fittrack.schemas.profile import EquipmentEnum


class ExerciseCatalog:
    """Неизменяемый справочник упражнений, создаётся один раз и передаётся явно."""

    def __init__(self, exercises: Iterable[ExerciseMetadata]):
        self._exercises: List[ExerciseMetadata] = list(exercises)
        self._index: Dict[str, ExerciseMetadata] = {}
        for exercise in self._exercises:
            if exercise.id in self._index:
                raise ValueError(f"Duplicate exercise id: {exercise.id}")
            self._index[exercise.id] = exercise

    @classmethod
    def default(cls) -> "ExerciseCatalog":
        return cls(ExerciseMetadata(**data) for data in INITIAL_EXERCISES)

    def __len__(self) -> int:
        return len(self._exercises)

    def __contains__(self, exercise_id: str) -> bool:
        return exercise_id in self._index

    def all(self) -> List[ExerciseMetadata]:
        return list(self._exercises)

    def lookup(self, exercise_id: str) -> Optional[ExerciseMetadata]:
        return self._index.get(exercise_id)

    def by_muscle_group(self, muscle_group: MuscleGroup) -> List[ExerciseMetadata]:
        return [e for e in self._exercises if muscle_group in e.muscle_groups]

    def by_category(self, category: ExerciseCategory) -> List[ExerciseMetadata]:
        return [e for e in self._exercises if e.category == category]

    def by_equipment(self, available: Iterable[EquipmentEnum]) -> List[ExerciseMetadata]:
        """Упражнения, для которых есть всё нужное оборудование."""
        available = {EquipmentEnum(item) for item in available}
        return [e for e in self._exercises if all(item in available for item in e.equipment)]

    def alternatives(self, exercise_id: str) -> List[ExerciseMetadata]:
        exercise = self.lookup(exercise_id)
        if exercise is None:
            return []
        return [self._index[alt] for alt in exercise.alternatives if alt in self._index]
