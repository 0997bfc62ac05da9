from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from fittrack.schemas.profile import EquipmentEnum, ExperienceLevelEnum


class BodyRegion(str, Enum):
    upper = "upper"
    lower = "lower"
    core = "core"


class MuscleGroup(str, Enum):
    chest = "chest"
    back = "back"
    shoulders = "shoulders"
    biceps = "biceps"
    triceps = "triceps"
    forearms = "forearms"
    quads = "quads"
    hamstrings = "hamstrings"
    glutes = "glutes"
    calves = "calves"
    abs = "abs"
    obliques = "obliques"
    lower_back = "lower_back"
    traps = "traps"
    lats = "lats"

    @property
    def body_region(self) -> BodyRegion:
        if self in (MuscleGroup.quads, MuscleGroup.hamstrings, MuscleGroup.glutes, MuscleGroup.calves):
            return BodyRegion.lower
        if self in (MuscleGroup.abs, MuscleGroup.obliques):
            return BodyRegion.core
        return BodyRegion.upper


class ExerciseCategory(str, Enum):
    push = "push"
    pull = "pull"
    legs = "legs"
    core = "core"
    cardio = "cardio"
    full_body = "full_body"


class ExerciseMetadata(BaseModel):
    """Запись справочника упражнений (только чтение)."""
    id: str
    name: str
    muscle_groups: List[MuscleGroup]
    primary_muscle: MuscleGroup
    equipment: List[EquipmentEnum]
    difficulty: ExperienceLevelEnum
    category: ExerciseCategory
    instructions: List[str] = []
    tips: List[str] = []
    common_mistakes: List[str] = []
    video_url: Optional[str] = None
    is_compound: bool = False
    alternatives: List[str] = []

    model_config = ConfigDict(frozen=True)
