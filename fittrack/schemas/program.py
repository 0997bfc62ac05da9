from typing import List

from pydantic import BaseModel, Field, model_validator

from fittrack.schemas.exercise import ExerciseCategory
from fittrack.schemas.profile import GoalEnum, ExperienceLevelEnum


class TemplateExercise(BaseModel):
    exercise_id: str
    exercise_name: str
    sets: int = Field(gt=0)
    rep_min: int = Field(gt=0)
    rep_max: int = Field(gt=0)
    rest_seconds: int = Field(default=90, ge=0)
    rpe_target: float = Field(default=8.0, ge=1, le=10)
    notes: str = ""
    is_warmup: bool = False

    @model_validator(mode="after")
    def check_rep_range(self):
        if self.rep_min > self.rep_max:
            raise ValueError("rep_min must not exceed rep_max")
        return self


class TemplateDay(BaseModel):
    name: str
    focus: ExerciseCategory
    estimated_minutes: int = 60
    notes: str = ""
    exercises: List[TemplateExercise]


class ProgramTemplate(BaseModel):
    """Готовый шаблон программы; превращается в WorkoutProgram при активации."""
    id: str
    name: str
    subtitle: str = ""
    description: str = ""
    duration_weeks: int = Field(gt=0)
    days_per_week: int = Field(gt=0, le=7)
    goal: GoalEnum
    level: ExperienceLevelEnum
    days: List[TemplateDay]
