from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


class SessionPhase(str, Enum):
    idle = "idle"
    exercising = "exercising"
    resting = "resting"
    complete = "complete"


class SetInput(BaseModel):
    """Разбор ввода подхода: строки из полей формы -> числа."""
    weight_kg: float = Field(ge=0, allow_inf_nan=False)
    reps: int = Field(gt=0)
    rpe: float = Field(ge=1, le=10)

    @field_validator("weight_kg", mode="before")
    @classmethod
    def empty_weight_is_bodyweight(cls, value: Any) -> Any:
        # Пустой вес = упражнение с собственным весом
        if value is None:
            return 0.0
        if isinstance(value, str):
            value = value.strip()
            return value or 0.0
        return value

    @field_validator("reps", mode="before")
    @classmethod
    def strip_reps(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip()
        return value


class SessionSnapshot(BaseModel):
    phase: SessionPhase
    program_name: Optional[str] = None
    day_name: Optional[str] = None
    current_exercise_index: int = 0
    current_set_index: int = 0
    exercise_count: int = 0
    current_exercise_id: Optional[str] = None
    current_exercise_name: Optional[str] = None
    rest_seconds_remaining: int = 0
    elapsed_seconds: int = 0
    sets_logged: int = 0
    pending_weight: str = ""
    pending_reps: str = ""
    pending_rpe: float = 8.0
