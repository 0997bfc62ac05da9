from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class GoalEnum(str, Enum):
    lose_weight = "lose_weight"
    build_muscle = "build_muscle"
    recomposition = "recomposition"
    maintain_weight = "maintain_weight"


class ExperienceLevelEnum(str, Enum):
    beginner = "beginner"
    intermediate = "intermediate"
    advanced = "advanced"


class EquipmentEnum(str, Enum):
    barbell = "barbell"
    dumbbell = "dumbbell"
    cables = "cables"
    machine = "machine"
    resistance_band = "resistance_band"
    pullup_bar = "pullup_bar"
    bodyweight = "bodyweight"
    kettlebell = "kettlebell"
    trap_bar = "trap_bar"


class ProfileCreate(BaseModel):
    name: str = Field(min_length=1)
    age: int = Field(gt=0, le=120)
    height_cm: float = Field(gt=0)
    weight_kg: float = Field(gt=0)
    goal: GoalEnum
    experience_level: ExperienceLevelEnum = ExperienceLevelEnum.beginner
    days_per_week: int = Field(ge=0, le=7)
    available_equipment: List[EquipmentEnum] = Field(default_factory=lambda: list(EquipmentEnum))
    injuries: List[str] = Field(default_factory=list)


class ProfileUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    age: Optional[int] = Field(default=None, gt=0, le=120)
    height_cm: Optional[float] = Field(default=None, gt=0)
    weight_kg: Optional[float] = Field(default=None, gt=0)
    goal: Optional[GoalEnum] = None
    experience_level: Optional[ExperienceLevelEnum] = None
    days_per_week: Optional[int] = Field(default=None, ge=0, le=7)
    available_equipment: Optional[List[EquipmentEnum]] = None
    injuries: Optional[List[str]] = None


class ProfileResponse(BaseModel):
    id: int
    name: str
    age: int
    height_cm: float
    weight_kg: float
    goal: GoalEnum
    experience_level: ExperienceLevelEnum
    days_per_week: int
    available_equipment: List[EquipmentEnum]
    injuries: List[str]
    active_program_id: Optional[int] = None

    model_config = ConfigDict(from_attributes=True)
