from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class MealTypeEnum(str, Enum):
    breakfast = "breakfast"
    lunch = "lunch"
    dinner = "dinner"
    snack = "snack"
    preworkout = "preworkout"
    postworkout = "postworkout"


class NutritionTotals(BaseModel):
    calories: float = 0
    protein_g: float = 0
    carbs_g: float = 0
    fat_g: float = 0
    fiber_g: float = 0


class MacroTargets(BaseModel):
    bmi: Optional[float] = None
    maintenance_calories: int
    target_calories: int
    protein_g: int
    fat_g: int
    carbs_g: int


class FoodItemCreate(BaseModel):
    name: str = Field(min_length=1)
    brand: str = ""
    serving_size_g: float = Field(gt=0)
    serving_unit: str = "g"
    calories: float = Field(ge=0)
    protein_g: float = Field(default=0, ge=0)
    carbs_g: float = Field(default=0, ge=0)
    fat_g: float = Field(default=0, ge=0)
    fiber_g: float = Field(default=0, ge=0)
    sugar_g: float = Field(default=0, ge=0)
    sodium_mg: float = Field(default=0, ge=0)
    barcode: Optional[str] = None
