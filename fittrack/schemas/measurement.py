from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class MeasurementCreate(BaseModel):
    date: Optional[datetime] = None
    weight_kg: Optional[float] = Field(default=None, gt=0)
    body_fat_percentage: Optional[float] = Field(default=None, ge=0, le=100)
    chest_cm: Optional[float] = Field(default=None, gt=0)
    waist_cm: Optional[float] = Field(default=None, gt=0)
    hips_cm: Optional[float] = Field(default=None, gt=0)
    left_bicep_cm: Optional[float] = Field(default=None, gt=0)
    right_bicep_cm: Optional[float] = Field(default=None, gt=0)
    left_thigh_cm: Optional[float] = Field(default=None, gt=0)
    right_thigh_cm: Optional[float] = Field(default=None, gt=0)
    neck_cm: Optional[float] = Field(default=None, gt=0)
    notes: str = ""
