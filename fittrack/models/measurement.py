from datetime import datetime
from typing import Optional

from sqlalchemy import Column, Integer, Float, String, DateTime

from fittrack.core.base import Base
from fittrack.services.metrics import FitnessCalculator


class BodyMeasurement(Base):
    __tablename__ = "body_measurements"

    id = Column(Integer, primary_key=True)
    date = Column(DateTime, nullable=False, index=True)
    weight_kg = Column(Float, nullable=True)
    body_fat_percentage = Column(Float, nullable=True)
    chest_cm = Column(Float, nullable=True)
    waist_cm = Column(Float, nullable=True)
    hips_cm = Column(Float, nullable=True)
    left_bicep_cm = Column(Float, nullable=True)
    right_bicep_cm = Column(Float, nullable=True)
    left_thigh_cm = Column(Float, nullable=True)
    right_thigh_cm = Column(Float, nullable=True)
    neck_cm = Column(Float, nullable=True)
    notes = Column(String, nullable=False, default="")

    def __init__(self, **kwargs):
        kwargs.setdefault("date", datetime.now())
        kwargs.setdefault("notes", "")
        super().__init__(**kwargs)

    @property
    def lean_mass_kg(self) -> Optional[float]:
        return FitnessCalculator.lean_mass_kg(self.weight_kg, self.body_fat_percentage)

    @property
    def fat_mass_kg(self) -> Optional[float]:
        return FitnessCalculator.fat_mass_kg(self.weight_kg, self.body_fat_percentage)
