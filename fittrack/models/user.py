from datetime import datetime

from sqlalchemy import Column, Integer, String, Float, Enum, ForeignKey, JSON, DateTime
from sqlalchemy.orm import relationship

from fittrack.core.base import Base
from fittrack.schemas.profile import GoalEnum, ExperienceLevelEnum, EquipmentEnum


class UserProfile(Base):
    __tablename__ = "user_profiles"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    age = Column(Integer, nullable=False)
    height_cm = Column(Float, nullable=False)
    weight_kg = Column(Float, nullable=False)
    goal = Column(Enum(GoalEnum), nullable=False)
    experience_level = Column(Enum(ExperienceLevelEnum), nullable=False)
    days_per_week = Column(Integer, nullable=False)
    available_equipment = Column(JSON, nullable=False, default=list)
    injuries = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime, default=datetime.now)
    # Не владеющая ссылка: программа живёт сама по себе
    active_program_id = Column(Integer, ForeignKey("workout_programs.id", ondelete="SET NULL"), nullable=True)

    active_program = relationship("WorkoutProgram", foreign_keys=[active_program_id], lazy="selectin")

    def __init__(self, **kwargs):
        kwargs.setdefault("available_equipment", [e.value for e in EquipmentEnum])
        kwargs.setdefault("injuries", [])
        kwargs.setdefault("created_at", datetime.now())
        super().__init__(**kwargs)
