from datetime import datetime
from typing import List, Tuple

from sqlalchemy import Column, Integer, String, Float, ForeignKey, Boolean, DateTime
from sqlalchemy.orm import relationship

from fittrack.core.base import Base
from fittrack.core.config import settings
from fittrack.services.metrics import FitnessCalculator


class WorkoutLog(Base):
    __tablename__ = "workout_logs"

    id = Column(Integer, primary_key=True)
    # Снимок названий на момент тренировки, а не ссылка на программу
    program_name = Column(String, nullable=False)
    day_name = Column(String, nullable=False)
    date = Column(DateTime, nullable=False, index=True)
    duration_seconds = Column(Integer, nullable=False, default=0)
    notes = Column(String, nullable=False, default="")
    bodyweight_kg = Column(Float, nullable=True)

    sets = relationship(
        "ExerciseSetLog",
        back_populates="log",
        cascade="all, delete-orphan",
        order_by="ExerciseSetLog.id",
        lazy="selectin",
    )

    def __init__(self, **kwargs):
        kwargs.setdefault("date", datetime.now())
        kwargs.setdefault("duration_seconds", 0)
        kwargs.setdefault("notes", "")
        super().__init__(**kwargs)

    @property
    def total_volume(self) -> float:
        return sum(s.volume for s in self.sets)

    @property
    def duration_text(self) -> str:
        mins, secs = divmod(self.duration_seconds or 0, 60)
        if mins > 0:
            return f"{mins}m {secs}s"
        return f"{secs}s"

    @property
    def exercise_groups(self) -> List[Tuple[str, str, list]]:
        """Подходы, сгруппированные по упражнению в порядке первого появления."""
        groups = []
        seen = {}
        for set_log in sorted(self.sets, key=lambda s: s.set_number):
            if set_log.exercise_id in seen:
                groups[seen[set_log.exercise_id]][2].append(set_log)
            else:
                seen[set_log.exercise_id] = len(groups)
                groups.append((set_log.exercise_id, set_log.exercise_name, [set_log]))
        return groups

    def sets_for(self, exercise_id: str) -> list:
        return [s for s in self.sets if s.exercise_id == exercise_id]


class ExerciseSetLog(Base):
    __tablename__ = "exercise_set_logs"

    id = Column(Integer, primary_key=True)
    log_id = Column(Integer, ForeignKey("workout_logs.id"), nullable=False, index=True)
    exercise_id = Column(String, nullable=False, index=True)
    exercise_name = Column(String, nullable=False)
    set_number = Column(Integer, nullable=False)
    reps = Column(Integer, nullable=False)
    weight_kg = Column(Float, nullable=False, default=0)
    rpe = Column(Float, nullable=False, default=8.0)
    is_personal_record = Column(Boolean, nullable=False, default=False)
    notes = Column(String, nullable=False, default="")
    completed_at = Column(DateTime, nullable=False)

    log = relationship("WorkoutLog", back_populates="sets")

    def __init__(self, **kwargs):
        kwargs.setdefault("weight_kg", 0.0)
        kwargs.setdefault("rpe", settings.DEFAULT_RPE)
        kwargs.setdefault("is_personal_record", False)
        kwargs.setdefault("notes", "")
        kwargs.setdefault("completed_at", datetime.now())
        super().__init__(**kwargs)

    @property
    def volume(self) -> float:
        return FitnessCalculator.volume(self.weight_kg, self.reps)

    @property
    def estimated_1rm(self) -> float:
        return FitnessCalculator.estimated_1rm(self.weight_kg, self.reps)

    @property
    def weight_text(self) -> str:
        if self.weight_kg == 0:
            return "BW"
        if float(self.weight_kg).is_integer():
            return f"{self.weight_kg:.0f} kg"
        return f"{self.weight_kg:.1f} kg"


class PersonalRecord(Base):
    __tablename__ = "personal_records"

    id = Column(Integer, primary_key=True)
    exercise_id = Column(String, nullable=False, unique=True, index=True)
    exercise_name = Column(String, nullable=False)
    weight_kg = Column(Float, nullable=False)
    reps = Column(Integer, nullable=False)
    estimated_1rm = Column(Float, nullable=False)
    date = Column(DateTime, nullable=False)

    def __init__(self, **kwargs):
        if "estimated_1rm" not in kwargs:
            kwargs["estimated_1rm"] = FitnessCalculator.estimated_1rm(kwargs["weight_kg"], kwargs["reps"])
        kwargs.setdefault("date", datetime.now())
        super().__init__(**kwargs)

    @property
    def display_text(self) -> str:
        if self.reps == 1:
            return f"{self.weight_kg:.1f} kg (1RM)"
        return f"{self.weight_kg:.1f} kg x {self.reps} reps"
