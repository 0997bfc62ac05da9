from datetime import datetime

from sqlalchemy import Column, Integer, String, Float, Enum, ForeignKey, Boolean, DateTime, UniqueConstraint
from sqlalchemy.orm import relationship

from fittrack.core.base import Base
from fittrack.core.config import settings
from fittrack.schemas.profile import GoalEnum, ExperienceLevelEnum
from fittrack.schemas.exercise import ExerciseCategory


class WorkoutProgram(Base):
    __tablename__ = "workout_programs"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    description = Column(String, nullable=False, default="")
    template_id = Column(String, nullable=True, index=True)
    duration_weeks = Column(Integer, nullable=False)
    days_per_week = Column(Integer, nullable=False)
    goal = Column(Enum(GoalEnum), nullable=False)
    level = Column(Enum(ExperienceLevelEnum), nullable=False)
    current_week = Column(Integer, nullable=False, default=1)
    current_day_index = Column(Integer, nullable=False, default=0)
    start_date = Column(DateTime, nullable=True)
    is_active = Column(Boolean, nullable=False, default=False, index=True)
    created_at = Column(DateTime, default=datetime.now)

    days = relationship(
        "WorkoutDay",
        back_populates="program",
        cascade="all, delete-orphan",
        order_by="WorkoutDay.day_number",
        lazy="selectin",
    )

    def __init__(self, **kwargs):
        kwargs.setdefault("description", "")
        kwargs.setdefault("current_week", 1)
        kwargs.setdefault("current_day_index", 0)
        kwargs.setdefault("is_active", False)
        kwargs.setdefault("created_at", datetime.now())
        super().__init__(**kwargs)


class WorkoutDay(Base):
    __tablename__ = "workout_days"
    __table_args__ = (UniqueConstraint("program_id", "day_number", name="uq_workout_day_number"),)

    id = Column(Integer, primary_key=True)
    program_id = Column(Integer, ForeignKey("workout_programs.id"), nullable=False, index=True)
    name = Column(String, nullable=False)
    day_number = Column(Integer, nullable=False)
    focus = Column(Enum(ExerciseCategory), nullable=False)
    estimated_minutes = Column(Integer, nullable=False, default=60)
    notes = Column(String, nullable=False, default="")

    program = relationship("WorkoutProgram", back_populates="days")
    exercises = relationship(
        "WorkoutExercise",
        back_populates="day",
        cascade="all, delete-orphan",
        order_by="WorkoutExercise.order_index",
        lazy="selectin",
    )

    def __init__(self, **kwargs):
        kwargs.setdefault("estimated_minutes", 60)
        kwargs.setdefault("notes", "")
        super().__init__(**kwargs)


class WorkoutExercise(Base):
    __tablename__ = "workout_exercises"

    id = Column(Integer, primary_key=True)
    day_id = Column(Integer, ForeignKey("workout_days.id"), nullable=False, index=True)
    exercise_id = Column(String, nullable=False)  # ключ в каталоге упражнений
    exercise_name = Column(String, nullable=False)
    sets = Column(Integer, nullable=False)
    rep_min = Column(Integer, nullable=False)
    rep_max = Column(Integer, nullable=False)
    rest_seconds = Column(Integer, nullable=False, default=90)
    rpe_target = Column(Float, nullable=False, default=8.0)
    notes = Column(String, nullable=False, default="")
    order_index = Column(Integer, nullable=False, default=0)
    is_warmup = Column(Boolean, nullable=False, default=False)

    day = relationship("WorkoutDay", back_populates="exercises")

    def __init__(self, **kwargs):
        kwargs.setdefault("rest_seconds", settings.DEFAULT_REST_SECONDS)
        kwargs.setdefault("rpe_target", settings.DEFAULT_RPE)
        kwargs.setdefault("notes", "")
        kwargs.setdefault("order_index", 0)
        kwargs.setdefault("is_warmup", False)
        super().__init__(**kwargs)

    @property
    def rep_range_text(self) -> str:
        if self.rep_min == self.rep_max:
            return f"{self.rep_min} reps"
        return f"{self.rep_min}-{self.rep_max} reps"

    @property
    def sets_summary(self) -> str:
        return f"{self.sets} x {self.rep_range_text}"
