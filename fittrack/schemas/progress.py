from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel


class TimeRange(str, Enum):
    one_month = "1M"
    three_months = "3M"
    six_months = "6M"
    one_year = "1Y"
    all_time = "All"

    @property
    def days(self) -> int:
        return {
            TimeRange.one_month: 30,
            TimeRange.three_months: 90,
            TimeRange.six_months: 180,
            TimeRange.one_year: 365,
            TimeRange.all_time: 3650,
        }[self]


class VolumePoint(BaseModel):
    date: datetime
    volume: float


class WeeklyCount(BaseModel):
    week_start: date
    count: int


class ProgressSummary(BaseModel):
    current_streak: int
    total_workouts: int
    total_volume_kg: float
    personal_records: int
