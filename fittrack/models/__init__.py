from fittrack.models.user import UserProfile
from fittrack.schemas.profile import GoalEnum, ExperienceLevelEnum, EquipmentEnum
from fittrack.models.program import WorkoutProgram, WorkoutDay, WorkoutExercise
from fittrack.models.workout_log import WorkoutLog, ExerciseSetLog, PersonalRecord
from fittrack.models.measurement import BodyMeasurement
from fittrack.models.nutrition import FoodItem, NutritionLog, NutritionEntry
from fittrack.schemas.nutrition import MealTypeEnum

__all__ = [
    "UserProfile", "GoalEnum", "ExperienceLevelEnum", "EquipmentEnum",
    "WorkoutProgram", "WorkoutDay", "WorkoutExercise",
    "WorkoutLog", "ExerciseSetLog", "PersonalRecord",
    "BodyMeasurement",
    "FoodItem", "NutritionLog", "NutritionEntry", "MealTypeEnum",
]
