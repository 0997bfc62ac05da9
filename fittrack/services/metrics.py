from typing import Optional

from fittrack.schemas.nutrition import MacroTargets
from fittrack.schemas.profile import GoalEnum


class FitnessCalculator:
    # (максимум тренировок в неделю, коэффициент активности)
    ACTIVITY_MULTIPLIERS = (
        (1, 1.2),
        (3, 1.375),
        (5, 1.55),
    )
    HIGH_ACTIVITY_MULTIPLIER = 1.725

    GOAL_CALORIE_ADJUSTMENTS = {
        GoalEnum.lose_weight: -500,
        GoalEnum.build_muscle: 300,
        GoalEnum.recomposition: 0,
        GoalEnum.maintain_weight: 0,
    }

    LB_PER_KG = 2.2
    PROTEIN_G_PER_LB = 0.85
    FAT_CALORIE_SHARE = 0.25
    KCAL_PER_G_PROTEIN = 4
    KCAL_PER_G_CARBS = 4
    KCAL_PER_G_FAT = 9

    @classmethod
    def bmi(cls, height_cm: float, weight_kg: float) -> Optional[float]:
        if not height_cm or height_cm <= 0 or weight_kg is None:
            return None
        height_m = height_cm / 100
        return weight_kg / (height_m * height_m)

    @classmethod
    def calculate_bmr(cls, weight_kg: float, height_cm: float, age: int) -> float:
        # Миффлин–Сан Жеор, мужская константа: пола в профиле нет
        return 10 * weight_kg + 6.25 * height_cm - 5 * age + 5

    @classmethod
    def activity_multiplier(cls, days_per_week: int) -> float:
        for max_days, multiplier in cls.ACTIVITY_MULTIPLIERS:
            if days_per_week <= max_days:
                return multiplier
        return cls.HIGH_ACTIVITY_MULTIPLIER

    @classmethod
    def maintenance_calories(cls, weight_kg: float, height_cm: float, age: int, days_per_week: int) -> int:
        bmr = cls.calculate_bmr(weight_kg, height_cm, age)
        return int(bmr * cls.activity_multiplier(days_per_week))

    @classmethod
    def target_calories(cls, goal: GoalEnum, maintenance: int) -> int:
        return maintenance + cls.GOAL_CALORIE_ADJUSTMENTS.get(GoalEnum(goal), 0)

    @classmethod
    def protein_target_g(cls, weight_kg: float) -> int:
        return int(weight_kg * cls.LB_PER_KG * cls.PROTEIN_G_PER_LB)

    @classmethod
    def fat_target_g(cls, target_calories: int) -> int:
        return int(target_calories * cls.FAT_CALORIE_SHARE / cls.KCAL_PER_G_FAT)

    @classmethod
    def carb_target_g(cls, target_calories: int, protein_g: int, fat_g: int) -> int:
        remaining = target_calories - protein_g * cls.KCAL_PER_G_PROTEIN - fat_g * cls.KCAL_PER_G_FAT
        return max(0, int(remaining) // cls.KCAL_PER_G_CARBS)

    @classmethod
    def macro_targets(cls, profile) -> MacroTargets:
        maintenance = cls.maintenance_calories(
            weight_kg=profile.weight_kg,
            height_cm=profile.height_cm,
            age=profile.age,
            days_per_week=profile.days_per_week,
        )
        target = cls.target_calories(profile.goal, maintenance)
        protein = cls.protein_target_g(profile.weight_kg)
        fat = cls.fat_target_g(target)

        return MacroTargets(
            bmi=cls.bmi(profile.height_cm, profile.weight_kg),
            maintenance_calories=maintenance,
            target_calories=target,
            protein_g=protein,
            fat_g=fat,
            carbs_g=cls.carb_target_g(target, protein, fat),
        )

    @classmethod
    def estimated_1rm(cls, weight_kg: float, reps: int) -> float:
        """Оценка 1ПМ по Эпли; для одного повтора вес не экстраполируется."""
        if reps <= 1:
            return weight_kg
        return weight_kg * (1 + reps / 30)

    @classmethod
    def volume(cls, weight_kg: float, reps: int) -> float:
        return weight_kg * reps

    @classmethod
    def lean_mass_kg(cls, weight_kg: Optional[float], body_fat_percentage: Optional[float]) -> Optional[float]:
        if weight_kg is None or body_fat_percentage is None:
            return None
        return weight_kg * (1 - body_fat_percentage / 100)

    @classmethod
    def fat_mass_kg(cls, weight_kg: Optional[float], body_fat_percentage: Optional[float]) -> Optional[float]:
        if weight_kg is None or body_fat_percentage is None:
            return None
        return weight_kg * (body_fat_percentage / 100)
