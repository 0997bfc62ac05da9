from datetime import datetime, date as date_type
from typing import Dict, List

from sqlalchemy import Column, Integer, String, Float, Boolean, Date, DateTime, Enum, ForeignKey
from sqlalchemy.orm import relationship

from fittrack.core.base import Base
from fittrack.schemas.nutrition import MealTypeEnum, NutritionTotals


class FoodItem(Base):
    __tablename__ = "food_items"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False, index=True)
    brand = Column(String, nullable=False, default="")
    serving_size_g = Column(Float, nullable=False)
    serving_unit = Column(String, nullable=False, default="g")
    calories = Column(Float, nullable=False)
    protein_g = Column(Float, nullable=False, default=0)
    carbs_g = Column(Float, nullable=False, default=0)
    fat_g = Column(Float, nullable=False, default=0)
    fiber_g = Column(Float, nullable=False, default=0)
    sugar_g = Column(Float, nullable=False, default=0)
    sodium_mg = Column(Float, nullable=False, default=0)
    barcode = Column(String, nullable=True)
    is_custom = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, nullable=False)

    def __init__(self, **kwargs):
        kwargs.setdefault("brand", "")
        kwargs.setdefault("serving_unit", "g")
        for field in ("protein_g", "carbs_g", "fat_g", "fiber_g", "sugar_g", "sodium_mg"):
            kwargs.setdefault(field, 0.0)
        kwargs.setdefault("is_custom", False)
        kwargs.setdefault("created_at", datetime.now())
        super().__init__(**kwargs)

    def scaled(self, multiplier: float) -> NutritionTotals:
        return NutritionTotals(
            calories=self.calories * multiplier,
            protein_g=self.protein_g * multiplier,
            carbs_g=self.carbs_g * multiplier,
            fat_g=self.fat_g * multiplier,
            fiber_g=self.fiber_g * multiplier,
        )


class NutritionLog(Base):
    __tablename__ = "nutrition_logs"

    id = Column(Integer, primary_key=True)
    # Один журнал на календарный день
    date = Column(Date, nullable=False, unique=True, index=True)
    water_ml = Column(Integer, nullable=False, default=0)
    notes = Column(String, nullable=False, default="")

    entries = relationship(
        "NutritionEntry",
        back_populates="log",
        cascade="all, delete-orphan",
        order_by="NutritionEntry.id",
        lazy="selectin",
    )

    def __init__(self, **kwargs):
        day = kwargs.get("date") or date_type.today()
        if isinstance(day, datetime):
            day = day.date()
        kwargs["date"] = day
        kwargs.setdefault("water_ml", 0)
        kwargs.setdefault("notes", "")
        super().__init__(**kwargs)

    @property
    def total_calories(self) -> float:
        return sum(e.total_calories for e in self.entries)

    @property
    def total_protein_g(self) -> float:
        return sum(e.total_protein_g for e in self.entries)

    @property
    def total_carbs_g(self) -> float:
        return sum(e.total_carbs_g for e in self.entries)

    @property
    def total_fat_g(self) -> float:
        return sum(e.total_fat_g for e in self.entries)

    @property
    def total_fiber_g(self) -> float:
        return sum(e.total_fiber_g for e in self.entries)

    @property
    def entries_by_meal(self) -> Dict[MealTypeEnum, List["NutritionEntry"]]:
        grouped: Dict[MealTypeEnum, List[NutritionEntry]] = {}
        for entry in self.entries:
            grouped.setdefault(entry.meal_type, []).append(entry)
        return grouped


class NutritionEntry(Base):
    __tablename__ = "nutrition_entries"

    id = Column(Integer, primary_key=True)
    log_id = Column(Integer, ForeignKey("nutrition_logs.id"), nullable=False, index=True)
    food_item_id = Column(Integer, nullable=True)  # снимок, без FK: продукт могут удалить
    food_name = Column(String, nullable=False)
    brand = Column(String, nullable=False, default="")
    meal_type = Column(Enum(MealTypeEnum), nullable=False)
    serving_multiplier = Column(Float, nullable=False, default=1.0)
    serving_size_g = Column(Float, nullable=False)
    calories = Column(Float, nullable=False)
    protein_g = Column(Float, nullable=False, default=0)
    carbs_g = Column(Float, nullable=False, default=0)
    fat_g = Column(Float, nullable=False, default=0)
    fiber_g = Column(Float, nullable=False, default=0)
    logged_at = Column(DateTime, nullable=False)

    log = relationship("NutritionLog", back_populates="entries")

    @classmethod
    def from_food(cls, food: FoodItem, meal_type: MealTypeEnum, serving_multiplier: float = 1.0) -> "NutritionEntry":
        return cls(
            food_item_id=food.id,
            food_name=food.name,
            brand=food.brand,
            meal_type=meal_type,
            serving_multiplier=serving_multiplier,
            serving_size_g=food.serving_size_g,
            calories=food.calories,
            protein_g=food.protein_g,
            carbs_g=food.carbs_g,
            fat_g=food.fat_g,
            fiber_g=food.fiber_g,
            logged_at=datetime.now(),
        )

    @property
    def total_calories(self) -> float:
        return self.calories * self.serving_multiplier

    @property
    def total_protein_g(self) -> float:
        return self.protein_g * self.serving_multiplier

    @property
    def total_carbs_g(self) -> float:
        return self.carbs_g * self.serving_multiplier

    @property
    def total_fat_g(self) -> float:
        return self.fat_g * self.serving_multiplier

    @property
    def total_fiber_g(self) -> float:
        return self.fiber_g * self.serving_multiplier

    @property
    def total_grams(self) -> float:
        return self.serving_size_g * self.serving_multiplier
