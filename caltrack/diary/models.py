# -*- coding: utf-8 -*-
"""Diary — Pydantic models."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"


class MealType(str, Enum):
    breakfast = "breakfast"
    lunch = "lunch"
    snacks = "snacks"
    dinner = "dinner"
    others = "others"


class FoodItemCreate(BaseModel):
    name: str = Field(..., min_length=1, description="Food name, e.g. 'banana'")
    amount: str = Field(..., min_length=1, description="Human-readable amount, e.g. '150g'")
    calories: Optional[int] = Field(None, ge=1, description="Estimated from name/macros when omitted")
    notes: str = Field("", max_length=2000)
    protein_g: Optional[float] = Field(None, ge=0)
    carbohydrates_total_g: Optional[float] = Field(None, ge=0)
    fat_total_g: Optional[float] = Field(None, ge=0)


class FoodItem(FoodItemCreate):
    id: int
    calories: int = Field(..., ge=0)


class Meal(BaseModel):
    items: List[FoodItem] = Field(default_factory=list)


class DailyEntry(BaseModel):
    date: str = Field(..., pattern=DATE_PATTERN, description="YYYY-MM-DD")
    target: int = Field(2500, ge=1)
    breakfast: Meal = Field(default_factory=Meal)
    lunch: Meal = Field(default_factory=Meal)
    snacks: Meal = Field(default_factory=Meal)
    dinner: Meal = Field(default_factory=Meal)
    others: Meal = Field(default_factory=Meal)

    def meal(self, meal_type: MealType | str) -> Meal:
        return getattr(self, MealType(meal_type).value)


class TargetUpdate(BaseModel):
    target: int = Field(..., ge=1, description="Daily calorie target")


class TargetResponse(BaseModel):
    target: int


class ReportPeriod(str, Enum):
    daily = "daily"
    weekly = "weekly"
    monthly = "monthly"


class ReportDay(BaseModel):
    date: str = Field(..., description="YYYY-MM-DD")
    label: str = Field(..., description="Chart label, e.g. 'Sun' or '07'")
    calories: int = Field(0, ge=0)
    target: int


class ReportResponse(BaseModel):
    period: ReportPeriod
    start: str
    end: str
    target: int
    total_calories: int = Field(0, ge=0)
    average_calories: float = Field(0.0, ge=0)
    days: List[ReportDay]


class MealBreakdown(BaseModel):
    meal_type: MealType
    name: str
    calories: int = Field(0, ge=0, description="Average per day with data")
