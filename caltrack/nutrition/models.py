# -*- coding: utf-8 -*-
"""Nutrition — data models (amounts, candidates, Edamam payloads)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


@dataclass(frozen=True)
class Amount:
    value: float
    unit: str


class CalorieSource(str, Enum):
    edamam = "edamam"
    reliable_database = "reliable_database"
    estimated = "estimated"


class Confidence(str, Enum):
    high = "high"
    medium = "medium"
    low = "low"


class NutritionCandidate(BaseModel):
    """One ranked nutrition match for a typed food name.

    Serialized with the camelCase keys the web client reads
    (``servingSize``, ``calorieSource`` ...); macros keep their snake_case names.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str
    calories: int = Field(..., ge=0)
    serving_size: str = Field("100g", alias="servingSize")
    serving_weight: float = Field(100.0, ge=0, alias="servingWeight")
    protein_g: float = Field(0.0, ge=0)
    carbohydrates_total_g: float = Field(0.0, ge=0)
    fat_total_g: float = Field(0.0, ge=0)
    fiber_g: Optional[float] = Field(None, ge=0)
    calorie_source: CalorieSource = Field(..., alias="calorieSource")
    confidence: Confidence
    image: Optional[str] = None


class FoodMacros(BaseModel):
    name: Optional[str] = Field(None, description="Food name, used for the reference table lookup")
    protein_g: Optional[float] = Field(None, ge=0)
    carbohydrates_total_g: Optional[float] = Field(None, ge=0)
    fat_total_g: Optional[float] = Field(None, ge=0)


class CalorieEstimateResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    calories: int = Field(..., ge=0)
    calorie_source: CalorieSource = Field(..., alias="calorieSource")
    confidence: Confidence


# ---- Edamam Recipe API v2 payload (only the fields we read) ----


class EdamamNutrient(BaseModel):
    label: Optional[str] = None
    quantity: float = 0.0
    unit: Optional[str] = None


class EdamamRecipe(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    label: str
    image: Optional[str] = None
    calories: float
    total_weight: float = Field(0.0, alias="totalWeight")
    total_nutrients: Dict[str, EdamamNutrient] = Field(default_factory=dict, alias="totalNutrients")


class EdamamHit(BaseModel):
    recipe: EdamamRecipe


class EdamamSearchResponse(BaseModel):
    hits: List[EdamamHit] = Field(default_factory=list)

    @field_validator("hits", mode="before")
    @classmethod
    def _coerce_hits(cls, value: object) -> object:
        # Edamam omits or nulls "hits" for queries without matches.
        if value is None:
            return []
        return value
