# -*- coding: utf-8 -*-
"""Nutrition — API endpoints."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..config import settings
from .models import CalorieEstimateResponse, CalorieSource, Confidence, FoodMacros, NutritionCandidate
from .reference import estimate_calories_with_source
from .resolver import NutritionResolver

router = APIRouter(prefix="/api/nutrition", tags=["Nutrition"])


def get_resolver() -> NutritionResolver:
    return NutritionResolver()


@router.get(
    "/search",
    response_model=List[NutritionCandidate],
    response_model_exclude_none=True,
    summary="Nutrition candidates for a food name",
)
async def search_nutrition(
    query: Optional[str] = Query(default=None, description="Food name, e.g. 'banana'"),
    amount: Optional[str] = Query(default=None, description="e.g. '150g', '1 cup', 'medium'"),
    resolver: NutritionResolver = Depends(get_resolver),
):
    if not query or not query.strip():
        raise HTTPException(status_code=400, detail="Query parameter is required")
    # NutritionLookupError is turned into a 500 by the app-level handler.
    return await resolver.search(
        query.strip(),
        (amount or "").strip() or None,
        fallback_on_unavailable=settings.nutrition_fallback_on_error,
    )


@router.post("/estimate", response_model=CalorieEstimateResponse, summary="Estimate calories from macros")
def estimate_calories(food: FoodMacros):
    calories, source = estimate_calories_with_source(food)
    confidence = Confidence.medium if source == CalorieSource.reliable_database else Confidence.low
    return CalorieEstimateResponse(calories=calories, calorie_source=source, confidence=confidence)
