# -*- coding: utf-8 -*-
"""Nutrition — reference calories for common foods and the macro estimator.

``RELIABLE_FOODS`` is matched by substring against the lowercased food name and
the FIRST entry in declaration order wins. Keys shadowed by an earlier, broader
key are therefore unreachable ("sweet potato" resolves to "potato"); move a
specific key above the broad one if it needs to win.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, Optional, Tuple

from .amounts import DEFAULT_CALORIES, round_half_up
from .models import CalorieSource

logger = logging.getLogger(__name__)

# (name substring, kcal per 100g)
RELIABLE_FOODS: Tuple[Tuple[str, int], ...] = (
    # Meats
    ("chicken breast", 165),
    ("grilled chicken breast", 165),
    ("chicken thigh", 209),
    ("ground beef", 250),
    ("beef steak", 250),
    ("pork chop", 231),
    ("bacon", 417),
    ("salmon", 208),
    ("tuna", 184),
    ("tilapia", 128),
    # Fruits
    ("apple", 52),
    ("banana", 89),
    ("orange", 47),
    ("grape", 69),
    ("strawberry", 32),
    ("blueberry", 57),
    ("watermelon", 30),
    # Vegetables
    ("carrot", 41),
    ("broccoli", 34),
    ("spinach", 23),
    ("potato", 77),
    ("sweet potato", 86),
    ("tomato", 18),
    ("cucumber", 15),
    # Dairy & eggs
    ("milk", 42),
    ("cheese", 402),
    ("yogurt", 59),
    ("butter", 717),
    ("egg", 155),
    ("boiled egg", 155),
    # Grains & bread
    ("white rice", 130),
    ("brown rice", 111),
    ("pasta", 131),
    ("bread", 265),
    ("white bread", 265),
    ("whole wheat bread", 247),
    ("oatmeal", 68),
    # Nuts & seeds
    ("almonds", 579),
    ("walnuts", 654),
    ("peanuts", 567),
    ("cashews", 553),
    # Prepared foods
    ("pizza", 266),
    ("hamburger", 295),
    ("french fries", 312),
    ("ice cream", 207),
    ("chocolate", 546),
    ("potato chips", 536),
)

_MACRO_KCAL_PER_G: Tuple[Tuple[str, int], ...] = (
    ("protein_g", 4),
    ("carbohydrates_total_g", 4),
    ("fat_total_g", 9),
)


def lookup_reliable_food(food_name: str) -> Optional[Tuple[str, int]]:
    """Return ``(matched key, kcal per 100g)`` for the first key contained in the name."""
    name = (food_name or "").lower()
    if not name:
        return None
    for key, calories in RELIABLE_FOODS:
        if key in name:
            return key, calories
    return None


def _fields_from_obj(food: Any) -> Dict[str, Any]:
    if hasattr(food, "model_dump"):
        return food.model_dump()
    if isinstance(food, dict):
        return food
    return {k: getattr(food, k, None) for k in ("name", *(m for m, _ in _MACRO_KCAL_PER_G))}


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def estimate_calories_with_source(food: Any) -> Tuple[int, CalorieSource]:
    """Estimate calories for a food whose macros may be known but calories are not.

    Reference table first, then protein*4 + carbs*4 + fat*9. A zero or unusable
    total falls back to the default of 100.
    """
    data = _fields_from_obj(food)

    name = data.get("name")
    if isinstance(name, str):
        match = lookup_reliable_food(name)
        if match is not None:
            return match[1], CalorieSource.reliable_database

    total = 0.0
    for field, kcal_per_g in _MACRO_KCAL_PER_G:
        value = data.get(field)
        if _is_number(value):
            total += value * kcal_per_g

    # Negative macros can only come from a raw mapping; they take the default too.
    if not math.isfinite(total) or total <= 0:
        logger.debug("No usable macros for %r, using default %s kcal", name, DEFAULT_CALORIES)
        return DEFAULT_CALORIES, CalorieSource.estimated
    return round_half_up(total), CalorieSource.estimated


def calculate_estimated_calories(food: Any) -> int:
    calories, _ = estimate_calories_with_source(food)
    return calories
