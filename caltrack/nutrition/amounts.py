# -*- coding: utf-8 -*-
"""Nutrition — amount parsing and calorie scaling between units."""

from __future__ import annotations

import logging
import math
import re
from types import MappingProxyType
from typing import Mapping, Optional

from .models import Amount

logger = logging.getLogger(__name__)

# Substituted wherever an estimate would otherwise be NaN, infinite or negative.
DEFAULT_CALORIES = 100

# canonical unit -> {other unit: how many canonical units one of it holds}
CONVERSION_FACTORS: Mapping[str, Mapping[str, float]] = MappingProxyType(
    {
        "g": MappingProxyType(
            {
                "kg": 1000.0,
                "oz": 28.35,
                "lb": 453.592,
                "cup": 128.0,  # average, depends on food
            }
        ),
        "ml": MappingProxyType(
            {
                "l": 1000.0,
                "cup": 240.0,
                "tbsp": 15.0,
                "tsp": 5.0,
                "oz": 29.57,
            }
        ),
    }
)

SIZE_MULTIPLIERS: Mapping[str, float] = MappingProxyType(
    {
        "small": 0.7,
        "medium": 1.0,
        "large": 1.3,
    }
)

_PARENS_RE = re.compile(r"[()]")
_NUMERIC_AMOUNT_RE = re.compile(r"^(\d+(?:\.\d+)?)\s*([a-zA-Z]+)?$")
_SIZED_ITEM_RE = re.compile(r"^(small|medium|large)\s+(.+)$", re.IGNORECASE)


def round_half_up(value: float) -> int:
    """Round .5 upwards (2.5 -> 3), unlike Python's banker's rounding."""
    return int(math.floor(value + 0.5))


def round_to_tenth(value: float) -> float:
    return math.floor(value * 10 + 0.5) / 10


def format_quantity(value: float) -> str:
    """Render 150.0 as "150" and 1.5 as "1.5"."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def parse_amount(text: str) -> Optional[Amount]:
    """Parse "100g", "2 cups", "(1.5 oz)" or "medium apple" into an Amount.

    A bare number gets the unit "serving". Size words map to a multiplier of
    an implicit base item and keep the item name as the unit. Returns None for
    anything else, including the empty string. Zero values are not rejected.
    """
    if not text:
        return None
    cleaned = _PARENS_RE.sub("", text).strip()

    match = _NUMERIC_AMOUNT_RE.match(cleaned)
    if match:
        unit = (match.group(2) or "").lower() or "serving"
        return Amount(value=float(match.group(1)), unit=unit)

    match = _SIZED_ITEM_RE.match(cleaned)
    if match:
        size = match.group(1).lower()
        return Amount(value=SIZE_MULTIPLIERS[size], unit=match.group(2))

    return None


def _finite_or_default(calories: float) -> int:
    if not math.isfinite(calories) or calories < 0:
        logger.warning("Calorie estimate %r is not usable, using default %s", calories, DEFAULT_CALORIES)
        return DEFAULT_CALORIES
    return round_half_up(calories)


def adjust_calories_for_amount(base_calories: float, base: Amount, target: Amount) -> int:
    """Scale calories known for ``base`` to the ``target`` amount.

    Conversions only go through the canonical "g" and "ml" units. When no
    conversion path exists the base calories are returned unchanged.
    """
    if not base.value > 0:
        logger.warning(
            "Cannot scale calories from non-positive amount %s %s, using default %s",
            base.value,
            base.unit,
            DEFAULT_CALORIES,
        )
        return DEFAULT_CALORIES

    if base.unit == target.unit:
        return _finite_or_default(base_calories * (target.value / base.value))

    for canonical, conversions in CONVERSION_FACTORS.items():
        if base.unit == canonical and target.unit in conversions:
            factor = conversions[target.unit]
            return _finite_or_default(base_calories * (target.value * factor / base.value))
        if target.unit == canonical and base.unit in conversions:
            factor = conversions[base.unit]
            return _finite_or_default(base_calories * (target.value / (base.value * factor)))

    logger.warning("Could not convert between units: %s and %s", base.unit, target.unit)
    return _finite_or_default(base_calories)
