# -*- coding: utf-8 -*-
"""Nutrition lookup: amount parsing, unit scaling, Edamam search, reference fallback."""

from .amounts import DEFAULT_CALORIES, adjust_calories_for_amount, parse_amount
from .errors import ConfigurationError, ExternalServiceError, MalformedResponseError, NutritionLookupError
from .models import Amount, NutritionCandidate
from .reference import calculate_estimated_calories
from .resolver import NutritionResolver

__all__ = [
    "DEFAULT_CALORIES",
    "Amount",
    "NutritionCandidate",
    "NutritionResolver",
    "NutritionLookupError",
    "ConfigurationError",
    "ExternalServiceError",
    "MalformedResponseError",
    "adjust_calories_for_amount",
    "calculate_estimated_calories",
    "parse_amount",
]
