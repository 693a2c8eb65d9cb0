# -*- coding: utf-8 -*-
"""Nutrition — lookup errors."""

from __future__ import annotations

from typing import Optional


class NutritionLookupError(Exception):
    """Base class for failures of the external nutrition lookup."""


class ConfigurationError(NutritionLookupError):
    """Edamam credentials are not configured."""


class ExternalServiceError(NutritionLookupError):
    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class MalformedResponseError(NutritionLookupError):
    """Edamam answered, but not with the payload shape we expect."""
