# -*- coding: utf-8 -*-
"""Nutrition — Edamam Recipe API v2 lookup."""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import Any, List, Optional

import httpx
from pydantic import ValidationError

from ..config import settings
from .amounts import DEFAULT_CALORIES, round_half_up, round_to_tenth
from .errors import ConfigurationError, ExternalServiceError, MalformedResponseError
from .models import (
    CalorieSource,
    Confidence,
    EdamamRecipe,
    EdamamSearchResponse,
    NutritionCandidate,
)

logger = logging.getLogger(__name__)

MAX_RESULTS = 3

# Edamam matches generic food/recipe names better without a quantity prefix.
_QUANTITY_PREFIX_RE = re.compile(r"^\d+\s*(g|oz|cups?|tbsp|tsp|pound|ml|l)\s+", re.IGNORECASE)


@dataclass(frozen=True)
class EdamamSettings:
    app_id: Optional[str]
    app_key: Optional[str]
    base_url: str
    timeout: float


def resolve_edamam_settings() -> EdamamSettings:
    return EdamamSettings(
        app_id=settings.edamam_app_id,
        app_key=settings.edamam_app_key,
        base_url=settings.edamam_base_url,
        timeout=settings.edamam_timeout,
    )


def clean_query(query: str) -> str:
    """Drop a leading "<number><unit> " token, e.g. "200g chicken" -> "chicken"."""
    return _QUANTITY_PREFIX_RE.sub("", query, count=1)


def _per_100g(total: float, total_weight: float) -> Optional[float]:
    if not math.isfinite(total_weight) or total_weight <= 0:
        return None
    value = total / total_weight * 100
    if not math.isfinite(value) or value < 0:
        return None
    return value


def candidate_from_recipe(recipe: EdamamRecipe) -> NutritionCandidate:
    """Normalize recipe totals (relative to the whole recipe weight) to per-100g values."""
    weight = recipe.total_weight

    def macro(code: str) -> Optional[float]:
        nutrient = recipe.total_nutrients.get(code)
        if nutrient is None:
            return None
        return _per_100g(nutrient.quantity, weight)

    calories = _per_100g(recipe.calories, weight)
    if calories is None:
        logger.warning(
            "Edamam recipe %r has unusable calories/weight (%r / %r), using default %s",
            recipe.label,
            recipe.calories,
            weight,
            DEFAULT_CALORIES,
        )
        calories_int = DEFAULT_CALORIES
    else:
        calories_int = round_half_up(calories)

    fiber = macro("FIBTG")
    return NutritionCandidate(
        name=recipe.label,
        calories=calories_int,
        serving_size="100g",
        serving_weight=100.0,
        protein_g=round_to_tenth(macro("PROCNT") or 0.0),
        carbohydrates_total_g=round_to_tenth(macro("CHOCDF") or 0.0),
        fat_total_g=round_to_tenth(macro("FAT") or 0.0),
        fiber_g=round_to_tenth(fiber) if fiber else None,
        calorie_source=CalorieSource.edamam,
        # Recipe-level data is approximate for a single ingredient.
        confidence=Confidence.medium,
        image=recipe.image,
    )


def normalize_search_response(raw: Any) -> List[NutritionCandidate]:
    if not isinstance(raw, dict):
        raise MalformedResponseError(f"Edamam response is not a JSON object: {type(raw).__name__}")
    try:
        payload = EdamamSearchResponse.model_validate(raw)
    except ValidationError as exc:
        raise MalformedResponseError(f"Unexpected Edamam response shape: {exc}") from exc
    return [candidate_from_recipe(hit.recipe) for hit in payload.hits[:MAX_RESULTS]]


class EdamamClient:
    """Thin async client for the public recipe search.

    ``transport`` lets callers (tests) swap the network for an
    ``httpx.MockTransport``.
    """

    def __init__(
        self,
        config: Optional[EdamamSettings] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.config = config or resolve_edamam_settings()
        self._transport = transport

    async def search_recipes(self, query: str) -> List[NutritionCandidate]:
        cfg = self.config
        if not cfg.app_id or not cfg.app_key:
            raise ConfigurationError("Edamam API credentials are missing")

        params = {
            "type": "public",
            "q": clean_query(query),
            "app_id": cfg.app_id,
            "app_key": cfg.app_key,
        }
        try:
            async with httpx.AsyncClient(
                timeout=cfg.timeout, follow_redirects=True, transport=self._transport
            ) as client:
                resp = await client.get(cfg.base_url, params=params)
        except httpx.HTTPError as exc:
            raise ExternalServiceError(f"Edamam request failed: {exc!r}") from exc

        if not resp.is_success:
            raise ExternalServiceError(
                f"Edamam API responded with status: {resp.status_code}",
                status_code=resp.status_code,
            )

        try:
            raw = resp.json()
        except ValueError as exc:
            snippet = (resp.text or "").replace("\n", " ").strip()[:200]
            raise MalformedResponseError(f"Edamam returned non-JSON response: {snippet}") from exc

        candidates = normalize_search_response(raw)
        logger.debug("Edamam returned %d candidate(s) for %r", len(candidates), params["q"])
        return candidates
