# -*- coding: utf-8 -*-
"""Nutrition — resolve a typed food name (and amount) to ranked candidates.

Edamam is asked first. A successful but empty answer falls back to the
reference table; when neither knows the food the result is an empty list and
the client asks the user for manual entry.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Union

from .amounts import adjust_calories_for_amount, format_quantity, parse_amount
from .edamam import EdamamClient
from .errors import NutritionLookupError
from .models import Amount, CalorieSource, Confidence, NutritionCandidate
from .reference import lookup_reliable_food

logger = logging.getLogger(__name__)

_REFERENCE_AMOUNT = Amount(value=100.0, unit="g")


@dataclass(frozen=True)
class Resolved:
    candidates: List[NutritionCandidate]


@dataclass(frozen=True)
class Unavailable:
    reason: str
    error: NutritionLookupError


ExternalLookup = Union[Resolved, Unavailable]


def build_search_text(query: str, amount: Optional[str] = None) -> str:
    return f"{amount} {query}" if amount else query


def reference_candidate(food_name: str, amount: Optional[str] = None) -> Optional[NutritionCandidate]:
    """Candidate from the reference table, scaled when ``amount`` is grams other than 100."""
    match = lookup_reliable_food(food_name)
    if match is None:
        return None
    key, kcal_per_100g = match

    calories = kcal_per_100g
    serving_size = "100g"
    serving_weight = 100.0
    parsed = parse_amount(amount) if amount else None
    if (
        parsed is not None
        and parsed.unit == "g"
        and math.isfinite(parsed.value)
        and parsed.value != _REFERENCE_AMOUNT.value
    ):
        calories = adjust_calories_for_amount(kcal_per_100g, _REFERENCE_AMOUNT, parsed)
        serving_size = f"{format_quantity(parsed.value)}g"
        serving_weight = parsed.value

    return NutritionCandidate(
        name=key,
        calories=calories,
        serving_size=serving_size,
        serving_weight=serving_weight,
        # The table only carries calories.
        protein_g=0.0,
        carbohydrates_total_g=0.0,
        fat_total_g=0.0,
        calorie_source=CalorieSource.reliable_database,
        confidence=Confidence.medium,
    )


class NutritionResolver:
    def __init__(self, client: Optional[EdamamClient] = None) -> None:
        self.client = client or EdamamClient()

    async def lookup_external(self, search_text: str) -> ExternalLookup:
        try:
            candidates = await self.client.search_recipes(search_text)
        except NutritionLookupError as exc:
            logger.error("Error fetching nutrition data from Edamam: %s", exc)
            return Unavailable(reason=str(exc), error=exc)
        return Resolved(candidates=candidates)

    async def search(
        self,
        query: str,
        amount: Optional[str] = None,
        *,
        fallback_on_unavailable: bool = False,
    ) -> List[NutritionCandidate]:
        """Return up to three candidates for ``query``.

        When Edamam is unavailable the original error is raised, unless
        ``fallback_on_unavailable`` is set, in which case the reference table
        is consulted as for an empty answer.
        """
        outcome = await self.lookup_external(build_search_text(query, amount))
        if isinstance(outcome, Unavailable):
            if not fallback_on_unavailable:
                raise outcome.error
            logger.warning("Edamam unavailable (%s), using reference table for %r", outcome.reason, query)
        elif outcome.candidates:
            return list(outcome.candidates)

        candidate = reference_candidate(query, amount)
        if candidate is None:
            logger.info("No nutrition match for %r", query)
            return []
        logger.info("Reference table match %r for %r", candidate.name, query)
        return [candidate]
