# -*- coding: utf-8 -*-
"""Diary — in-memory daily entry storage (process lifetime only)."""

from __future__ import annotations

import threading
from typing import Dict, List, Optional

from ..config import settings
from ..nutrition.reference import calculate_estimated_calories
from .models import DailyEntry, FoodItem, FoodItemCreate, MealType


class EntryNotFoundError(LookupError):
    pass


class MemStorage:
    """Daily entries keyed by ``YYYY-MM-DD``.

    Food ids increase monotonically for the life of the store. Callers get
    deep copies, so mutating a returned entry never touches the store.
    """

    def __init__(self, default_target: Optional[int] = None) -> None:
        self._entries: Dict[str, DailyEntry] = {}
        self._next_food_id = 1
        self._daily_target = default_target if default_target is not None else settings.default_daily_target
        self._lock = threading.Lock()

    def empty_entry(self, date: str) -> DailyEntry:
        return DailyEntry(date=date, target=self._daily_target)

    def get_daily_entry(self, date: str) -> Optional[DailyEntry]:
        with self._lock:
            entry = self._entries.get(date)
            return entry.model_copy(deep=True) if entry is not None else None

    def get_all_entries(self) -> List[DailyEntry]:
        with self._lock:
            return [self._entries[d].model_copy(deep=True) for d in sorted(self._entries)]

    def add_food_item(self, date: str, meal_type: MealType | str, item: FoodItemCreate) -> DailyEntry:
        data = item.model_dump()
        if data.get("calories") is None:
            data["calories"] = calculate_estimated_calories(item)

        with self._lock:
            entry = self._entries.get(date)
            if entry is None:
                entry = self.empty_entry(date)
            food = FoodItem(id=self._next_food_id, **data)
            self._next_food_id += 1
            entry.meal(meal_type).items.append(food)
            self._entries[date] = entry
            return entry.model_copy(deep=True)

    def remove_food_item(self, date: str, meal_type: MealType | str, food_id: int) -> DailyEntry:
        with self._lock:
            entry = self._entries.get(date)
            if entry is None:
                raise EntryNotFoundError(f"No entry found for date: {date}")
            meal = entry.meal(meal_type)
            # Unknown ids are a no-op.
            meal.items = [i for i in meal.items if i.id != food_id]
            return entry.model_copy(deep=True)

    def get_daily_target(self) -> int:
        return self._daily_target

    def set_daily_target(self, target: int) -> None:
        with self._lock:
            self._daily_target = target
            for entry in self._entries.values():
                entry.target = target


storage = MemStorage()
