# -*- coding: utf-8 -*-
"""Diary — daily / weekly / monthly calorie totals against the target."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Dict, Iterable, List

from ..nutrition.amounts import round_half_up
from .models import DailyEntry, MealBreakdown, MealType, ReportDay, ReportPeriod, ReportResponse

# Locale independent, Monday first like date.weekday().
_WEEKDAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def meal_calories(entry: DailyEntry, meal_type: MealType) -> int:
    return sum(item.calories for item in entry.meal(meal_type).items)


def entry_calories(entry: DailyEntry) -> int:
    return sum(meal_calories(entry, meal_type) for meal_type in MealType)


def start_of_week(day: date) -> date:
    """Weeks start on Sunday."""
    return day - timedelta(days=(day.weekday() + 1) % 7)


def period_bounds(period: ReportPeriod, end: date) -> tuple[date, date]:
    if period == ReportPeriod.weekly:
        return start_of_week(end), end
    if period == ReportPeriod.monthly:
        return end.replace(day=1), end
    return end, end


def _label(period: ReportPeriod, day: date) -> str:
    if period == ReportPeriod.weekly:
        return _WEEKDAY_LABELS[day.weekday()]
    if period == ReportPeriod.monthly:
        return f"{day.day:02d}"
    return day.isoformat()


def _iter_days(start: date, end: date) -> Iterable[date]:
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def build_report(
    entries: Iterable[DailyEntry],
    period: ReportPeriod,
    *,
    end: date,
    target: int,
) -> ReportResponse:
    by_date: Dict[str, DailyEntry] = {e.date: e for e in entries}
    start, end = period_bounds(period, end)

    days: List[ReportDay] = []
    for day in _iter_days(start, end):
        key = day.isoformat()
        entry = by_date.get(key)
        days.append(
            ReportDay(
                date=key,
                label=_label(period, day),
                calories=entry_calories(entry) if entry is not None else 0,
                target=entry.target if entry is not None else target,
            )
        )

    total = sum(d.calories for d in days)
    return ReportResponse(
        period=period,
        start=start.isoformat(),
        end=end.isoformat(),
        target=target,
        total_calories=total,
        average_calories=round(total / len(days), 1) if days else 0.0,
        days=days,
    )


def meal_breakdown(entries: Iterable[DailyEntry], *, end: date, window_days: int = 7) -> List[MealBreakdown]:
    """Average calories per meal type over the window, counting only days with an entry."""
    start = end - timedelta(days=window_days - 1)
    by_date: Dict[str, DailyEntry] = {e.date: e for e in entries}

    totals = {meal_type: 0 for meal_type in MealType}
    days_with_data = 0
    for day in _iter_days(start, end):
        entry = by_date.get(day.isoformat())
        if entry is None:
            continue
        days_with_data += 1
        for meal_type in MealType:
            totals[meal_type] += meal_calories(entry, meal_type)

    if days_with_data == 0:
        return []
    return [
        MealBreakdown(
            meal_type=meal_type,
            name=meal_type.value.capitalize(),
            calories=round_half_up(totals[meal_type] / days_with_data),
        )
        for meal_type in MealType
    ]
