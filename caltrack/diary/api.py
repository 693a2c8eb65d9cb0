# -*- coding: utf-8 -*-
"""Diary — API endpoints (daily entries, target, reports)."""

from __future__ import annotations

import re
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from .models import (
    DATE_PATTERN,
    DailyEntry,
    FoodItemCreate,
    MealBreakdown,
    MealType,
    ReportPeriod,
    ReportResponse,
    TargetResponse,
    TargetUpdate,
)
from .reports import build_report, meal_breakdown
from .storage import EntryNotFoundError, MemStorage, storage

router = APIRouter(prefix="/api/calories", tags=["Calories"])
reports_router = APIRouter(prefix="/api/reports", tags=["Reports"])

_DATE_RE = re.compile(DATE_PATTERN)


def get_storage() -> MemStorage:
    return storage


def _date_or_400(value: str) -> date:
    if not _DATE_RE.match(value):
        raise HTTPException(status_code=400, detail="Invalid date format. Expected YYYY-MM-DD")
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail="Invalid date format. Expected YYYY-MM-DD") from exc


def _meal_type_or_400(value: str) -> MealType:
    try:
        return MealType(value)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail="Invalid meal type") from exc


def _food_id_or_400(value: str) -> int:
    try:
        return int(value)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail="Invalid food ID") from exc


@router.get("", response_model=List[DailyEntry], summary="All daily entries, oldest first")
def list_entries(store: MemStorage = Depends(get_storage)):
    return store.get_all_entries()


@router.put("/target", response_model=TargetResponse, summary="Update the daily calorie target")
def update_target(request: TargetUpdate, store: MemStorage = Depends(get_storage)):
    store.set_daily_target(request.target)
    return TargetResponse(target=request.target)


@router.get("/{entry_date}", response_model=DailyEntry, summary="Daily entry (empty when nothing logged)")
def get_entry(entry_date: str, store: MemStorage = Depends(get_storage)):
    _date_or_400(entry_date)
    entry = store.get_daily_entry(entry_date)
    if entry is None:
        return store.empty_entry(entry_date)
    return entry


@router.post("/{entry_date}/{meal_type}", response_model=DailyEntry, status_code=201, summary="Add a food item")
def add_food_item(
    entry_date: str,
    meal_type: str,
    item: FoodItemCreate,
    store: MemStorage = Depends(get_storage),
):
    _date_or_400(entry_date)
    meal = _meal_type_or_400(meal_type)
    return store.add_food_item(entry_date, meal, item)


@router.delete("/{entry_date}/{meal_type}/{food_id}", response_model=DailyEntry, summary="Remove a food item")
def remove_food_item(
    entry_date: str,
    meal_type: str,
    food_id: str,
    store: MemStorage = Depends(get_storage),
):
    _date_or_400(entry_date)
    meal = _meal_type_or_400(meal_type)
    item_id = _food_id_or_400(food_id)
    try:
        return store.remove_food_item(entry_date, meal, item_id)
    except EntryNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


def _end_or_today(end: Optional[str]) -> date:
    return _date_or_400(end) if end else date.today()


@reports_router.get("/daily/{entry_date}", response_model=ReportResponse, summary="Calories for one day")
def daily_report(entry_date: str, store: MemStorage = Depends(get_storage)):
    day = _date_or_400(entry_date)
    return build_report(store.get_all_entries(), ReportPeriod.daily, end=day, target=store.get_daily_target())


@reports_router.get("/weekly", response_model=ReportResponse, summary="Calories from Sunday to `end`")
def weekly_report(
    end: Optional[str] = Query(default=None, description="YYYY-MM-DD, defaults to today"),
    store: MemStorage = Depends(get_storage),
):
    return build_report(
        store.get_all_entries(), ReportPeriod.weekly, end=_end_or_today(end), target=store.get_daily_target()
    )


@reports_router.get("/monthly", response_model=ReportResponse, summary="Calories from the 1st of the month to `end`")
def monthly_report(
    end: Optional[str] = Query(default=None, description="YYYY-MM-DD, defaults to today"),
    store: MemStorage = Depends(get_storage),
):
    return build_report(
        store.get_all_entries(), ReportPeriod.monthly, end=_end_or_today(end), target=store.get_daily_target()
    )


@reports_router.get("/meals", response_model=List[MealBreakdown], summary="Average calories per meal, last 7 days")
def meals_report(
    end: Optional[str] = Query(default=None, description="YYYY-MM-DD, defaults to today"),
    store: MemStorage = Depends(get_storage),
):
    return meal_breakdown(store.get_all_entries(), end=_end_or_today(end))
