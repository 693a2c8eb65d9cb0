# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest
from datetime import date

from caltrack.diary.models import FoodItemCreate, MealType, ReportPeriod
from caltrack.diary.reports import build_report, entry_calories, meal_breakdown, start_of_week
from caltrack.diary.storage import EntryNotFoundError, MemStorage


def _item(name: str, calories: int | None = None, **macros: float) -> FoodItemCreate:
    return FoodItemCreate(name=name, amount="1 serving", calories=calories, **macros)


class TestMemStorage(unittest.TestCase):
    def setUp(self) -> None:
        self.store = MemStorage(default_target=2000)

    def test_add_creates_entry_with_current_target(self) -> None:
        entry = self.store.add_food_item("2024-03-05", MealType.breakfast, _item("Oatmeal", 150))
        self.assertEqual(entry.date, "2024-03-05")
        self.assertEqual(entry.target, 2000)
        self.assertEqual(len(entry.breakfast.items), 1)
        self.assertEqual(entry.breakfast.items[0].id, 1)
        self.assertEqual(entry.lunch.items, [])

    def test_ids_increase_across_dates_and_meals(self) -> None:
        self.store.add_food_item("2024-03-05", "breakfast", _item("Eggs", 150))
        self.store.add_food_item("2024-03-06", "dinner", _item("Pasta", 400))
        entry = self.store.add_food_item("2024-03-05", "snacks", _item("Apple", 52))
        self.assertEqual(entry.snacks.items[0].id, 3)

    def test_missing_calories_are_estimated(self) -> None:
        entry = self.store.add_food_item("2024-03-05", "lunch", _item("Banana"))
        self.assertEqual(entry.lunch.items[0].calories, 89)
        entry = self.store.add_food_item(
            "2024-03-05", "lunch", _item("Mystery bowl", protein_g=10, carbohydrates_total_g=20, fat_total_g=5)
        )
        self.assertEqual(entry.lunch.items[1].calories, 165)

    def test_remove(self) -> None:
        self.store.add_food_item("2024-03-05", "lunch", _item("Soup", 120))
        self.store.add_food_item("2024-03-05", "lunch", _item("Bread", 80))
        entry = self.store.remove_food_item("2024-03-05", "lunch", 1)
        self.assertEqual([i.name for i in entry.lunch.items], ["Bread"])
        # Unknown id is a no-op.
        entry = self.store.remove_food_item("2024-03-05", "lunch", 99)
        self.assertEqual(len(entry.lunch.items), 1)

    def test_remove_from_missing_date(self) -> None:
        with self.assertRaises(EntryNotFoundError):
            self.store.remove_food_item("2024-01-01", "lunch", 1)

    def test_returned_entries_are_copies(self) -> None:
        entry = self.store.add_food_item("2024-03-05", "lunch", _item("Soup", 120))
        entry.lunch.items.clear()
        stored = self.store.get_daily_entry("2024-03-05")
        assert stored is not None
        self.assertEqual(len(stored.lunch.items), 1)

    def test_all_entries_sorted_by_date(self) -> None:
        self.store.add_food_item("2024-03-07", "lunch", _item("Soup", 120))
        self.store.add_food_item("2024-03-05", "lunch", _item("Soup", 120))
        self.assertEqual([e.date for e in self.store.get_all_entries()], ["2024-03-05", "2024-03-07"])

    def test_set_target_updates_existing_entries(self) -> None:
        self.store.add_food_item("2024-03-05", "lunch", _item("Soup", 120))
        self.store.set_daily_target(1800)
        self.assertEqual(self.store.get_daily_target(), 1800)
        stored = self.store.get_daily_entry("2024-03-05")
        assert stored is not None
        self.assertEqual(stored.target, 1800)
        self.assertEqual(self.store.empty_entry("2024-03-09").target, 1800)


class TestReports(unittest.TestCase):
    def setUp(self) -> None:
        self.store = MemStorage(default_target=2000)
        # 2024-03-03 is a Sunday.
        self.store.add_food_item("2024-03-03", "breakfast", _item("Oatmeal", 300))
        self.store.add_food_item("2024-03-03", "dinner", _item("Steak", 700))
        self.store.add_food_item("2024-03-05", "lunch", _item("Salad", 400))
        self.store.add_food_item("2024-03-05", "breakfast", _item("Toast", 200))
        self.store.add_food_item("2024-02-28", "others", _item("Cake", 500))

    def test_start_of_week_is_sunday(self) -> None:
        self.assertEqual(start_of_week(date(2024, 3, 6)), date(2024, 3, 3))
        self.assertEqual(start_of_week(date(2024, 3, 3)), date(2024, 3, 3))
        self.assertEqual(start_of_week(date(2024, 3, 9)), date(2024, 3, 3))

    def test_entry_calories_sums_all_meals(self) -> None:
        entry = self.store.get_daily_entry("2024-03-03")
        assert entry is not None
        self.assertEqual(entry_calories(entry), 1000)

    def test_weekly_report(self) -> None:
        report = build_report(self.store.get_all_entries(), ReportPeriod.weekly, end=date(2024, 3, 6), target=2000)
        self.assertEqual(report.start, "2024-03-03")
        self.assertEqual(report.end, "2024-03-06")
        self.assertEqual([d.label for d in report.days], ["Sun", "Mon", "Tue", "Wed"])
        self.assertEqual([d.calories for d in report.days], [1000, 0, 600, 0])
        self.assertEqual(report.total_calories, 1600)
        self.assertEqual(report.average_calories, 400.0)

    def test_monthly_report(self) -> None:
        report = build_report(self.store.get_all_entries(), ReportPeriod.monthly, end=date(2024, 3, 5), target=2000)
        self.assertEqual(report.start, "2024-03-01")
        self.assertEqual([d.label for d in report.days], ["01", "02", "03", "04", "05"])
        # February entry is outside the month.
        self.assertEqual(report.total_calories, 1600)

    def test_daily_report(self) -> None:
        report = build_report(self.store.get_all_entries(), ReportPeriod.daily, end=date(2024, 2, 28), target=2000)
        self.assertEqual(len(report.days), 1)
        self.assertEqual(report.days[0].label, "2024-02-28")
        self.assertEqual(report.total_calories, 500)

    def test_meal_breakdown_averages_days_with_data(self) -> None:
        breakdown = meal_breakdown(self.store.get_all_entries(), end=date(2024, 3, 5))
        by_meal = {b.meal_type: b.calories for b in breakdown}
        # Three days with data in the window: 02-28, 03-03, 03-05.
        self.assertEqual(by_meal[MealType.breakfast], 167)
        self.assertEqual(by_meal[MealType.lunch], 133)
        self.assertEqual(by_meal[MealType.dinner], 233)
        self.assertEqual(by_meal[MealType.others], 167)
        self.assertEqual(by_meal[MealType.snacks], 0)
        self.assertEqual([b.name for b in breakdown], ["Breakfast", "Lunch", "Snacks", "Dinner", "Others"])

    def test_meal_breakdown_without_data(self) -> None:
        self.assertEqual(meal_breakdown(self.store.get_all_entries(), end=date(2023, 1, 1)), [])


if __name__ == "__main__":
    unittest.main()
