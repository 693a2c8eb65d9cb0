# -*- coding: utf-8 -*-
"""Diary domain: food items per meal and date, calorie target, reports."""
