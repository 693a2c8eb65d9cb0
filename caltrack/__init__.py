# -*- coding: utf-8 -*-
"""Calorie tracker backend: meal diary plus nutrition lookup."""
