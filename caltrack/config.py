# -*- coding: utf-8 -*-
"""Centralized configuration, read from the process environment once."""

from __future__ import annotations

import os
from typing import List, Optional


def _env_flag(name: str) -> bool:
    return (os.environ.get(name) or "").strip().lower() in {"1", "true", "yes", "on"}


class Settings:
    """Settings for the calorie tracker backend."""

    def __init__(self) -> None:
        # ---- Edamam recipe API ----
        self.edamam_app_id: Optional[str] = os.environ.get("EDAMAM_APP_ID") or None
        self.edamam_app_key: Optional[str] = os.environ.get("EDAMAM_APP_KEY") or None
        self.edamam_base_url: str = os.environ.get(
            "EDAMAM_BASE_URL", "https://api.edamam.com/api/recipes/v2"
        )
        self.edamam_timeout: float = float(os.environ.get("EDAMAM_TIMEOUT") or "10")
        # Off keeps the all-or-nothing behaviour: an unreachable or unconfigured
        # Edamam fails the search instead of falling back to the reference table.
        self.nutrition_fallback_on_error: bool = _env_flag("CALTRACK_FALLBACK_ON_ERROR")

        # ---- Diary ----
        self.default_daily_target: int = int(os.environ.get("CALTRACK_DAILY_TARGET") or "2500")

        self.log_level: str = (os.environ.get("CALTRACK_LOG_LEVEL") or "INFO").upper()

        cors = os.environ.get("CALTRACK_CORS_ORIGINS", "*")
        if cors.strip() == "*":
            self.cors_origins: List[str] = ["*"]
        else:
            self.cors_origins = [
                origin.strip() for origin in cors.split(",") if origin.strip()
            ]


settings = Settings()
