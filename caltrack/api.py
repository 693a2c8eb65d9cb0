# -*- coding: utf-8 -*-
"""
Calorie tracker API

Meal diary with daily targets and reports, plus nutrition lookup for typed food names.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import settings
from .diary.api import reports_router as diary_reports_router
from .diary.api import router as diary_router
from .nutrition.api import router as nutrition_router
from .nutrition.errors import NutritionLookupError

logging.basicConfig(level=settings.log_level)

app = FastAPI(
    title="Calorie Tracker",
    description="Daily calorie diary with Edamam-backed nutrition lookup",
    version="1.0.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(NutritionLookupError)
async def _nutrition_lookup_failed(request: Request, exc: NutritionLookupError) -> JSONResponse:  # noqa: ARG001
    return JSONResponse(status_code=500, content={"message": "Failed to fetch nutrition data"})


app.include_router(diary_router)
app.include_router(diary_reports_router)
app.include_router(nutrition_router)


@app.get("/api/health")
def health() -> dict:
    return {"ok": True}
