"""API routes for daily workout generation and configuration."""

import logging
from datetime import datetime
from functools import lru_cache
from typing import Any, NoReturn, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from daily_workout_api.config import settings
from daily_workout_api.errors import (
    CatalogUnavailableError,
    ConfigInvalidError,
    ConfigNotFoundError,
    EmptyCardioPoolError,
    TemplateNotFoundError,
    WorkbookError,
)
from daily_workout_api.models import WeightedCatalog, WorkoutConfig
from daily_workout_api.services.config_store import ConfigStore
from daily_workout_api.services.workout_service import WorkoutService

logger = logging.getLogger(__name__)

BUILD_TIMESTAMP = datetime.now().isoformat()

router = APIRouter()

SERVICE_ERRORS = (
    TemplateNotFoundError,
    CatalogUnavailableError,
    WorkbookError,
    ConfigNotFoundError,
    ConfigInvalidError,
    EmptyCardioPoolError,
)


# ---------------------------------------------------------------------------
# Dependencies
# ---------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_workout_service() -> WorkoutService:
    """Process-wide service; holds the catalog cache and the config override."""
    return WorkoutService(
        config_store=ConfigStore(settings.WORKOUT_CONFIG_PATH),
        workbook_path=settings.WORKBOOK_PATH,
        sheet_name=settings.EXERCISE_SHEET,
    )


# ---------------------------------------------------------------------------
# Request models / helpers
# ---------------------------------------------------------------------------


class RegenerateRequest(BaseModel):
    """Body for POST /workout"""
    day: Optional[str] = None


def _error_status(error: Exception) -> int:
    if isinstance(error, TemplateNotFoundError):
        return 404
    if isinstance(error, (CatalogUnavailableError, WorkbookError,
                          ConfigNotFoundError, ConfigInvalidError)):
        return 503
    return 500


def _raise_http(error: Exception, action: str) -> NoReturn:
    status = _error_status(error)
    if status == 500:
        logger.exception(f"Failed to {action}: {error}")
    else:
        logger.warning(f"Failed to {action}: {error}")
    raise HTTPException(status_code=status, detail=f"Failed to {action}: {error}")


def _catalog_summary(catalog: WeightedCatalog) -> list:
    return [
        {
            "name": category.name,
            "exercise_count": len(category.exercises),
            "exercises": [entry.model_dump() for entry in category.exercises],
        }
        for category in catalog.categories
    ]


# ---------------------------------------------------------------------------
# Version / health
# ---------------------------------------------------------------------------


@router.get("/version")
async def get_version():
    """Get API version and build information."""
    return JSONResponse({
        "service": "daily-workout-api",
        "environment": settings.ENVIRONMENT,
        "build_timestamp": BUILD_TIMESTAMP,
    })


@router.get("/health")
def health():
    """Health check endpoint."""
    return {"ok": True}


# ---------------------------------------------------------------------------
# Workouts
# ---------------------------------------------------------------------------


@router.get("/workout")
def get_workout(
    day: Optional[str] = Query(default=None, description="Day name, e.g. 'monday'; defaults to today"),
    service: WorkoutService = Depends(get_workout_service),
):
    """Generate a workout plus the catalog it was drawn from."""
    try:
        catalog = service.catalog()
        workout = service.generate(day, catalog=catalog)
        templates = service.templates()
    except SERVICE_ERRORS as e:
        _raise_http(e, "generate workout")

    return {
        "success": True,
        "workout": workout.model_dump(mode="json"),
        "available_days": [t.day_label for t in templates],
        "categories": _catalog_summary(catalog),
    }


@router.post("/workout")
def regenerate_workout(
    request: Optional[RegenerateRequest] = None,
    service: WorkoutService = Depends(get_workout_service),
):
    """Re-roll the workout for a day."""
    try:
        workout = service.generate(request.day if request else None)
    except SERVICE_ERRORS as e:
        _raise_http(e, "regenerate workout")

    return {
        "success": True,
        "workout": workout.model_dump(mode="json"),
        "regenerated": True,
    }


@router.get("/catalog")
def get_catalog(service: WorkoutService = Depends(get_workout_service)):
    """Extracted categories with their weights and any data-quality diagnostics."""
    try:
        result = service.extraction()
    except (WorkbookError, ConfigNotFoundError, ConfigInvalidError) as e:
        _raise_http(e, "load catalog")

    return {
        "success": True,
        "categories": _catalog_summary(result.catalog),
        "diagnostics": [d.model_dump(mode="json") for d in result.diagnostics],
    }


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


@router.get("/config")
def get_config(service: WorkoutService = Depends(get_workout_service)):
    """Return the current configuration document."""
    try:
        config = service.config_store.load()
    except (ConfigNotFoundError, ConfigInvalidError) as e:
        _raise_http(e, "load configuration")

    return {"success": True, "config": config.model_dump(mode="json", by_alias=True)}


@router.post("/config")
def update_config(
    payload: Any = Body(None),
    service: WorkoutService = Depends(get_workout_service),
):
    """Validate and store a new configuration document."""
    raw_config = payload.get("config") if isinstance(payload, dict) else None
    if not raw_config:
        return JSONResponse(status_code=400, content={
            "success": False,
            "error": "Config data is required",
        })

    try:
        config = WorkoutConfig.model_validate(raw_config)
    except ValidationError as e:
        logger.warning(f"Rejected configuration update: {e.error_count()} errors")
        return JSONResponse(status_code=400, content={
            "success": False,
            "error": "Invalid config structure",
            "details": e.errors(include_url=False, include_context=False),
        })

    service.config_store.save(config)
    return {"success": True, "message": "Configuration updated successfully"}
