"""API routes for workout plan parsing."""

import asyncio
import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query

from workout_plan_api.config import settings
from workout_plan_api.models import ParseWorkoutRequest, ParseWorkoutResponse, ScheduleEntry
from workout_plan_api.parsers.dispatcher import dispatch_workout_text, process_workout_text
from workout_plan_api.parsers.models import CatalogEntry, WorkoutBlock
from workout_plan_api.services.catalog_service import load_catalog, CatalogServiceError
from workout_plan_api.services.schedule_service import (
    build_schedule,
    load_template,
    resolve_day,
    TemplateNotFoundError,
)

logger = logging.getLogger(__name__)

router = APIRouter()

# ---------------------------------------------------------------------------
# Helper functions
# ---------------------------------------------------------------------------


def _catalog_or_empty() -> List[CatalogEntry]:
    """Configured catalog; an unreadable file degrades to an empty catalog."""
    try:
        return load_catalog()
    except CatalogServiceError as e:
        logger.warning(f"Catalog unavailable, parsing with empty catalog: {e}")
        return []


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------


@router.get("/health")
def health():
    """Simple health check."""
    return {"status": "ok", "environment": settings.ENVIRONMENT}


@router.post("/parse/workout", response_model=ParseWorkoutResponse)
async def parse_workout(request: ParseWorkoutRequest) -> ParseWorkoutResponse:
    """
    Parse tagged plan text into workout blocks.

    ## Request Body
    - **text**: Plan text using [TREADMILL]/[ENGINE], [STRENGTH]/[ARMOR], [CORE] tags
    - **catalog**: Optional exercise catalog used for XP factors

    ## Response
    - blocks: Engine blocks, then Armor blocks, then Core Work blocks
    - total_xp: Sum of block XP
    - warnings: Lines the parser could not place
    """
    if not request.text.strip():
        raise HTTPException(status_code=400, detail="Text is required")

    catalog = request.catalog if request.catalog is not None else _catalog_or_empty()
    result = await asyncio.to_thread(dispatch_workout_text, request.text, catalog)

    return ParseWorkoutResponse(
        blocks=result.blocks,
        total_xp=result.total_xp,
        warnings=result.warnings,
    )


@router.get("/workout", response_model=List[WorkoutBlock])
def get_workout(date: Optional[str] = Query(default=None, description="Day name or YYYY-MM-DD")):
    """Blocks for one day's plan template; empty when there is no template."""
    day = resolve_day(date)

    try:
        text = load_template(day)
    except TemplateNotFoundError as e:
        logger.error(str(e))
        return []

    try:
        return process_workout_text(text, _catalog_or_empty())
    except Exception as e:
        logger.exception(f"Error parsing workout for {day}: {e}")
        return []


@router.get("/workouts/schedule", response_model=List[ScheduleEntry])
def get_schedule():
    """Weekly overview: title, XP and workout type per day."""
    return build_schedule(_catalog_or_empty())


@router.get("/catalog", response_model=List[CatalogEntry])
def get_catalog():
    """Exercise catalog used for XP factors."""
    try:
        return load_catalog()
    except CatalogServiceError as e:
        raise HTTPException(status_code=503, detail=str(e))
