"""Data models for the workout plan API."""
from pydantic import BaseModel, Field
from typing import List, Literal, Optional

from workout_plan_api.parsers.models import CatalogEntry, WorkoutBlock

WorkoutType = Literal["Strength", "Cardio", "Hybrid", "Recovery"]


class ParseWorkoutRequest(BaseModel):
    """Request model for POST /parse/workout"""
    text: str = Field(..., max_length=50000, description="Tagged plan text ([TREADMILL], [STRENGTH], [CORE], ...)")
    catalog: Optional[List[CatalogEntry]] = Field(
        default=None,
        description="Exercise catalog; the configured catalog file is used when omitted"
    )


class ParseWorkoutResponse(BaseModel):
    """Blocks for a parsed plan"""
    blocks: List[WorkoutBlock] = Field(default_factory=list)
    total_xp: int = 0
    warnings: List[str] = Field(default_factory=list)


class ScheduleEntry(BaseModel):
    """One day of the weekly plan"""
    day: str
    title: str
    order: int = 99
    xp: int = 0
    type: WorkoutType = "Strength"
