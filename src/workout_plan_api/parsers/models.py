"""
Parser Models

Pydantic models for the block structure every section parser emits.
Blocks are a tagged union on `type`: "timer", "checklist_exercise", "superset".
"""

from typing import Annotated, List, Optional, Union, Literal
from pydantic import BaseModel, Field


class CatalogEntry(BaseModel):
    """Exercise catalog record supplied by the caller (read-only)"""
    id: str
    name: str
    category: Optional[str] = None
    xp_factor: Optional[float] = None

    class Config:
        extra = "ignore"  # Catalog files also carry 'type', 'standards', 'unit'


class IntervalItem(BaseModel):
    """Timed treadmill interval"""
    type: Literal["interval"] = "interval"
    seconds: int = Field(..., ge=0)
    zone: str
    color: str
    note: Optional[str] = None
    raw_text: str


class CardItem(BaseModel):
    """Free-text instruction shown between intervals"""
    type: Literal["card"] = "card"
    text: str
    color: str


TimerItem = Annotated[Union[IntervalItem, CardItem], Field(discriminator="type")]


class SupersetExercise(BaseModel):
    """One exercise inside a superset / giant set / tri-set"""
    name: str
    reps: str = "10"
    sets: int = 3


class _BlockBase(BaseModel):
    name: str
    section: str
    xp_value: int = Field(default=0, ge=0)
    tips: List[str] = Field(default_factory=list)


class TimerBlock(_BlockBase):
    """Treadmill block: ordered intervals and cards"""
    type: Literal["timer"] = "timer"
    intervals: List[TimerItem] = Field(default_factory=list)


class ChecklistExerciseBlock(_BlockBase):
    """Standard exercise or finisher"""
    type: Literal["checklist_exercise"] = "checklist_exercise"
    sets: int = 1
    reps_per_set: str = "10"
    reps_list: Optional[List[int]] = Field(
        default=None,
        description="Per-set reps when the source used a comma list ('5,3,1')"
    )
    rest_seconds: int = 0
    description: str = ""


class SupersetBlock(_BlockBase):
    """Superset, giant set or tri-set"""
    type: Literal["superset"] = "superset"
    sets: int = 3
    rest_seconds: int = 0
    exercises: List[SupersetExercise] = Field(default_factory=list)
    has_bullet_exercises: bool = False
    description: str = ""


WorkoutBlock = Annotated[
    Union[TimerBlock, ChecklistExerciseBlock, SupersetBlock],
    Field(discriminator="type"),
]
