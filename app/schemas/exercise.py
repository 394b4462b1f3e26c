"""
Exercise library entries and substitution outputs.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.enums import MuscleGroup, Similarity, Urgency


class Exercise(BaseModel):
    """An exercise in the trainee's library."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Exercise identifier")
    name: str = Field(..., min_length=1, description="Display name")
    muscle_group: MuscleGroup
    is_custom: bool = False
    notes: Optional[str] = None


class SubstitutionRecommendation(BaseModel):
    """A candidate replacement for an exercise."""

    exercise: Exercise
    reason: str
    similarity: Similarity


class RotationAdvice(BaseModel):
    """Time-based rotation advisory for one exercise."""

    should_rotate: bool
    urgency: Urgency
    alternatives: list[Exercise] = Field(default_factory=list)
    message: str
