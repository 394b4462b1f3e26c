"""
Request bodies for the stateless coaching endpoints.

Each request carries the set records it should be evaluated on; nothing
is read from or written to storage.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.schemas.enums import MuscleGroup
from app.schemas.exercise import Exercise
from app.schemas.program import Microcycle, SessionExercise
from app.schemas.set_record import SetRecord


class SetRecommendationRequest(BaseModel):
    exercise_id: int
    current_sets: int = Field(..., ge=1)
    weeks_since_last_increase: int = Field(0, ge=0)
    records: list[SetRecord] = Field(default_factory=list)


class DeloadCheckRequest(BaseModel):
    records: list[SetRecord] = Field(default_factory=list)
    as_of: Optional[datetime.datetime] = Field(
        None, description="End of the lookback window (defaults to now)",
    )
    lookback_days: Optional[int] = Field(
        None, ge=1, le=90,
        description="Lookback window in days (defaults to the configured value)",
    )


class FatigueIndexRequest(BaseModel):
    records: list[SetRecord] = Field(
        default_factory=list,
        description="Records of the last two weeks",
    )
    weekly_volumes: list[float] = Field(
        default_factory=list,
        description="Weekly training volumes, oldest first",
    )


class InjuryScanRequest(BaseModel):
    records: list[SetRecord] = Field(default_factory=list)
    exercises: Optional[list[Exercise]] = Field(
        None, description="Exercise library (defaults to the built-in one)",
    )
    suggest_alternatives: bool = False


class ProgressionRequest(BaseModel):
    exercise_id: int
    muscle_group: Optional[MuscleGroup] = Field(
        None, description="Looked up in the built-in library when omitted",
    )
    records: list[SetRecord] = Field(default_factory=list)


class DeloadWeekRequest(BaseModel):
    microcycle: Microcycle
    session_exercises: list[SessionExercise] = Field(default_factory=list)
