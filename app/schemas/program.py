"""
Training prescription schemas.

A *microcycle* is one training week inside a mesocycle; a
*session exercise* is the prescription (sets, rep range, RIR target) of
one exercise inside a workout session.  Both are owned by the external
store and consumed here as plain values.
"""

from __future__ import annotations

import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Microcycle(BaseModel):
    """One training week."""

    model_config = ConfigDict(frozen=True)

    id: Optional[int] = None
    mesocycle_id: int
    week_number: int = Field(..., ge=1)
    start_date: datetime.datetime
    end_date: datetime.datetime


class SessionExercise(BaseModel):
    """Prescription of one exercise within a workout session."""

    model_config = ConfigDict(frozen=True)

    id: Optional[int] = None
    session_id: int
    exercise_id: int
    order_index: int = Field(0, ge=0)
    target_sets: int = Field(..., ge=0)
    target_reps_min: int = Field(..., ge=0)
    target_reps_max: int = Field(..., ge=0)
    target_rir: float = Field(..., ge=0.0)
