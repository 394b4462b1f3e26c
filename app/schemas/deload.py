"""
Deload schemas: fatigue snapshot, verdict, advisory and week plan.

The *snapshot* is the short-window aggregation (default 14 days) that
feeds the verdict.  The *advisory* is the coarser, calendar-driven
check (weeks since the last deload).  The *week plan* is the concrete
reduced-set prescription for the following week.
"""

from __future__ import annotations

import datetime

from pydantic import BaseModel, Field

from app.schemas.enums import Confidence, DeloadSeverity, Urgency
from app.schemas.program import Microcycle


class FatigueSnapshot(BaseModel):
    """Windowed fatigue statistics feeding the deload verdict."""

    avg_soreness: float = Field(0.0, ge=0.0, le=5.0)
    avg_joint_pain: float = Field(0.0, ge=0.0, le=5.0)
    avg_pump: float = Field(0.0, ge=0.0, le=5.0)
    avg_rir: float
    performance_decline: bool = Field(
        ...,
        description="Second-half mean e1RM below 95% of the first half",
    )
    consecutive_high_fatigue: int = Field(
        ..., ge=0,
        description="Streak of fatigued records counted back from the latest",
    )
    sessions_analyzed: int = Field(..., ge=0)


class DeloadRecommendation(BaseModel):
    """Verdict on whether a deload week is needed."""

    needs_deload: bool
    severity: DeloadSeverity
    reason: str
    indicators: list[str] = Field(default_factory=list)
    confidence: Confidence


class DeloadAdvisory(BaseModel):
    """Calendar-driven deload advisory."""

    should_deload: bool
    urgency: Urgency
    reason: str


class MicrocycleDraft(BaseModel):
    """Partial description of the deload week to be created."""

    mesocycle_id: int
    week_number: int = Field(..., ge=1)
    start_date: datetime.datetime
    end_date: datetime.datetime


class ExerciseAdjustment(BaseModel):
    """Per-exercise set reduction in a deload week."""

    exercise_id: int
    original_sets: int = Field(..., ge=0)
    deload_sets: int = Field(..., ge=0)
    percent_reduction: float


class DeloadWeekPlan(BaseModel):
    """A generated deload week."""

    original_microcycle: Microcycle
    deload_microcycle: MicrocycleDraft
    exercise_adjustments: list[ExerciseAdjustment]
    total_volume_reduction: float = Field(
        ...,
        description="Percent reduction of summed sets across all exercises",
    )
