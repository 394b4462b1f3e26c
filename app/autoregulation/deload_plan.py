"""
Deload-week plan generator.

Halves the working sets of every prescribed exercise (minimum one set)
and drafts the following week.  Weight, rep and RIR targets are left
alone; a deload here is a volume cut only.
"""

from __future__ import annotations

import datetime
import math
from typing import Iterable, Optional, Sequence

from pydantic import BaseModel, Field

from app.schemas.deload import DeloadWeekPlan, ExerciseAdjustment, MicrocycleDraft
from app.schemas.program import Microcycle, SessionExercise


class DeloadPlanConfig(BaseModel):
    """Volume-reduction factor for generated deload weeks."""

    set_factor: float = Field(0.5, gt=0.0, le=1.0)


DEFAULT_DELOAD_PLAN_CONFIG = DeloadPlanConfig()


def _round_half_up(value: float) -> int:
    # round() would send 2.5 to 2; set counts round halves up.
    return math.floor(value + 0.5)


def _percent_reduction(original: int, reduced: int) -> float:
    if original <= 0:
        return 0.0
    return (original - reduced) / original * 100


def generate_deload_week(
    microcycle: Microcycle,
    session_exercises: Sequence[SessionExercise],
    config: Optional[DeloadPlanConfig] = None,
) -> DeloadWeekPlan:
    """Build the deload week that follows ``microcycle``.

    The new week starts the day after ``microcycle.end_date``, ends
    seven days after it, and carries the next week number.  The total
    reduction is computed from summed set counts, not averaged per
    exercise.
    """
    cfg = config or DEFAULT_DELOAD_PLAN_CONFIG

    adjustments: list[ExerciseAdjustment] = []
    for se in session_exercises:
        # Never below one set, never above the prescription.
        deload_sets = min(se.target_sets, max(1, _round_half_up(se.target_sets * cfg.set_factor)))
        adjustments.append(ExerciseAdjustment(
            exercise_id=se.exercise_id,
            original_sets=se.target_sets,
            deload_sets=deload_sets,
            percent_reduction=_percent_reduction(se.target_sets, deload_sets),
        ))

    original_total = sum(a.original_sets for a in adjustments)
    deload_total = sum(a.deload_sets for a in adjustments)

    draft = MicrocycleDraft(
        mesocycle_id=microcycle.mesocycle_id,
        week_number=microcycle.week_number + 1,
        start_date=microcycle.end_date + datetime.timedelta(days=1),
        end_date=microcycle.end_date + datetime.timedelta(days=7),
    )

    return DeloadWeekPlan(
        original_microcycle=microcycle,
        deload_microcycle=draft,
        exercise_adjustments=adjustments,
        total_volume_reduction=_percent_reduction(original_total, deload_total),
    )


def apply_deload_to_exercises(
    session_exercises: Sequence[SessionExercise],
    adjustments: Iterable[ExerciseAdjustment],
) -> list[SessionExercise]:
    """Copies of the prescriptions with deload set counts applied.

    Exercises without a matching adjustment are returned unchanged.
    """
    deload_sets: dict[int, int] = {}
    for adjustment in adjustments:
        # First adjustment per exercise wins.
        deload_sets.setdefault(adjustment.exercise_id, adjustment.deload_sets)
    return [
        se.model_copy(update={"target_sets": deload_sets[se.exercise_id]})
        if se.exercise_id in deload_sets
        else se
        for se in session_exercises
    ]
