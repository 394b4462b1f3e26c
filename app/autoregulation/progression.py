"""
Load-progression advisor. Should the working weight go up?

The 9 most recent sets (~3 sessions) are sampled.  The latest set gives
the current weight and the RIR target to compare against.

Decision, first match wins:

    easy RIR on >= 70% of sets and avg reps >= 8      progress   high
    avg RIR >= target + 2 and avg reps >= 8           progress   medium
    avg RIR <= 1 and avg reps < 6                     hold       high
    avg RIR < target                                  hold       high
    otherwise                                         hold       low

Sizing: lower-body muscle groups aim for +5%, everything else +2.5%.
The raw increase is rounded **up** to the next 2.5 unit plate step, so a
small lifter still gets a loadable jump (e.g. 40 × 2.5% = 1.0 -> 2.5).
"""

from __future__ import annotations

import logging
import math
from typing import Optional, Sequence

from pydantic import BaseModel, Field

from app.schemas.enums import Confidence, MuscleGroup
from app.schemas.progression import ProgressionRecommendation
from app.schemas.set_record import SetRecord

logger = logging.getLogger(__name__)


# ======================================================================
# Configuration
# ======================================================================


class ProgressionConfig(BaseModel):
    """Sampling window, decision thresholds and sizing."""

    window: int = Field(9, ge=1)
    min_records: int = Field(3, ge=1)
    easy_rir_share: float = Field(0.7, gt=0.0, le=1.0)
    target_reps: float = Field(8.0, ge=1.0)
    low_rir_max: float = Field(1.0, ge=0.0)
    low_reps_max: float = Field(6.0, ge=1.0)
    lower_body_percent: float = Field(5.0, gt=0.0, le=50.0)
    upper_body_percent: float = Field(2.5, gt=0.0, le=50.0)
    weight_increment: float = Field(2.5, gt=0.0)


DEFAULT_PROGRESSION_CONFIG = ProgressionConfig()

# Lower-case names; both the short library name and the anatomical one.
LOWER_BODY_GROUPS: frozenset[str] = frozenset({
    "quadriceps", "quads", "hamstrings", "glutes", "calves",
})


def is_lower_body(muscle_group: MuscleGroup | str) -> bool:
    value = muscle_group.value if isinstance(muscle_group, MuscleGroup) else muscle_group
    return value.strip().lower() in LOWER_BODY_GROUPS


def round_up_to_increment(value: float, increment: float) -> float:
    """Round ``value`` up to the next multiple of ``increment``.

    Float noise below 1e-9 steps is ignored so that exact multiples
    (5.0 with a 2.5 step) are not bumped a full step.
    """
    steps = math.ceil(round(value / increment, 9))
    return steps * increment


def analyze_progression(
    records: Sequence[SetRecord],
    muscle_group: MuscleGroup | str,
    config: Optional[ProgressionConfig] = None,
) -> ProgressionRecommendation | None:
    """Recommend a weight progression for one exercise.

    Args:
        records: Set records of a single exercise, any order.
        muscle_group: The exercise's primary muscle group.
        config: Optional threshold override.

    Returns:
        :class:`ProgressionRecommendation`, or ``None`` with fewer than
        3 records.  ``recommended_weight`` is always the sized next step,
        also when ``should_progress`` is false.
    """
    cfg = config or DEFAULT_PROGRESSION_CONFIG
    if len(records) < cfg.min_records:
        return None

    sample = sorted(records, key=lambda r: r.session_date, reverse=True)[:cfg.window]

    latest = sample[0]
    current_weight = latest.weight
    target_rir = latest.target_rir
    n = len(sample)
    avg_rir = sum(r.rir for r in sample) / n
    avg_reps = sum(r.reps for r in sample) / n

    easy_sets = sum(1 for r in sample if r.rir >= target_rir + 1)
    consistently_easy = easy_sets >= n * cfg.easy_rir_share
    hitting_target_reps = avg_reps >= cfg.target_reps
    low_rir = avg_rir <= cfg.low_rir_max

    if consistently_easy and hitting_target_reps:
        should_progress, confidence = True, Confidence.HIGH
        reason = f"Consistently leaving {round(avg_rir)} RIR. Ready for more weight."
    elif avg_rir >= target_rir + 2 and hitting_target_reps:
        should_progress, confidence = True, Confidence.MEDIUM
        reason = f"Average RIR of {avg_rir:.1f} is higher than target. Consider increasing weight."
    elif low_rir and avg_reps < cfg.low_reps_max:
        should_progress, confidence = False, Confidence.HIGH
        reason = "Low reps with low RIR. Focus on technique and rep quality first."
    elif avg_rir < target_rir:
        should_progress, confidence = False, Confidence.HIGH
        reason = (
            f"Currently working at RIR {avg_rir:.1f}, below target of "
            f"{target_rir:g}. Maintain current weight."
        )
    else:
        should_progress, confidence = False, Confidence.LOW
        reason = "Performance is stable. Continue monitoring."

    increase_percent = (
        cfg.lower_body_percent if is_lower_body(muscle_group) else cfg.upper_body_percent
    )
    raw_increase = current_weight * increase_percent / 100
    recommended_weight = current_weight + round_up_to_increment(
        raw_increase, cfg.weight_increment,
    )

    logger.debug(
        "Progression advice",
        extra={
            "exercise_id": latest.exercise_id,
            "should_progress": should_progress,
            "avg_rir": avg_rir,
            "avg_reps": avg_reps,
        },
    )

    return ProgressionRecommendation(
        should_progress=should_progress,
        recommended_weight=recommended_weight,
        current_weight=current_weight,
        confidence=confidence,
        reason=reason,
        increase_percent=increase_percent,
    )
