"""
Injury-risk analyzer — per-exercise joint-pain trend scanner.

For one exercise the 9 most recent set records are sampled.  Nine sets
stand in for "the last three sessions" on the assumption of ~3 working
sets per session; with more or fewer sets per session the window spans
fewer or more sessions.  The sample's mean joint pain (over the records
that report it) maps onto a risk tier:

    >= 3.5   high
    >= 2.5   medium
    >= 1.5   low
    below    no risk (``None``)
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from pydantic import BaseModel, Field

from app.autoregulation.metrics import mean_of_present
from app.schemas.enums import RISK_ORDER, RiskTier
from app.schemas.exercise import Exercise
from app.schemas.injury import InjuryRisk
from app.schemas.set_record import SetRecord

logger = logging.getLogger(__name__)


# ======================================================================
# Configuration
# ======================================================================


class InjuryConfig(BaseModel):
    """Sampling window and tier thresholds."""

    window: int = Field(9, ge=1)
    min_records: int = Field(3, ge=1)
    high_threshold: float = Field(3.5, ge=0.0, le=5.0)
    medium_threshold: float = Field(2.5, ge=0.0, le=5.0)
    low_threshold: float = Field(1.5, ge=0.0, le=5.0)


DEFAULT_INJURY_CONFIG = InjuryConfig()

_RECOMMENDATIONS: dict[RiskTier, str] = {
    RiskTier.HIGH: (
        "High joint pain detected (avg {avg:.1f}/5). Consider stopping this exercise "
        "immediately and consulting a healthcare professional. Switch to a "
        "lower-stress alternative."
    ),
    RiskTier.MEDIUM: (
        "Moderate joint pain detected (avg {avg:.1f}/5). Consider reducing load, "
        "improving technique, or temporarily substituting with a lower-stress variation."
    ),
    RiskTier.LOW: (
        "Minor joint discomfort detected (avg {avg:.1f}/5). Monitor closely and "
        "ensure proper warm-up and technique."
    ),
}

# Name keywords for the lower-stress heuristic.
LOWER_STRESS_KEYWORDS: tuple[str, ...] = (
    "machine", "cable", "dumbbell", "isolation", "fly", "raise", "curl", "extension",
)
HIGHER_STRESS_KEYWORDS: tuple[str, ...] = ("barbell", "squat", "deadlift", "press")

MAX_ALTERNATIVES = 3


def _classify_risk(avg_joint_pain: float, cfg: InjuryConfig) -> RiskTier | None:
    if avg_joint_pain >= cfg.high_threshold:
        return RiskTier.HIGH
    if avg_joint_pain >= cfg.medium_threshold:
        return RiskTier.MEDIUM
    if avg_joint_pain >= cfg.low_threshold:
        return RiskTier.LOW
    return None


# ======================================================================
# Public API
# ======================================================================


def analyze_injury_risk(
    records: Sequence[SetRecord],
    exercise_id: int,
    exercise_name: str,
    config: Optional[InjuryConfig] = None,
) -> InjuryRisk | None:
    """Risk flag for one exercise.

    Returns ``None`` with fewer than 3 records for the exercise, or when
    the mean joint pain is below the low-risk threshold.
    """
    cfg = config or DEFAULT_INJURY_CONFIG

    sample = sorted(
        (r for r in records if r.exercise_id == exercise_id),
        key=lambda r: r.session_date,
        reverse=True,
    )[:cfg.window]

    if len(sample) < cfg.min_records:
        return None

    avg_joint_pain = mean_of_present(sample, lambda r: r.feedback_joint_pain)
    tier = _classify_risk(avg_joint_pain, cfg)
    if tier is None:
        return None

    logger.debug(
        "Injury risk flagged",
        extra={"exercise_id": exercise_id, "tier": tier.value, "avg_joint_pain": avg_joint_pain},
    )

    return InjuryRisk(
        exercise_id=exercise_id,
        exercise_name=exercise_name,
        risk_level=tier,
        avg_joint_pain=avg_joint_pain,
        recent_sessions=len({r.session_id for r in sample}),
        recommendation=_RECOMMENDATIONS[tier].format(avg=avg_joint_pain),
    )


def suggest_lower_stress_alternatives(
    exercise: Exercise,
    exercises: Sequence[Exercise],
) -> list[Exercise]:
    """Top 3 same-muscle-group exercises, lower-stress names first.

    Scoring: a lower-stress keyword scores 2 (it wins over a
    higher-stress keyword in the same name), a higher-stress keyword
    0, anything else 1.  Ties keep the input order.
    """
    def score(candidate: Exercise) -> int:
        name = candidate.name.lower()
        if any(kw in name for kw in LOWER_STRESS_KEYWORDS):
            return 2
        if any(kw in name for kw in HIGHER_STRESS_KEYWORDS):
            return 0
        return 1

    same_group = [
        e for e in exercises
        if e.muscle_group == exercise.muscle_group and e.id != exercise.id
    ]
    same_group.sort(key=score, reverse=True)
    return same_group[:MAX_ALTERNATIVES]


def get_all_injury_risks(
    records: Sequence[SetRecord],
    exercises: Sequence[Exercise],
    suggest_alternatives: bool = False,
    config: Optional[InjuryConfig] = None,
) -> list[InjuryRisk]:
    """Scan every exercise present in ``records``; high risks first.

    Exercise IDs missing from ``exercises`` are skipped.
    """
    by_id = {e.id: e for e in exercises}
    risks: list[InjuryRisk] = []

    # dict.fromkeys keeps first-seen order.
    for exercise_id in dict.fromkeys(r.exercise_id for r in records):
        exercise = by_id.get(exercise_id)
        if exercise is None:
            continue
        risk = analyze_injury_risk(records, exercise_id, exercise.name, config)
        if risk is None:
            continue
        if suggest_alternatives:
            risk = risk.model_copy(update={
                "alternatives": suggest_lower_stress_alternatives(exercise, exercises),
            })
        risks.append(risk)

    risks.sort(key=lambda r: RISK_ORDER[r.risk_level])
    return risks
