"""
Exercise rotation / substitution selector.

Candidates come from the same muscle group.  Movement similarity is a
name-keyword heuristic: an exercise whose name contains a compound
keyword (squat, press, row...) is classed as *compound*, anything else
as *isolation*.  A candidate of the same class is a ``high`` similarity
match, a different class ``medium``.

Rotation advice is purely time-based: 8+ weeks on the same exercise is
high urgency, 6+ weeks medium.
"""

from __future__ import annotations

import datetime
import logging
from typing import Optional, Sequence

from app.schemas.enums import (
    SIMILARITY_ORDER,
    MovementClass,
    Similarity,
    SubstitutionReason,
    Urgency,
)
from app.schemas.exercise import Exercise, RotationAdvice, SubstitutionRecommendation
from app.schemas.progression import StalenessReport

logger = logging.getLogger(__name__)

COMPOUND_KEYWORDS: tuple[str, ...] = (
    "squat", "deadlift", "press", "row", "pull-up", "chin-up",
    "lunge", "dip", "clean", "snatch", "push-up",
)

MAX_SUBSTITUTIONS = 5

ROTATION_HIGH_WEEKS = 8
ROTATION_MEDIUM_WEEKS = 6


# ======================================================================
# Classification
# ======================================================================


def classify_movement(exercise_name: str) -> MovementClass:
    """Compound if the name contains a compound keyword (case-insensitive)."""
    lower = exercise_name.lower()
    if any(keyword in lower for keyword in COMPOUND_KEYWORDS):
        return MovementClass.COMPOUND
    return MovementClass.ISOLATION


def is_compound_movement(exercise_name: str) -> bool:
    return classify_movement(exercise_name) == MovementClass.COMPOUND


# ======================================================================
# Substitutions
# ======================================================================


def _substitution_reason(
    current: Exercise,
    candidate: Exercise,
    similarity: Similarity,
    candidate_class: MovementClass,
    reason: Optional[SubstitutionReason],
) -> str:
    group = candidate.muscle_group.value
    if reason == SubstitutionReason.ROTATION:
        return f"Fresh alternative after extended use of {current.name}"
    if reason == SubstitutionReason.INJURY:
        return f"Lower-stress alternative for {group}"
    if similarity == Similarity.HIGH:
        return f"Similar {candidate_class.value} movement for {group}"
    return f"Alternative {candidate_class.value} movement for {group}"


def get_substitutions(
    current: Exercise,
    candidates: Sequence[Exercise],
    reason: Optional[SubstitutionReason] = None,
) -> list[SubstitutionRecommendation]:
    """Rank same-muscle-group replacements for ``current``.

    High-similarity candidates come first; within a tier the input order
    is kept.  At most 5 results.
    """
    current_class = classify_movement(current.name)
    recommendations: list[SubstitutionRecommendation] = []

    for candidate in candidates:
        if candidate.muscle_group != current.muscle_group or candidate.id == current.id:
            continue
        candidate_class = classify_movement(candidate.name)
        similarity = (
            Similarity.HIGH if candidate_class == current_class else Similarity.MEDIUM
        )
        recommendations.append(SubstitutionRecommendation(
            exercise=candidate,
            reason=_substitution_reason(
                current, candidate, similarity, candidate_class, reason,
            ),
            similarity=similarity,
        ))

    recommendations.sort(key=lambda r: SIMILARITY_ORDER[r.similarity])
    return recommendations[:MAX_SUBSTITUTIONS]


# ======================================================================
# Rotation
# ======================================================================


def get_rotation_recommendations(
    exercise_id: int,
    weeks_used: int,
    exercises: Sequence[Exercise],
) -> RotationAdvice:
    """Time-based rotation advice with rotation alternatives."""
    current = next((e for e in exercises if e.id == exercise_id), None)
    if current is None:
        return RotationAdvice(
            should_rotate=False,
            urgency=Urgency.LOW,
            alternatives=[],
            message="Exercise not found",
        )

    if weeks_used >= ROTATION_HIGH_WEEKS:
        should_rotate, urgency = True, Urgency.HIGH
        message = (
            f"{current.name} has been used for {weeks_used} weeks. "
            "Rotation strongly recommended for continued progress."
        )
    elif weeks_used >= ROTATION_MEDIUM_WEEKS:
        should_rotate, urgency = True, Urgency.MEDIUM
        message = (
            f"{current.name} has been used for {weeks_used} weeks. "
            "Consider rotating to maintain stimulus."
        )
    else:
        should_rotate, urgency = False, Urgency.LOW
        message = f"{current.name} is still fresh ({weeks_used} weeks). Continue as planned."

    substitutions = get_substitutions(current, exercises, SubstitutionReason.ROTATION)

    logger.debug(
        "Rotation advice",
        extra={"exercise_id": exercise_id, "weeks_used": weeks_used, "urgency": urgency.value},
    )

    return RotationAdvice(
        should_rotate=should_rotate,
        urgency=urgency,
        alternatives=[s.exercise for s in substitutions],
        message=message,
    )


def check_exercise_staleness(
    first_used: datetime.datetime,
    last_used: datetime.datetime,
) -> StalenessReport:
    """Whole weeks between first and last use, and whether that is stale."""
    weeks = max((last_used - first_used) // datetime.timedelta(weeks=1), 0)

    if weeks >= ROTATION_HIGH_WEEKS:
        recommendation = "Consider rotating this exercise. 8+ weeks may lead to diminishing returns."
    elif weeks >= ROTATION_MEDIUM_WEEKS:
        recommendation = "Exercise has been used for 6+ weeks. Consider rotation for continued progress."
    else:
        recommendation = f"Exercise is fresh ({weeks} weeks). Continue as planned."

    return StalenessReport(
        is_stale=weeks >= ROTATION_MEDIUM_WEEKS,
        weeks_used=weeks,
        recommendation=recommendation,
    )
