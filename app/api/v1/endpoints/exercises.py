"""
Exercise library endpoints (listing, substitutions, rotation).
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from app.autoregulation.substitution import (
    get_rotation_recommendations,
    get_substitutions,
)
from app.exercises.library import get_exercise, list_exercises
from app.schemas.enums import MuscleGroup, SubstitutionReason
from app.schemas.exercise import Exercise, RotationAdvice, SubstitutionRecommendation

router = APIRouter()


def _get_or_404(exercise_id: int) -> Exercise:
    exercise = get_exercise(exercise_id)
    if exercise is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown exercise_id: {exercise_id}",
        )
    return exercise


@router.get(
    "",
    summary="List the built-in exercise library.",
    response_model=list[Exercise],
)
def get_exercises(
    muscle_group: Optional[MuscleGroup] = Query(None, description="Filter by muscle group"),
):
    return list_exercises(muscle_group)


@router.get(
    "/{exercise_id}/substitutions",
    summary="Rank same-muscle-group substitutes.",
    response_model=list[SubstitutionRecommendation],
)
def get_exercise_substitutions(
    exercise_id: int,
    reason: Optional[SubstitutionReason] = Query(None),
):
    exercise = _get_or_404(exercise_id)
    return get_substitutions(exercise, list_exercises(), reason)


@router.get(
    "/{exercise_id}/rotation",
    summary="Time-based rotation advice.",
    response_model=RotationAdvice,
)
def get_exercise_rotation(
    exercise_id: int,
    weeks_used: int = Query(..., ge=0, description="Weeks the exercise has been programmed"),
):
    _get_or_404(exercise_id)
    return get_rotation_recommendations(exercise_id, weeks_used, list_exercises())
