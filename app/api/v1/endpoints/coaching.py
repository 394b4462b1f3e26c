"""
Coaching endpoints: set volume, deload, fatigue, injury risk,
progression and deload-week generation.

All endpoints are stateless: the request body carries the records and
the response is the engine's recommendation (``null`` when the engine
has no opinion for lack of data).
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, status

from app.autoregulation.deload import DeloadConfig, check_deload_need
from app.autoregulation.deload_plan import generate_deload_week
from app.autoregulation.fatigue import calculate_fatigue_index
from app.autoregulation.injury import get_all_injury_risks
from app.autoregulation.progression import analyze_progression
from app.autoregulation.volume import get_exercise_set_recommendation
from app.core.config import settings
from app.exercises.library import get_exercise, list_exercises
from app.schemas.autoregulation import SetRecommendation
from app.schemas.coaching import (
    DeloadCheckRequest,
    DeloadWeekRequest,
    FatigueIndexRequest,
    InjuryScanRequest,
    ProgressionRequest,
    SetRecommendationRequest,
)
from app.schemas.deload import DeloadRecommendation, DeloadWeekPlan
from app.schemas.fatigue import FatigueMetrics
from app.schemas.injury import InjuryRisk
from app.schemas.progression import ProgressionRecommendation

router = APIRouter()


@router.post(
    "/sets",
    summary="Recommend the next working-set count for an exercise.",
    response_model=Optional[SetRecommendation],
)
def recommend_sets(body: SetRecommendationRequest):
    return get_exercise_set_recommendation(
        body.exercise_id,
        body.current_sets,
        body.records,
        body.weeks_since_last_increase,
    )


@router.post(
    "/deload",
    summary="Check whether a deload week is needed.",
    response_model=Optional[DeloadRecommendation],
)
def check_deload(body: DeloadCheckRequest):
    config = DeloadConfig(
        lookback_days=body.lookback_days or settings.FATIGUE_LOOKBACK_DAYS,
    )
    return check_deload_need(body.records, as_of=body.as_of, config=config)


@router.post(
    "/fatigue",
    summary="Compute the 0-100 fatigue index.",
    response_model=FatigueMetrics,
)
def fatigue_index(body: FatigueIndexRequest):
    return calculate_fatigue_index(body.records, body.weekly_volumes)


@router.post(
    "/injury-risks",
    summary="Scan all logged exercises for joint-pain risk.",
    response_model=list[InjuryRisk],
)
def injury_risks(body: InjuryScanRequest):
    exercises = body.exercises if body.exercises is not None else list_exercises()
    return get_all_injury_risks(
        body.records, exercises, suggest_alternatives=body.suggest_alternatives,
    )


@router.post(
    "/progression",
    summary="Recommend a working-weight progression for an exercise.",
    response_model=Optional[ProgressionRecommendation],
)
def progression(body: ProgressionRequest):
    muscle_group = body.muscle_group
    if muscle_group is None:
        exercise = get_exercise(body.exercise_id)
        if exercise is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Unknown exercise_id: {body.exercise_id}",
            )
        muscle_group = exercise.muscle_group

    records = [r for r in body.records if r.exercise_id == body.exercise_id]
    return analyze_progression(records, muscle_group)


@router.post(
    "/deload-week",
    summary="Generate a reduced-volume deload week.",
    response_model=DeloadWeekPlan,
)
def deload_week(body: DeloadWeekRequest):
    return generate_deload_week(body.microcycle, body.session_exercises)
