"""Pydantic schemas for engine inputs and recommendation outputs."""

from app.schemas.autoregulation import PerformanceMetrics, SetRecommendation
from app.schemas.deload import (
    DeloadAdvisory,
    DeloadRecommendation,
    DeloadWeekPlan,
    ExerciseAdjustment,
    FatigueSnapshot,
    MicrocycleDraft,
)
from app.schemas.exercise import Exercise, RotationAdvice, SubstitutionRecommendation
from app.schemas.fatigue import FatigueMetrics
from app.schemas.injury import InjuryRisk
from app.schemas.program import Microcycle, SessionExercise
from app.schemas.progression import ProgressionRecommendation, StalenessReport
from app.schemas.set_record import SetRecord, estimate_one_rep_max

__all__ = [
    "PerformanceMetrics",
    "SetRecommendation",
    "DeloadAdvisory",
    "DeloadRecommendation",
    "DeloadWeekPlan",
    "ExerciseAdjustment",
    "FatigueSnapshot",
    "MicrocycleDraft",
    "Exercise",
    "RotationAdvice",
    "SubstitutionRecommendation",
    "FatigueMetrics",
    "InjuryRisk",
    "Microcycle",
    "SessionExercise",
    "ProgressionRecommendation",
    "StalenessReport",
    "SetRecord",
    "estimate_one_rep_max",
]
