"""
Closed tag sets shared by the autoregulation engine.

All enums subclass ``str`` so that recommendation objects serialise to
plain strings (``"high"``, ``"moderate"``...) without custom encoders.
"""

from __future__ import annotations

from enum import Enum


class Confidence(str, Enum):
    """How much the engine trusts a recommendation."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class DeloadSeverity(str, Enum):
    """Accumulated fatigue severity behind a deload verdict."""
    NONE = "none"
    MILD = "mild"
    MODERATE = "moderate"
    HIGH = "high"


class FatigueLevel(str, Enum):
    """Bucket of the 0-100 fatigue index."""
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    SEVERE = "severe"


class PerformanceTrend(str, Enum):
    """Direction of the weekly volume series."""
    IMPROVING = "improving"
    STABLE = "stable"
    DECLINING = "declining"


class RiskTier(str, Enum):
    """Injury-risk tier derived from joint-pain feedback."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Similarity(str, Enum):
    """Movement-pattern similarity between two exercises."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Urgency(str, Enum):
    """Urgency of a rotation or deload advisory."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class SubstitutionReason(str, Enum):
    """Why the trainee is looking for a substitute."""
    ROTATION = "rotation"
    INJURY = "injury"
    PREFERENCE = "preference"


class MovementClass(str, Enum):
    """Whether an exercise is multi-joint (compound) or single-joint."""
    COMPOUND = "compound"
    ISOLATION = "isolation"


class MuscleGroup(str, Enum):
    """Primary muscle group an exercise is filed under."""
    CHEST = "Chest"
    BACK = "Back"
    SHOULDERS = "Shoulders"
    BICEPS = "Biceps"
    TRICEPS = "Triceps"
    QUADS = "Quads"
    HAMSTRINGS = "Hamstrings"
    GLUTES = "Glutes"
    CALVES = "Calves"
    ABS = "Abs"
    FOREARMS = "Forearms"
    REAR_DELTS = "Rear Delts"


# Ordering used when sorting by tier (lower sorts first).
RISK_ORDER: dict[RiskTier, int] = {
    RiskTier.HIGH: 0,
    RiskTier.MEDIUM: 1,
    RiskTier.LOW: 2,
}

SIMILARITY_ORDER: dict[Similarity, int] = {
    Similarity.HIGH: 0,
    Similarity.MEDIUM: 1,
    Similarity.LOW: 2,
}
