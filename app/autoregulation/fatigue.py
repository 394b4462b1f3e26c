"""
Long-horizon fatigue index (0-100).

Inputs are a rolling two-week record sample and a series of weekly
training volumes (oldest first, typically four weeks).

Unlike the deload snapshot, a missing feedback score counts as **0**
here: the soreness and joint-pain averages are taken over *all* sampled
records.  Sparse feedback therefore lowers the index.

Components:

    soreness        avg / 5 × 30
    joint pain      avg / 5 × 30
    volume change   min((last / previous − 1) × 100, 20)   (can be negative)
    trend           declining 20, stable 10, improving 0
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from pydantic import BaseModel, Field

from app.schemas.enums import FatigueLevel, PerformanceTrend
from app.schemas.fatigue import FatigueMetrics
from app.schemas.set_record import SetRecord

logger = logging.getLogger(__name__)


# ======================================================================
# Configuration
# ======================================================================


class FatigueIndexConfig(BaseModel):
    """Weights and buckets for the fatigue index."""

    soreness_weight: float = Field(30.0, ge=0.0, le=100.0)
    joint_pain_weight: float = Field(30.0, ge=0.0, le=100.0)
    max_volume_points: float = Field(20.0, ge=0.0, le=100.0)
    declining_points: float = Field(20.0, ge=0.0, le=100.0)
    stable_points: float = Field(10.0, ge=0.0, le=100.0)

    # Trend band: +/-10% between the recent and the early weeks.
    trend_band: float = Field(0.10, ge=0.0, le=1.0)


DEFAULT_FATIGUE_INDEX_CONFIG = FatigueIndexConfig()

# Upper bounds (exclusive) of each level, checked in order.
_LEVEL_THRESHOLDS: list[tuple[FatigueLevel, float]] = [
    (FatigueLevel.LOW, 30.0),
    (FatigueLevel.MODERATE, 50.0),
    (FatigueLevel.HIGH, 70.0),
]

_LEVEL_RECOMMENDATIONS: dict[FatigueLevel, str] = {
    FatigueLevel.SEVERE: "Severe fatigue detected. Immediate deload or rest week strongly recommended.",
    FatigueLevel.HIGH: "High fatigue accumulation. Consider scheduling a deload week soon.",
    FatigueLevel.MODERATE: "Moderate fatigue levels. Monitor closely and ensure adequate recovery.",
    FatigueLevel.LOW: "Low fatigue levels. Continue training as planned.",
}


def _label_fatigue(index: float) -> FatigueLevel:
    """Map a 0-100 index to its level."""
    for level, upper in _LEVEL_THRESHOLDS:
        if index < upper:
            return level
    return FatigueLevel.SEVERE


def classify_volume_trend(
    weekly_volumes: Sequence[float],
    band: float = 0.10,
) -> PerformanceTrend:
    """Classify a weekly volume series (oldest first).

    The mean of the last two weeks is compared with the mean of the
    first two weeks when four or more weeks are available, otherwise
    with the first week alone.  Fewer than two weeks is ``stable``.
    """
    if len(weekly_volumes) < 2:
        return PerformanceTrend.STABLE

    recent = (weekly_volumes[-1] + weekly_volumes[-2]) / 2
    if len(weekly_volumes) >= 4:
        older = (weekly_volumes[0] + weekly_volumes[1]) / 2
    else:
        older = weekly_volumes[0]

    if recent > older * (1 + band):
        return PerformanceTrend.IMPROVING
    if recent < older * (1 - band):
        return PerformanceTrend.DECLINING
    return PerformanceTrend.STABLE


def _volume_change_points(weekly_volumes: Sequence[float], cap: float) -> float:
    """Week-over-week volume increase in percent, capped at ``cap``."""
    if len(weekly_volumes) < 2:
        return 0.0
    previous = weekly_volumes[-2] or 1
    ratio = weekly_volumes[-1] / previous
    return min((ratio - 1) * 100, cap)


def calculate_fatigue_index(
    recent_records: Sequence[SetRecord],
    weekly_volume_trend: Sequence[float],
    config: Optional[FatigueIndexConfig] = None,
) -> FatigueMetrics:
    """Compute the composite fatigue index.

    Args:
        recent_records: Records of the last two weeks.
        weekly_volume_trend: Weekly volumes, oldest first.
        config: Optional weight override.

    Returns:
        :class:`FatigueMetrics`.  An empty sample yields a zero index with
        a "no data" recommendation.
    """
    cfg = config or DEFAULT_FATIGUE_INDEX_CONFIG

    if not recent_records:
        return FatigueMetrics(
            fatigue_index=0.0,
            fatigue_level=FatigueLevel.LOW,
            weekly_volume=0.0,
            avg_soreness=0.0,
            avg_joint_pain=0.0,
            performance_trend=PerformanceTrend.STABLE,
            recommendation="No recent training data available.",
        )

    n = len(recent_records)
    # Missing feedback counts as zero in this index.
    avg_soreness = sum(r.feedback_soreness or 0 for r in recent_records) / n
    avg_joint_pain = sum(r.feedback_joint_pain or 0 for r in recent_records) / n
    weekly_volume = sum(r.reps * r.weight for r in recent_records)

    trend = classify_volume_trend(weekly_volume_trend, cfg.trend_band)

    score = (avg_soreness / 5) * cfg.soreness_weight
    score += (avg_joint_pain / 5) * cfg.joint_pain_weight
    score += _volume_change_points(weekly_volume_trend, cfg.max_volume_points)
    if trend == PerformanceTrend.DECLINING:
        score += cfg.declining_points
    elif trend == PerformanceTrend.STABLE:
        score += cfg.stable_points

    index = min(100.0, max(0.0, score))
    level = _label_fatigue(index)

    logger.debug(
        "Fatigue index",
        extra={"fatigue_index": index, "level": level.value, "trend": trend.value},
    )

    return FatigueMetrics(
        fatigue_index=index,
        fatigue_level=level,
        weekly_volume=max(weekly_volume, 0.0),
        avg_soreness=avg_soreness,
        avg_joint_pain=avg_joint_pain,
        performance_trend=trend,
        recommendation=_LEVEL_RECOMMENDATIONS[level],
    )
