"""
Fatigue / deload analyzer.

Two cooperating steps:

1. :func:`calculate_fatigue_snapshot` aggregates the records of a short
   lookback window (default 14 days): feedback averages, mean RIR, a
   first-half vs second-half e1RM comparison, and the streak of
   consecutive high-fatigue records ending at the most recent one.
2. :func:`generate_deload_recommendation` turns the snapshot into a
   verdict by accumulating indicators and escalating severity.

Severity escalation (applied in this order):

    soreness >= 4               none -> moderate (at least moderate)
    joint pain >= 3             moderate -> high, otherwise -> moderate
    pump <= 2                   indicator only
    performance decline         none -> mild, otherwise -> high
    high-fatigue streak >= 3    -> high
    mean RIR < 1                indicator only

Verdict: high -> deload (high confidence); moderate with >= 2 indicators
or mild with >= 3 indicators -> deload (medium confidence); anything
else -> no deload.

:func:`should_recommend_deload` is a coarser, calendar-driven advisory
based on the weeks elapsed since the last deload.
"""

from __future__ import annotations

import datetime
import logging
from typing import Optional, Sequence

from pydantic import BaseModel, Field

from app.autoregulation.metrics import mean_of_present
from app.schemas.deload import (
    DeloadAdvisory,
    DeloadRecommendation,
    FatigueSnapshot,
)
from app.schemas.enums import (
    Confidence,
    DeloadSeverity,
    PerformanceTrend,
    Urgency,
)
from app.schemas.set_record import SetRecord

logger = logging.getLogger(__name__)


# ======================================================================
# Configuration
# ======================================================================


class DeloadConfig(BaseModel):
    """Thresholds for the fatigue snapshot and deload verdict."""

    lookback_days: int = Field(14, ge=1, le=90)
    min_records: int = Field(3, ge=1)

    # e1RM decline: second half below this fraction of the first half.
    decline_ratio: float = Field(0.95, gt=0.0, le=1.0)

    # Per-record "high fatigue" flags for the streak.
    streak_soreness: int = Field(4, ge=1, le=5)
    streak_joint_pain: int = Field(3, ge=1, le=5)
    streak_length: int = Field(3, ge=1)

    # Window-average indicators.
    soreness_indicator: float = Field(4.0, ge=1.0, le=5.0)
    joint_pain_indicator: float = Field(3.0, ge=1.0, le=5.0)
    poor_pump_max: float = Field(2.0, ge=0.0, le=5.0)
    low_rir_max: float = Field(1.0, ge=0.0)

    # Indicator counts required for a deload at lower severities.
    moderate_min_indicators: int = Field(2, ge=1)
    mild_min_indicators: int = Field(3, ge=1)


DEFAULT_DELOAD_CONFIG = DeloadConfig()


# ======================================================================
# Fatigue snapshot
# ======================================================================


def _mean_e1rm(records: Sequence[SetRecord]) -> float | None:
    """Mean e1RM over the records that carry one (``None`` if none do)."""
    values = [r.e1rm for r in records if r.e1rm]
    if not values:
        return None
    return sum(values) / len(values)


def _detect_performance_decline(
    records: Sequence[SetRecord],
    decline_ratio: float,
) -> bool:
    """Compare the mean e1RM of the second half against the first half.

    ``records`` must be in chronological order.  Halves without any
    e1RM skip the check (no decline).
    """
    midpoint = len(records) // 2
    first = _mean_e1rm(records[:midpoint])
    second = _mean_e1rm(records[midpoint:])
    if first is None or second is None:
        return False
    return second < first * decline_ratio


def _count_high_fatigue_streak(
    records: Sequence[SetRecord],
    cfg: DeloadConfig,
) -> int:
    """Consecutive high-fatigue records counted back from the latest.

    A missing score counts as 0 here, i.e. it never flags fatigue.
    """
    streak = 0
    for record in reversed(records):
        fatigued = (
            (record.feedback_soreness or 0) >= cfg.streak_soreness
            or (record.feedback_joint_pain or 0) >= cfg.streak_joint_pain
        )
        if not fatigued:
            break
        streak += 1
    return streak


def calculate_fatigue_snapshot(
    records: Sequence[SetRecord],
    days: Optional[int] = None,
    as_of: Optional[datetime.datetime] = None,
    config: Optional[DeloadConfig] = None,
) -> FatigueSnapshot | None:
    """Aggregate the records of the last ``days`` days.

    Args:
        records: Set records in any order.
        days: Lookback window (defaults to ``config.lookback_days``).
        as_of: End of the window.  Defaults to now, in the timezone of
            the records' ``session_date`` so naive and aware records
            both work.
        config: Optional threshold override.

    Returns:
        :class:`FatigueSnapshot`, or ``None`` when fewer than 3 records
        fall inside the window.
    """
    cfg = config or DEFAULT_DELOAD_CONFIG
    lookback = days if days is not None else cfg.lookback_days
    if as_of is None:
        tz = records[0].session_date.tzinfo if records else None
        as_of = datetime.datetime.now(tz=tz)
    now = as_of
    cutoff = now - datetime.timedelta(days=lookback)

    window = sorted(
        (r for r in records if r.session_date >= cutoff),
        key=lambda r: r.session_date,
    )
    if len(window) < cfg.min_records:
        logger.debug(
            "Insufficient records for fatigue snapshot",
            extra={"records_in_window": len(window), "lookback_days": lookback},
        )
        return None

    return FatigueSnapshot(
        avg_soreness=mean_of_present(window, lambda r: r.feedback_soreness),
        avg_joint_pain=mean_of_present(window, lambda r: r.feedback_joint_pain),
        avg_pump=mean_of_present(window, lambda r: r.feedback_pump),
        avg_rir=sum(r.rir for r in window) / len(window),
        performance_decline=_detect_performance_decline(window, cfg.decline_ratio),
        consecutive_high_fatigue=_count_high_fatigue_streak(window, cfg),
        sessions_analyzed=len(window),
    )


# ======================================================================
# Verdict
# ======================================================================


def _escalate(
    snapshot: FatigueSnapshot,
    cfg: DeloadConfig,
) -> tuple[DeloadSeverity, list[str]]:
    """Accumulate indicators and the resulting severity."""
    indicators: list[str] = []
    severity = DeloadSeverity.NONE

    if snapshot.avg_soreness >= cfg.soreness_indicator:
        indicators.append("High muscle soreness (≥4/5)")
        severity = DeloadSeverity.MODERATE

    if snapshot.avg_joint_pain >= cfg.joint_pain_indicator:
        indicators.append("Elevated joint pain (≥3/5)")
        severity = (
            DeloadSeverity.HIGH
            if severity == DeloadSeverity.MODERATE
            else DeloadSeverity.MODERATE
        )

    if snapshot.avg_pump <= cfg.poor_pump_max:
        indicators.append("Poor muscle pump (≤2/5)")

    if snapshot.performance_decline:
        indicators.append("Performance decline detected (>5% drop in e1RM)")
        severity = (
            DeloadSeverity.MILD
            if severity == DeloadSeverity.NONE
            else DeloadSeverity.HIGH
        )

    if snapshot.consecutive_high_fatigue >= cfg.streak_length:
        indicators.append(
            f"{snapshot.consecutive_high_fatigue} consecutive high-fatigue sessions"
        )
        severity = DeloadSeverity.HIGH

    if snapshot.avg_rir < cfg.low_rir_max:
        indicators.append("Consistently training too close to failure")

    return severity, indicators


def generate_deload_recommendation(
    snapshot: FatigueSnapshot,
    config: Optional[DeloadConfig] = None,
) -> DeloadRecommendation:
    """Decide whether a deload week is needed."""
    cfg = config or DEFAULT_DELOAD_CONFIG

    if snapshot.sessions_analyzed < cfg.min_records:
        return DeloadRecommendation(
            needs_deload=False,
            severity=DeloadSeverity.NONE,
            reason="Insufficient data to assess deload need",
            indicators=[],
            confidence=Confidence.LOW,
        )

    severity, indicators = _escalate(snapshot, cfg)

    needs_deload = False
    confidence = Confidence.MEDIUM
    if severity == DeloadSeverity.HIGH:
        needs_deload = True
        confidence = Confidence.HIGH
    elif (
        severity == DeloadSeverity.MODERATE
        and len(indicators) >= cfg.moderate_min_indicators
    ):
        needs_deload = True
    elif (
        severity == DeloadSeverity.MILD
        and len(indicators) >= cfg.mild_min_indicators
    ):
        needs_deload = True

    if needs_deload:
        plural = "" if len(indicators) == 1 else "s"
        reason = (
            f"Deload recommended due to {severity.value} fatigue accumulation. "
            f"{len(indicators)} indicator{plural} detected."
        )
    elif indicators:
        reason = (
            "Some fatigue indicators present, but not severe enough to warrant "
            "immediate deload. Monitor closely."
        )
    else:
        reason = "No significant fatigue detected. Continue with current training."

    logger.debug(
        "Deload verdict",
        extra={
            "severity": severity.value,
            "indicators": len(indicators),
            "needs_deload": needs_deload,
        },
    )

    return DeloadRecommendation(
        needs_deload=needs_deload,
        severity=severity,
        reason=reason,
        indicators=indicators,
        confidence=confidence,
    )


def check_deload_need(
    records: Sequence[SetRecord],
    as_of: Optional[datetime.datetime] = None,
    config: Optional[DeloadConfig] = None,
) -> DeloadRecommendation | None:
    """Snapshot + verdict over the default lookback window.

    Returns ``None`` when the window holds too few records.
    """
    snapshot = calculate_fatigue_snapshot(records, as_of=as_of, config=config)
    if snapshot is None:
        return None
    return generate_deload_recommendation(snapshot, config)


# ======================================================================
# Calendar-driven advisory
# ======================================================================


def should_recommend_deload(
    weeks_since_last_deload: int,
    avg_soreness: float,
    avg_joint_pain: float,
    performance_trend: PerformanceTrend,
) -> DeloadAdvisory:
    """Advise on a deload from elapsed weeks plus coarse recovery markers."""
    declining = performance_trend == PerformanceTrend.DECLINING
    weeks = weeks_since_last_deload

    if (
        (weeks >= 6 and avg_soreness >= 4)
        or avg_joint_pain >= 4
        or (weeks >= 8 and declining)
    ):
        return DeloadAdvisory(
            should_deload=True,
            urgency=Urgency.HIGH,
            reason=(
                "High fatigue accumulation detected. Immediate deload strongly "
                "recommended to prevent injury and overtraining."
            ),
        )

    if (
        (weeks >= 4 and avg_soreness >= 3.5)
        or (weeks >= 6 and avg_joint_pain >= 3)
        or (weeks >= 6 and declining)
    ):
        return DeloadAdvisory(
            should_deload=True,
            urgency=Urgency.MEDIUM,
            reason=(
                "Fatigue is building up. Consider scheduling a deload week to "
                "optimize recovery and performance."
            ),
        )

    if weeks >= 8:
        return DeloadAdvisory(
            should_deload=True,
            urgency=Urgency.LOW,
            reason="8+ weeks since last deload. Proactive deload recommended for long-term progress.",
        )

    return DeloadAdvisory(
        should_deload=False,
        urgency=Urgency.LOW,
        reason=(
            f"Recovery metrics are good. Continue training "
            f"({weeks} weeks since last deload)."
        ),
    )
