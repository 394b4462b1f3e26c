"""
Set-volume recommender — how many working sets to prescribe next.

The policy is an **ordered decision table**: each rule is a guard
predicate plus an outcome, and the first rule whose guard holds wins.
Order is significant; later rules are only reachable when every earlier
guard failed (e.g. the time-based progression rule never fires when the
trainee reports recovery issues, because those rules come first).

Rules, in priority order:

    insufficient_data      sessions < 2                      hold   low
    joint_pain_reduce      recovery issues, joint pain >= 4  -1     high
    recovery_hold          recovery issues                   hold   high
    headroom_strong        deviation <= -1.5, good recovery
                           and good pump                     +1     high
    headroom               deviation <= -1.0, good recovery  +1     medium
    overreach_reduce       deviation >= 1.5, soreness >= 3   -1     high
    overreach_hold         deviation >= 1.5                  hold   medium
    stagnation_progress    >= 3 weeks since last increase,
                           pump >= 3                         +1     medium
    stable                 (always)                          hold   medium

Post-processing caps the increase at +2 sets and floors the result at 1
set; ``change`` is recomputed after clamping.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from pydantic import BaseModel, Field

from app.autoregulation.metrics import calculate_performance_metrics
from app.schemas.autoregulation import PerformanceMetrics, SetRecommendation
from app.schemas.enums import Confidence
from app.schemas.set_record import SetRecord

logger = logging.getLogger(__name__)


# ======================================================================
# Configuration
# ======================================================================


class VolumeConfig(BaseModel):
    """Thresholds for the set-volume decision table."""

    min_sessions: int = Field(2, ge=1)

    # Recovery flags (1-5 feedback scale)
    soreness_issue: float = Field(4.0, ge=1.0, le=5.0)
    joint_pain_issue: float = Field(3.0, ge=1.0, le=5.0)
    joint_pain_reduce: float = Field(4.0, ge=1.0, le=5.0)
    good_soreness_max: float = Field(2.0, ge=0.0, le=5.0)
    good_joint_pain_max: float = Field(1.0, ge=0.0, le=5.0)
    good_pump_min: float = Field(4.0, ge=1.0, le=5.0)

    # RIR deviation (avg RIR - target RIR)
    strong_headroom_deviation: float = -1.5
    headroom_deviation: float = -1.0
    overreach_deviation: float = 1.5
    overreach_soreness: float = Field(3.0, ge=1.0, le=5.0)

    # Time-based progression
    stagnation_weeks: int = Field(3, ge=1)
    stagnation_pump_min: float = Field(3.0, ge=1.0, le=5.0)

    max_increase: int = Field(2, ge=0, le=2)


DEFAULT_VOLUME_CONFIG = VolumeConfig()


# ======================================================================
# Decision table
# ======================================================================


@dataclass(frozen=True)
class _Signals:
    """Everything a rule guard may look at."""

    metrics: PerformanceMetrics
    current_sets: int
    weeks_since_last_increase: int
    has_recovery_issues: bool
    has_good_recovery: bool
    has_good_pump: bool
    cfg: VolumeConfig


@dataclass(frozen=True)
class _Outcome:
    delta: int
    reason: str
    confidence: Confidence


@dataclass(frozen=True)
class _Rule:
    name: str
    applies: Callable[[_Signals], bool]
    outcome: _Outcome


def _build_signals(
    current_sets: int,
    metrics: PerformanceMetrics,
    weeks_since_last_increase: int,
    cfg: VolumeConfig,
) -> _Signals:
    return _Signals(
        metrics=metrics,
        current_sets=current_sets,
        weeks_since_last_increase=weeks_since_last_increase,
        has_recovery_issues=(
            metrics.avg_soreness >= cfg.soreness_issue
            or metrics.avg_joint_pain >= cfg.joint_pain_issue
        ),
        has_good_recovery=(
            metrics.avg_soreness <= cfg.good_soreness_max
            and metrics.avg_joint_pain <= cfg.good_joint_pain_max
        ),
        has_good_pump=metrics.avg_pump >= cfg.good_pump_min,
        cfg=cfg,
    )


_RULES: list[_Rule] = [
    _Rule(
        "insufficient_data",
        lambda s: s.metrics.sessions_analyzed < s.cfg.min_sessions,
        _Outcome(
            0,
            "Insufficient data for recommendation (need at least 2 sessions).",
            Confidence.LOW,
        ),
    ),
    _Rule(
        "joint_pain_reduce",
        lambda s: s.has_recovery_issues
        and s.metrics.avg_joint_pain >= s.cfg.joint_pain_reduce,
        _Outcome(
            -1,
            "High joint pain detected. Reducing volume for recovery.",
            Confidence.HIGH,
        ),
    ),
    _Rule(
        "recovery_hold",
        lambda s: s.has_recovery_issues,
        _Outcome(
            0,
            "High soreness detected. Maintaining current volume for recovery.",
            Confidence.HIGH,
        ),
    ),
    _Rule(
        "headroom_strong",
        lambda s: s.metrics.rir_deviation <= s.cfg.strong_headroom_deviation
        and s.has_good_recovery
        and s.has_good_pump,
        _Outcome(
            1,
            "Consistently exceeding RIR targets with good recovery and pump. "
            "Ready for volume increase.",
            Confidence.HIGH,
        ),
    ),
    _Rule(
        "headroom",
        lambda s: s.metrics.rir_deviation <= s.cfg.headroom_deviation
        and s.has_good_recovery,
        _Outcome(
            1,
            "Good RIR performance with solid recovery. Progressive overload recommended.",
            Confidence.MEDIUM,
        ),
    ),
    _Rule(
        "overreach_reduce",
        lambda s: s.metrics.rir_deviation >= s.cfg.overreach_deviation
        and s.metrics.avg_soreness >= s.cfg.overreach_soreness,
        _Outcome(
            -1,
            "Pushing too hard relative to targets with elevated soreness. Reduce volume.",
            Confidence.HIGH,
        ),
    ),
    _Rule(
        "overreach_hold",
        lambda s: s.metrics.rir_deviation >= s.cfg.overreach_deviation,
        _Outcome(
            0,
            "Consistently pushing beyond RIR targets. "
            "Maintain volume and focus on technique.",
            Confidence.MEDIUM,
        ),
    ),
    _Rule(
        "stagnation_progress",
        lambda s: s.weeks_since_last_increase >= s.cfg.stagnation_weeks
        and not s.has_recovery_issues
        and s.metrics.avg_pump >= s.cfg.stagnation_pump_min,
        _Outcome(
            1,
            "Stable performance for 3+ weeks with good indicators. Time for progression.",
            Confidence.MEDIUM,
        ),
    ),
    _Rule(
        "stable",
        lambda s: True,
        _Outcome(
            0,
            "Performance is stable. Continue with current volume.",
            Confidence.MEDIUM,
        ),
    ),
]


def _first_matching_rule(signals: _Signals) -> _Rule:
    for rule in _RULES:
        if rule.applies(signals):
            return rule
    # The last rule always applies.
    return _RULES[-1]


# ======================================================================
# Public API
# ======================================================================


def generate_set_recommendation(
    current_sets: int,
    metrics: PerformanceMetrics,
    weeks_since_last_increase: int = 0,
    config: Optional[VolumeConfig] = None,
) -> SetRecommendation:
    """Recommend the next working-set count.

    Args:
        current_sets: Currently prescribed sets (>= 1).
        metrics: Aggregated recent performance for the exercise.
        weeks_since_last_increase: Weeks since sets were last added.
        config: Optional threshold override.

    Returns:
        :class:`SetRecommendation` with ``1 <= recommended_sets <=
        current_sets + 2``.
    """
    cfg = config or DEFAULT_VOLUME_CONFIG
    signals = _build_signals(current_sets, metrics, weeks_since_last_increase, cfg)
    rule = _first_matching_rule(signals)

    recommended = current_sets + rule.outcome.delta
    reason = rule.outcome.reason

    # Safety cap on increases.
    if recommended > current_sets + cfg.max_increase:
        recommended = current_sets + cfg.max_increase
        reason += f" (Capped at +{cfg.max_increase} sets for safety)"

    # Never below one set.
    if recommended < 1:
        recommended = 1

    logger.debug(
        "Set recommendation",
        extra={
            "rule": rule.name,
            "current_sets": current_sets,
            "recommended_sets": recommended,
            "rir_deviation": metrics.rir_deviation,
        },
    )

    return SetRecommendation(
        current_sets=current_sets,
        recommended_sets=recommended,
        change=recommended - current_sets,
        reason=reason,
        confidence=rule.outcome.confidence,
    )


def get_exercise_set_recommendation(
    exercise_id: int,
    current_sets: int,
    records: Sequence[SetRecord],
    weeks_since_last_increase: int = 0,
    config: Optional[VolumeConfig] = None,
) -> SetRecommendation | None:
    """Set recommendation for one exercise from a mixed record history.

    Returns ``None`` when the history has no records for the exercise.
    """
    exercise_records = [r for r in records if r.exercise_id == exercise_id]
    metrics = calculate_performance_metrics(exercise_records)
    if metrics is None:
        logger.debug("No records for exercise", extra={"exercise_id": exercise_id})
        return None
    return generate_set_recommendation(
        current_sets, metrics, weeks_since_last_increase, config,
    )
