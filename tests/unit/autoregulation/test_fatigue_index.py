"""
Unit tests for the 0-100 fatigue index.
"""

import datetime

import pytest

from app.autoregulation.fatigue import (
    _label_fatigue,
    _volume_change_points,
    calculate_fatigue_index,
    classify_volume_trend,
)
from app.schemas.enums import FatigueLevel, PerformanceTrend
from app.schemas.set_record import SetRecord


def _make_record(soreness=None, joint_pain=None, weight=100.0, reps=10) -> SetRecord:
    return SetRecord(
        exercise_id=1,
        session_id=1,
        weight=weight,
        reps=reps,
        rir=2,
        target_rir=2,
        session_date=datetime.datetime(2026, 3, 10),
        feedback_soreness=soreness,
        feedback_joint_pain=joint_pain,
    )


# ======================================================================
# _label_fatigue
# ======================================================================


class TestLabelFatigue:

    @pytest.mark.parametrize("value,expected", [
        (0.0, FatigueLevel.LOW),
        (29.9, FatigueLevel.LOW),
        (30.0, FatigueLevel.MODERATE),
        (49.9, FatigueLevel.MODERATE),
        (50.0, FatigueLevel.HIGH),
        (69.9, FatigueLevel.HIGH),
        (70.0, FatigueLevel.SEVERE),
        (100.0, FatigueLevel.SEVERE),
    ])
    def test_thresholds(self, value, expected):
        assert _label_fatigue(value) == expected


# ======================================================================
# classify_volume_trend
# ======================================================================


class TestClassifyVolumeTrend:

    @pytest.mark.parametrize("volumes,expected", [
        ([], PerformanceTrend.STABLE),
        ([1000], PerformanceTrend.STABLE),
        ([1000, 1050], PerformanceTrend.STABLE),
        ([1000, 1300], PerformanceTrend.IMPROVING),
        ([1000, 700], PerformanceTrend.DECLINING),
        # Four weeks: first two vs last two.
        ([1000, 1000, 1200, 1200], PerformanceTrend.IMPROVING),
        ([1000, 1000, 850, 850], PerformanceTrend.DECLINING),
        ([1000, 1000, 1000, 1100], PerformanceTrend.STABLE),
        # Three weeks: first week vs last two.
        ([1000, 1500, 1300], PerformanceTrend.IMPROVING),
    ])
    def test_trend(self, volumes, expected):
        assert classify_volume_trend(volumes) == expected


class TestVolumeChangePoints:

    def test_capped(self):
        assert _volume_change_points([1000, 2000], 20.0) == 20.0

    def test_negative_change_lowers_score(self):
        assert _volume_change_points([1000, 900], 20.0) == pytest.approx(-10.0)

    def test_zero_previous_week(self):
        assert _volume_change_points([0, 0.5], 20.0) == pytest.approx(-50.0)

    def test_single_week(self):
        assert _volume_change_points([1000], 20.0) == 0.0


# ======================================================================
# calculate_fatigue_index
# ======================================================================


class TestCalculateFatigueIndex:

    def test_empty_sample(self):
        metrics = calculate_fatigue_index([], [1000, 1200])
        assert metrics.fatigue_index == 0.0
        assert metrics.fatigue_level == FatigueLevel.LOW
        assert metrics.performance_trend == PerformanceTrend.STABLE
        assert metrics.recommendation == "No recent training data available."

    def test_composite_score(self):
        records = [_make_record(soreness=3, joint_pain=2), _make_record(soreness=3, joint_pain=2)]
        metrics = calculate_fatigue_index(records, [1000, 1000, 1000, 1100])

        # 18 soreness + 12 joint pain + 10 volume change + 10 stable trend.
        assert metrics.fatigue_index == pytest.approx(50.0)
        assert metrics.fatigue_level == FatigueLevel.HIGH
        assert metrics.weekly_volume == 2000.0
        assert metrics.performance_trend == PerformanceTrend.STABLE

    def test_missing_feedback_counts_as_zero(self):
        records = [_make_record(soreness=4, joint_pain=2), _make_record()]
        metrics = calculate_fatigue_index(records, [])

        assert metrics.avg_soreness == 2.0
        assert metrics.avg_joint_pain == 1.0

    def test_declining_trend_adds_points(self):
        records = [_make_record(soreness=1, joint_pain=1)]
        stable = calculate_fatigue_index(records, [1000, 1000])
        declining = calculate_fatigue_index(records, [1000, 1000, 800, 800])
        # declining: +20 trend, -0 change (800/800); stable: +10 trend.
        assert declining.fatigue_index - stable.fatigue_index == pytest.approx(10.0)

    def test_clamped_at_zero(self):
        records = [_make_record()]
        metrics = calculate_fatigue_index(records, [1000, 1300, 1300, 100])
        assert metrics.fatigue_index == 0.0
        assert metrics.fatigue_level == FatigueLevel.LOW

    def test_clamped_at_hundred(self):
        records = [_make_record(soreness=5, joint_pain=5)]
        metrics = calculate_fatigue_index(records, [2000, 2000, 1000, 1500])
        # 30 + 30 + 20 (capped) + 20 (declining) = 100
        assert metrics.fatigue_index == pytest.approx(100.0)
        assert metrics.fatigue_level == FatigueLevel.SEVERE
        assert "Severe fatigue" in metrics.recommendation
