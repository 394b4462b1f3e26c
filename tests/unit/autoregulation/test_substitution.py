"""
Unit tests for movement classification, substitution ranking, rotation
advice and staleness.
"""

import datetime

import pytest

from app.autoregulation.substitution import (
    check_exercise_staleness,
    classify_movement,
    get_rotation_recommendations,
    get_substitutions,
    is_compound_movement,
)
from app.exercises.library import get_exercise, list_exercises
from app.schemas.enums import MovementClass, MuscleGroup, Similarity, SubstitutionReason, Urgency
from app.schemas.exercise import Exercise


# ======================================================================
# Classification
# ======================================================================


class TestClassifyMovement:

    @pytest.mark.parametrize("name,expected", [
        ("Barbell Squat", MovementClass.COMPOUND),
        ("Close-Grip Bench Press", MovementClass.COMPOUND),
        ("Pull-ups", MovementClass.COMPOUND),
        ("Dips (Chest Focus)", MovementClass.COMPOUND),
        ("Romanian DEADLIFT", MovementClass.COMPOUND),
        ("Leg Extension", MovementClass.ISOLATION),
        ("Lateral Raise", MovementClass.ISOLATION),
        ("Face Pull", MovementClass.ISOLATION),
        ("Cable Crunch", MovementClass.ISOLATION),
    ])
    def test_keywords(self, name, expected):
        assert classify_movement(name) == expected

    def test_is_compound(self):
        assert is_compound_movement("Seated Cable Row") is True
        assert is_compound_movement("Hammer Curl") is False


# ======================================================================
# get_substitutions
# ======================================================================


class TestGetSubstitutions:

    def test_squat_ranking(self):
        subs = get_substitutions(get_exercise(20), list_exercises())

        assert [(s.exercise.name, s.similarity) for s in subs] == [
            ("Leg Press", Similarity.HIGH),
            ("Bulgarian Split Squat", Similarity.HIGH),
            ("Leg Extension", Similarity.MEDIUM),
        ]
        assert subs[0].reason == "Similar compound movement for Quads"
        assert subs[2].reason == "Alternative isolation movement for Quads"

    def test_rotation_reason(self):
        subs = get_substitutions(get_exercise(20), list_exercises(), SubstitutionReason.ROTATION)
        assert {s.reason for s in subs} == {"Fresh alternative after extended use of Barbell Squat"}

    def test_injury_reason(self):
        subs = get_substitutions(get_exercise(1), list_exercises(), SubstitutionReason.INJURY)
        assert {s.reason for s in subs} == {"Lower-stress alternative for Chest"}

    def test_capped_at_five(self):
        current = Exercise(id=1, name="Barbell Curl", muscle_group=MuscleGroup.BICEPS)
        candidates = [current] + [
            Exercise(id=i, name=f"Curl Variation {i}", muscle_group=MuscleGroup.BICEPS)
            for i in range(2, 10)
        ]
        subs = get_substitutions(current, candidates)
        assert len(subs) == 5
        assert [s.exercise.id for s in subs] == [2, 3, 4, 5, 6]

    def test_no_candidates(self):
        lonely = Exercise(id=900, name="Wrist Curl", muscle_group=MuscleGroup.FOREARMS)
        assert get_substitutions(lonely, list_exercises()) == []


# ======================================================================
# get_rotation_recommendations
# ======================================================================


class TestRotationRecommendations:

    def test_high_urgency(self):
        advice = get_rotation_recommendations(20, 8, list_exercises())

        assert advice.should_rotate is True
        assert advice.urgency == Urgency.HIGH
        assert advice.message == (
            "Barbell Squat has been used for 8 weeks. "
            "Rotation strongly recommended for continued progress."
        )
        assert [e.name for e in advice.alternatives] == [
            "Leg Press", "Bulgarian Split Squat", "Leg Extension",
        ]

    def test_medium_urgency(self):
        advice = get_rotation_recommendations(20, 6, list_exercises())
        assert advice.should_rotate is True
        assert advice.urgency == Urgency.MEDIUM
        assert "Consider rotating" in advice.message

    def test_still_fresh(self):
        advice = get_rotation_recommendations(20, 3, list_exercises())
        assert advice.should_rotate is False
        assert advice.urgency == Urgency.LOW
        assert advice.message == "Barbell Squat is still fresh (3 weeks). Continue as planned."
        assert advice.alternatives

    def test_unknown_exercise(self):
        advice = get_rotation_recommendations(9999, 10, list_exercises())
        assert advice.should_rotate is False
        assert advice.alternatives == []
        assert advice.message == "Exercise not found"


# ======================================================================
# check_exercise_staleness
# ======================================================================


class TestExerciseStaleness:

    FIRST = datetime.datetime(2026, 1, 5, 18, 0)

    @pytest.mark.parametrize("days,weeks,stale", [
        (0, 0, False),
        (13, 1, False),
        (41, 5, False),
        (44, 6, True),
        (60, 8, True),
    ])
    def test_weeks_and_flag(self, days, weeks, stale):
        report = check_exercise_staleness(self.FIRST, self.FIRST + datetime.timedelta(days=days))
        assert report.weeks_used == weeks
        assert report.is_stale is stale

    def test_reversed_dates_clamp_to_zero(self):
        report = check_exercise_staleness(self.FIRST, self.FIRST - datetime.timedelta(days=20))
        assert report.weeks_used == 0
        assert report.is_stale is False

    def test_long_use_message(self):
        report = check_exercise_staleness(self.FIRST, self.FIRST + datetime.timedelta(weeks=9))
        assert report.recommendation.startswith("Consider rotating this exercise.")
