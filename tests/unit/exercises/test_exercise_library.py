"""
Unit tests for the built-in exercise library.
"""

import pytest

from app.exercises.library import (
    EXERCISE_LIBRARY,
    get_exercise,
    list_exercises,
    register_exercise,
)
from app.schemas.enums import MuscleGroup
from app.schemas.exercise import Exercise


class TestLibraryContents:
    """The default library ships with 32 exercises."""

    def test_library_size(self):
        assert len(list_exercises()) >= 32

    def test_ids_are_sorted(self):
        ids = [e.id for e in list_exercises()]
        assert ids == sorted(ids)

    @pytest.mark.parametrize("exercise_id,name,group", [
        (1, "Barbell Bench Press", MuscleGroup.CHEST),
        (5, "Barbell Row", MuscleGroup.BACK),
        (11, "Lateral Raise", MuscleGroup.SHOULDERS),
        (20, "Barbell Squat", MuscleGroup.QUADS),
        (24, "Romanian Deadlift", MuscleGroup.HAMSTRINGS),
        (32, "Hanging Leg Raise", MuscleGroup.ABS),
    ])
    def test_known_entries(self, exercise_id, name, group):
        exercise = get_exercise(exercise_id)
        assert exercise.name == name
        assert exercise.muscle_group == group

    def test_defaults_are_not_custom(self):
        assert all(not e.is_custom for e in list_exercises() if e.id <= 32)

    def test_unknown_id(self):
        assert get_exercise(9999) is None


class TestListExercises:
    """Filtering by muscle group."""

    def test_filter_by_group(self):
        quads = list_exercises(MuscleGroup.QUADS)
        assert [e.name for e in quads] == [
            "Barbell Squat", "Leg Press", "Leg Extension", "Bulgarian Split Squat",
        ]

    def test_group_without_exercises(self):
        assert list_exercises(MuscleGroup.FOREARMS) == []


class TestRegisterExercise:

    def test_register_and_lookup(self):
        custom = Exercise(id=500, name="Belt Squat", muscle_group=MuscleGroup.QUADS, is_custom=True)
        try:
            register_exercise(custom)
            assert get_exercise(500) == custom
            assert custom in list_exercises(MuscleGroup.QUADS)
        finally:
            EXERCISE_LIBRARY.pop(500, None)
