"""
Built-in exercise library.

Each entry is an :class:`~app.schemas.exercise.Exercise` filed under one
primary muscle group.  The library is the default candidate pool for the
substitution and rotation selectors; callers with their own library
(custom exercises from the external store) pass it explicitly instead.

To add a new exercise, call :func:`register_exercise`.
"""

from __future__ import annotations

from app.schemas.enums import MuscleGroup
from app.schemas.exercise import Exercise

# ======================================================================
# Library storage
# ======================================================================

EXERCISE_LIBRARY: dict[int, Exercise] = {}


def register_exercise(exercise: Exercise) -> None:
    """Register an exercise in the global library."""
    EXERCISE_LIBRARY[exercise.id] = exercise


def get_exercise(exercise_id: int) -> Exercise | None:
    """Look up an exercise by its ID.  Returns ``None`` if not found."""
    return EXERCISE_LIBRARY.get(exercise_id)


def list_exercises(muscle_group: MuscleGroup | None = None) -> list[Exercise]:
    """All library exercises ordered by ID, optionally for one muscle group."""
    exercises = sorted(EXERCISE_LIBRARY.values(), key=lambda e: e.id)
    if muscle_group is None:
        return exercises
    return [e for e in exercises if e.muscle_group == muscle_group]


# ======================================================================
# Built-in exercises
# ======================================================================

_DEFAULTS: list[tuple[str, MuscleGroup]] = [
    # ── Chest ─────────────────────────────────────────────────────
    ("Barbell Bench Press", MuscleGroup.CHEST),
    ("Incline Dumbbell Press", MuscleGroup.CHEST),
    ("Cable Fly", MuscleGroup.CHEST),
    ("Dips (Chest Focus)", MuscleGroup.CHEST),

    # ── Back ──────────────────────────────────────────────────────
    ("Barbell Row", MuscleGroup.BACK),
    ("Pull-ups", MuscleGroup.BACK),
    ("Lat Pulldown", MuscleGroup.BACK),
    ("Seated Cable Row", MuscleGroup.BACK),
    ("Deadlift", MuscleGroup.BACK),

    # ── Shoulders ─────────────────────────────────────────────────
    ("Overhead Press", MuscleGroup.SHOULDERS),
    ("Lateral Raise", MuscleGroup.SHOULDERS),
    ("Face Pull", MuscleGroup.SHOULDERS),
    ("Arnold Press", MuscleGroup.SHOULDERS),

    # ── Biceps ────────────────────────────────────────────────────
    ("Barbell Curl", MuscleGroup.BICEPS),
    ("Hammer Curl", MuscleGroup.BICEPS),
    ("Preacher Curl", MuscleGroup.BICEPS),

    # ── Triceps ───────────────────────────────────────────────────
    ("Close-Grip Bench Press", MuscleGroup.TRICEPS),
    ("Overhead Tricep Extension", MuscleGroup.TRICEPS),
    ("Cable Pushdown", MuscleGroup.TRICEPS),

    # ── Quads ─────────────────────────────────────────────────────
    ("Barbell Squat", MuscleGroup.QUADS),
    ("Leg Press", MuscleGroup.QUADS),
    ("Leg Extension", MuscleGroup.QUADS),
    ("Bulgarian Split Squat", MuscleGroup.QUADS),

    # ── Hamstrings ────────────────────────────────────────────────
    ("Romanian Deadlift", MuscleGroup.HAMSTRINGS),
    ("Leg Curl", MuscleGroup.HAMSTRINGS),
    ("Nordic Curl", MuscleGroup.HAMSTRINGS),

    # ── Glutes ────────────────────────────────────────────────────
    ("Hip Thrust", MuscleGroup.GLUTES),
    ("Glute Bridge", MuscleGroup.GLUTES),

    # ── Calves ────────────────────────────────────────────────────
    ("Standing Calf Raise", MuscleGroup.CALVES),
    ("Seated Calf Raise", MuscleGroup.CALVES),

    # ── Abs ───────────────────────────────────────────────────────
    ("Cable Crunch", MuscleGroup.ABS),
    ("Hanging Leg Raise", MuscleGroup.ABS),
]

# Auto-register all built-in exercises (IDs are 1-based, in table order)
for _idx, (_name, _group) in enumerate(_DEFAULTS, start=1):
    register_exercise(Exercise(id=_idx, name=_name, muscle_group=_group))
