"""Built-in exercise library."""

from app.exercises.library import (
    EXERCISE_LIBRARY,
    get_exercise,
    list_exercises,
    register_exercise,
)

__all__ = [
    "EXERCISE_LIBRARY",
    "get_exercise",
    "list_exercises",
    "register_exercise",
]
