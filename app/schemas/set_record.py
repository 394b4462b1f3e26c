"""
Set record schema, the atomic unit of training history.

One :class:`SetRecord` is written by the logging surface each time a set
is completed.  Records are read-only for every analysis component; the
only permitted changes are late feedback attachment and recomputation of
the estimated one-rep max after a weight/reps edit.  Both return a new
record instead of mutating in place.

Feedback scores (soreness, pump, joint pain) use a 1-5 scale and are
optional: ``None`` means "not reported", which is different from a low
score.
"""

from __future__ import annotations

import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# Brzycki is undefined at 37 reps and above.
_BRZYCKI_REP_LIMIT = 37


def estimate_one_rep_max(weight: float, reps: int) -> float | None:
    """Estimate the one-rep max with the Brzycki formula.

    ``weight × 36 / (37 − reps)``.  A single rep returns the weight
    itself.  Returns ``None`` when the formula is undefined (no reps, or
    37 reps and above).
    """
    if reps <= 0 or reps >= _BRZYCKI_REP_LIMIT:
        return None
    if reps == 1:
        return float(weight)
    return weight * (36 / (_BRZYCKI_REP_LIMIT - reps))


class SetRecord(BaseModel):
    """A single completed set."""

    model_config = ConfigDict(frozen=True)

    exercise_id: int = Field(..., description="Exercise identifier")
    session_id: int = Field(..., description="Workout session identifier")
    set_number: int = Field(1, ge=1, description="1-based set index within the session")
    weight: float = Field(..., description="Load lifted (unit-agnostic)")
    reps: int = Field(..., ge=0, description="Repetitions performed")
    rir: float = Field(..., description="Reps in reserve actually achieved (0 = failure)")
    target_rir: float = Field(..., description="Prescribed reps in reserve")
    e1rm: Optional[float] = Field(None, description="Estimated one-rep max")
    session_date: datetime.datetime = Field(..., description="When the session took place")
    feedback_soreness: Optional[int] = Field(None, ge=1, le=5)
    feedback_pump: Optional[int] = Field(None, ge=1, le=5)
    feedback_joint_pain: Optional[int] = Field(None, ge=1, le=5)

    def with_feedback(
        self,
        soreness: int | None = None,
        pump: int | None = None,
        joint_pain: int | None = None,
    ) -> SetRecord:
        """Return a copy with the given feedback attached.

        Only the scores passed explicitly are replaced.
        """
        update: dict[str, int] = {}
        if soreness is not None:
            update["feedback_soreness"] = soreness
        if pump is not None:
            update["feedback_pump"] = pump
        if joint_pain is not None:
            update["feedback_joint_pain"] = joint_pain
        # model_validate re-runs the 1-5 bounds on the new values.
        return SetRecord.model_validate({**self.model_dump(), **update})

    def with_load(self, weight: float, reps: int) -> SetRecord:
        """Return a copy with edited weight/reps and a recomputed e1RM."""
        return SetRecord.model_validate({
            **self.model_dump(),
            "weight": weight,
            "reps": reps,
            "e1rm": estimate_one_rep_max(weight, reps),
        })
