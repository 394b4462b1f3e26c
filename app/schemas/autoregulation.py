"""
Set-volume autoregulation schemas.

:class:`PerformanceMetrics` is the ephemeral summary of an exercise's
recent sets; :class:`SetRecommendation` is the engine's answer to "how
many sets next time?".
"""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, Field, model_validator

from app.schemas.enums import Confidence


class PerformanceMetrics(BaseModel):
    """Aggregated statistics over a sample of set records.

    Feedback averages only use records that carry that feedback score
    and are ``0.0`` when none of them do.
    """

    avg_rir: float
    avg_target_rir: float
    rir_deviation: float = Field(
        ...,
        description="avg_rir - avg_target_rir",
    )
    avg_soreness: float = Field(0.0, ge=0.0, le=5.0)
    avg_pump: float = Field(0.0, ge=0.0, le=5.0)
    avg_joint_pain: float = Field(0.0, ge=0.0, le=5.0)
    sessions_analyzed: int = Field(
        ..., ge=0,
        description="Number of records in the sample",
    )


class SetRecommendation(BaseModel):
    """Recommended working-set count for the next session."""

    current_sets: int = Field(..., ge=1)
    recommended_sets: int = Field(..., ge=1)
    change: int = Field(
        ..., le=2,
        description="recommended_sets - current_sets (never above +2)",
    )
    reason: str
    confidence: Confidence

    @model_validator(mode="after")
    def validate_change(self) -> Self:
        if self.recommended_sets != self.current_sets + self.change:
            raise ValueError(
                "recommended_sets must equal current_sets + change"
            )
        return self
