"""
Fatigue index schema.

The fatigue index is a 0-100 composite built from soreness, joint pain,
week-over-week volume change and the weekly volume trend:

    index = soreness/5 × 30 + joint_pain/5 × 30
            + min((last_week / previous_week − 1) × 100, 20)
            + {declining: 20, stable: 10, improving: 0}

clamped to [0, 100] and bucketed into
low (<30), moderate (<50), high (<70), severe (>=70).
"""

from pydantic import BaseModel, Field

from app.schemas.enums import FatigueLevel, PerformanceTrend


class FatigueMetrics(BaseModel):
    """Composite fatigue index over a rolling two-week sample."""

    fatigue_index: float = Field(..., ge=0.0, le=100.0)
    fatigue_level: FatigueLevel
    weekly_volume: float = Field(
        ..., ge=0.0,
        description="Sum of reps × weight over the sample",
    )
    avg_soreness: float = Field(..., ge=0.0, le=5.0)
    avg_joint_pain: float = Field(..., ge=0.0, le=5.0)
    performance_trend: PerformanceTrend
    recommendation: str
