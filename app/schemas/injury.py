"""
Injury-risk schema.
"""

from typing import Optional

from pydantic import BaseModel, Field

from app.schemas.enums import RiskTier
from app.schemas.exercise import Exercise


class InjuryRisk(BaseModel):
    """Joint-pain driven risk flag for one exercise."""

    exercise_id: int
    exercise_name: str
    risk_level: RiskTier
    avg_joint_pain: float = Field(..., ge=0.0, le=5.0)
    recent_sessions: int = Field(
        ..., ge=1,
        description="Distinct sessions present in the sampled sets",
    )
    recommendation: str
    alternatives: Optional[list[Exercise]] = None
