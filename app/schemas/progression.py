"""
Load-progression and exercise-staleness schemas.
"""

from pydantic import BaseModel, Field

from app.schemas.enums import Confidence


class ProgressionRecommendation(BaseModel):
    """Whether (and by how much) to raise the working weight."""

    should_progress: bool
    recommended_weight: float
    current_weight: float
    confidence: Confidence
    reason: str
    increase_percent: float = Field(
        ...,
        description="Target percentage increase used to size the jump",
    )


class StalenessReport(BaseModel):
    """How long an exercise has been in the program."""

    is_stale: bool
    weeks_used: int = Field(..., ge=0)
    recommendation: str
