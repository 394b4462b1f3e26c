"""
Training analytics schemas.
"""

from pydantic import BaseModel, Field


class TrainingDensityMetrics(BaseModel):
    """Work/rest split of a single session (seconds)."""

    total_work_time: float = Field(..., ge=0.0)
    total_rest_time: float = Field(..., ge=0.0)
    density_score: float = Field(
        ..., ge=0.0,
        description="Work time / session time",
    )
    avg_rest_between_sets: float = Field(..., ge=0.0)
    time_under_tension: float = Field(..., ge=0.0)


class MuscleGroupBalance(BaseModel):
    """Share of training for one muscle group."""

    muscle_group: str
    total_sets: int = Field(..., ge=0)
    total_volume: float
    percentage: float = Field(..., ge=0.0, le=100.0)


class Imbalance(BaseModel):
    issue: str
    recommendation: str


class BalanceAnalysis(BaseModel):
    """Distribution of sets across muscle groups plus flagged imbalances."""

    distribution: list[MuscleGroupBalance]
    push_pull_ratio: float = Field(..., ge=0.0)
    imbalances: list[Imbalance] = Field(default_factory=list)
