"""Autoregulation engine: set volume, deload, fatigue, injury risk and progression."""

from app.autoregulation.deload import check_deload_need, generate_deload_recommendation
from app.autoregulation.metrics import calculate_performance_metrics
from app.autoregulation.volume import generate_set_recommendation

__all__ = [
    "calculate_performance_metrics",
    "check_deload_need",
    "generate_deload_recommendation",
    "generate_set_recommendation",
]
