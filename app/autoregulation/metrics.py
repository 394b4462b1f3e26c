"""
Metric aggregator: reduces raw set records to :class:`PerformanceMetrics`.

Feedback scores are optional.  A missing score is excluded from its
average (it is *not* a zero); when no record in the sample reports a
score, that average is ``0.0``.
"""

from __future__ import annotations

from typing import Callable, Iterable, Optional, Sequence

from app.schemas.autoregulation import PerformanceMetrics
from app.schemas.set_record import SetRecord


def mean_of_present(
    records: Iterable[SetRecord],
    field: Callable[[SetRecord], Optional[float]],
) -> float:
    """Arithmetic mean of ``field`` over the records that report it.

    Returns ``0.0`` when no record reports the field.
    """
    values = [v for v in (field(r) for r in records) if v is not None]
    if not values:
        return 0.0
    return sum(values) / len(values)


def calculate_performance_metrics(
    records: Sequence[SetRecord],
) -> PerformanceMetrics | None:
    """Summarise a sample of set records.

    Order does not matter.  Returns ``None`` for an empty sample.
    """
    if not records:
        return None

    n = len(records)
    avg_rir = sum(r.rir for r in records) / n
    avg_target_rir = sum(r.target_rir for r in records) / n

    return PerformanceMetrics(
        avg_rir=avg_rir,
        avg_target_rir=avg_target_rir,
        rir_deviation=avg_rir - avg_target_rir,
        avg_soreness=mean_of_present(records, lambda r: r.feedback_soreness),
        avg_pump=mean_of_present(records, lambda r: r.feedback_pump),
        avg_joint_pain=mean_of_present(records, lambda r: r.feedback_joint_pain),
        sessions_analyzed=n,
    )
