"""
Session density and muscle-group balance analytics.

Density estimates work vs rest inside one session from the logged sets:
every rep counts as ~4 s under tension and every set adds ~10 s of
setup.  Balance counts sets (one record = one set) and volume
(reps × weight) per muscle group and checks the push/pull ratio.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Sequence

from app.schemas.analytics import (
    BalanceAnalysis,
    Imbalance,
    MuscleGroupBalance,
    TrainingDensityMetrics,
)
from app.schemas.enums import MuscleGroup
from app.schemas.exercise import Exercise
from app.schemas.set_record import SetRecord

SECONDS_PER_REP = 4
SETUP_SECONDS_PER_SET = 10

PUSH_GROUPS = frozenset({MuscleGroup.CHEST, MuscleGroup.SHOULDERS, MuscleGroup.TRICEPS})
PULL_GROUPS = frozenset({MuscleGroup.BACK, MuscleGroup.BICEPS, MuscleGroup.REAR_DELTS})

PUSH_PULL_MAX = 1.5
PUSH_PULL_MIN = 0.67
NEGLECTED_SHARE = 5.0


def calculate_training_density(
    records: Sequence[SetRecord],
    session_minutes: float,
) -> TrainingDensityMetrics:
    """Estimate work/rest split for one session."""
    total_sets = len(records)
    time_under_tension = sum(r.reps for r in records) * SECONDS_PER_REP

    session_seconds = session_minutes * 60
    work = time_under_tension + total_sets * SETUP_SECONDS_PER_SET
    rest = max(0.0, session_seconds - work)

    avg_rest = rest / (total_sets - 1) if total_sets > 1 else 0.0
    density = work / session_seconds if session_seconds > 0 else 0.0

    return TrainingDensityMetrics(
        total_work_time=work,
        total_rest_time=rest,
        density_score=density,
        avg_rest_between_sets=avg_rest,
        time_under_tension=time_under_tension,
    )


def analyze_muscle_group_balance(
    records: Sequence[SetRecord],
    exercises: Sequence[Exercise],
) -> BalanceAnalysis:
    """Distribution of sets across muscle groups plus imbalance flags.

    Records whose exercise is not in ``exercises`` are ignored.
    """
    by_id = {e.id: e for e in exercises}
    sets: dict[MuscleGroup, int] = defaultdict(int)
    volume: dict[MuscleGroup, float] = defaultdict(float)

    for record in records:
        exercise = by_id.get(record.exercise_id)
        if exercise is None:
            continue
        sets[exercise.muscle_group] += 1
        volume[exercise.muscle_group] += record.reps * record.weight

    total_sets = sum(sets.values())
    distribution = [
        MuscleGroupBalance(
            muscle_group=group.value,
            total_sets=count,
            total_volume=volume[group],
            percentage=count / total_sets * 100 if total_sets > 0 else 0.0,
        )
        for group, count in sets.items()
    ]
    distribution.sort(key=lambda d: d.total_sets, reverse=True)

    push_sets = sum(n for g, n in sets.items() if g in PUSH_GROUPS)
    pull_sets = sum(n for g, n in sets.items() if g in PULL_GROUPS)
    ratio = push_sets / pull_sets if pull_sets > 0 else 0.0

    imbalances: list[Imbalance] = []
    if ratio > PUSH_PULL_MAX:
        imbalances.append(Imbalance(
            issue=f"Push/pull ratio is {ratio:.2f}:1 (too much pushing)",
            recommendation="Increase pulling exercises (rows, pull-ups) to balance shoulder health.",
        ))
    elif pull_sets > 0 and ratio < PUSH_PULL_MIN:
        imbalances.append(Imbalance(
            issue=f"Push/pull ratio is {ratio:.2f}:1 (too much pulling)",
            recommendation="Increase pushing exercises to balance upper body development.",
        ))

    for entry in distribution:
        if 0 < entry.percentage < NEGLECTED_SHARE:
            imbalances.append(Imbalance(
                issue=(
                    f"{entry.muscle_group} only receives {entry.percentage:.1f}% "
                    "of training volume"
                ),
                recommendation=(
                    f"Consider adding more {entry.muscle_group.lower()} exercises "
                    "for balanced development."
                ),
            ))

    return BalanceAnalysis(
        distribution=distribution,
        push_pull_ratio=ratio,
        imbalances=imbalances,
    )
