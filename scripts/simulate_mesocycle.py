"""Simulate a 4-week mesocycle and print every engine recommendation.

Usage:
    python scripts/simulate_mesocycle.py
"""

import datetime
import sys
from collections import defaultdict
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.autoregulation.deload import calculate_fatigue_snapshot, generate_deload_recommendation
from app.autoregulation.deload_plan import generate_deload_week
from app.autoregulation.fatigue import calculate_fatigue_index
from app.autoregulation.injury import get_all_injury_risks
from app.autoregulation.progression import analyze_progression
from app.autoregulation.substitution import get_rotation_recommendations
from app.autoregulation.volume import get_exercise_set_recommendation
from app.core.config import settings
from app.core.logging import configure_logging
from app.exercises.library import get_exercise, list_exercises
from app.schemas.program import Microcycle, SessionExercise
from app.schemas.set_record import SetRecord, estimate_one_rep_max

START = datetime.datetime(2026, 9, 7, 18, 0)

# (library exercise id, prescribed sets, week-1 weight)
PROGRAM = [
    (1, 3, 80.0),    # Barbell Bench Press
    (5, 3, 70.0),    # Barbell Row
    (20, 4, 100.0),  # Barbell Squat
    (25, 3, 40.0),   # Leg Curl
]

# Per week: (RIR achieved, soreness, pump, joint pain); target RIR is 2.
WEEKLY_FEEL = [
    (3, 2, 4, 1),
    (3, 2, 4, 1),
    (2, 3, 4, 2),
    (1, 4, 3, 3),
]

TARGET_RIR = 2
REPS = 10


def build_log() -> list[SetRecord]:
    records = []
    session_id = 0
    for week, (rir, soreness, pump, joint_pain) in enumerate(WEEKLY_FEEL):
        for day in (0, 3):
            session_id += 1
            date = START + datetime.timedelta(weeks=week, days=day)
            for exercise_id, sets, weight in PROGRAM:
                load = weight + 2.5 * week
                for set_number in range(1, sets + 1):
                    records.append(SetRecord(
                        exercise_id=exercise_id,
                        session_id=session_id,
                        set_number=set_number,
                        weight=load,
                        reps=REPS,
                        rir=rir,
                        target_rir=TARGET_RIR,
                        e1rm=estimate_one_rep_max(load, REPS),
                        session_date=date,
                        feedback_soreness=soreness,
                        feedback_pump=pump,
                        feedback_joint_pain=joint_pain,
                    ))
    return records


def weekly_volumes(records: list[SetRecord]) -> list[float]:
    volumes: dict[int, float] = defaultdict(float)
    for r in records:
        week = (r.session_date - START).days // 7
        volumes[week] += r.reps * r.weight
    return [volumes[w] for w in sorted(volumes)]


def main():
    configure_logging(settings.LOG_LEVEL)
    records = build_log()
    as_of = START + datetime.timedelta(weeks=4)

    print()
    print("=" * 90)
    print(f"{'Exercise':<26} {'Sets':>5} {'Next':>5} {'Conf':>7}  {'Weight':>7} {'Next':>7}  Reason")
    print("=" * 90)

    for exercise_id, sets, _ in PROGRAM:
        exercise = get_exercise(exercise_id)
        rec = get_exercise_set_recommendation(exercise_id, sets, records)
        exercise_records = [r for r in records if r.exercise_id == exercise_id]
        prog = analyze_progression(exercise_records, exercise.muscle_group)
        print(
            f"{exercise.name:<26} {rec.current_sets:>5} {rec.recommended_sets:>5} "
            f"{rec.confidence.value:>7}  {prog.current_weight:>7.1f} "
            f"{prog.recommended_weight:>7.1f}  {rec.reason}"
        )

    print()
    print("=" * 60)
    print("FATIGUE")
    print("=" * 60)
    snapshot = calculate_fatigue_snapshot(records, as_of=as_of)
    verdict = generate_deload_recommendation(snapshot)
    print(f"Deload needed: {verdict.needs_deload} ({verdict.severity.value}, "
          f"{verdict.confidence.value} confidence)")
    for indicator in verdict.indicators:
        print(f"  - {indicator}")

    two_weeks_ago = as_of - datetime.timedelta(weeks=2)
    recent = [r for r in records if r.session_date >= two_weeks_ago]
    index = calculate_fatigue_index(recent, weekly_volumes(records))
    print(f"Fatigue index: {index.fatigue_index:.1f} ({index.fatigue_level.value}, "
          f"trend {index.performance_trend.value})")
    print(f"  {index.recommendation}")

    print()
    print("=" * 60)
    print("INJURY RISK")
    print("=" * 60)
    risks = get_all_injury_risks(records, list_exercises(), suggest_alternatives=True)
    if not risks:
        print("No joint-pain risk flagged.")
    for risk in risks:
        alternatives = ", ".join(e.name for e in risk.alternatives or [])
        print(f"{risk.exercise_name:<26} {risk.risk_level.value:<7} "
              f"avg {risk.avg_joint_pain:.1f}  -> {alternatives}")

    print()
    print("=" * 60)
    print("DELOAD WEEK")
    print("=" * 60)
    week = Microcycle(
        id=4, mesocycle_id=1, week_number=4,
        start_date=START + datetime.timedelta(weeks=3),
        end_date=START + datetime.timedelta(weeks=3, days=6),
    )
    prescriptions = [
        SessionExercise(
            session_id=1, exercise_id=exercise_id, order_index=i,
            target_sets=sets, target_reps_min=8, target_reps_max=12,
            target_rir=TARGET_RIR,
        )
        for i, (exercise_id, sets, _) in enumerate(PROGRAM)
    ]
    plan = generate_deload_week(week, prescriptions)
    print(f"Week {plan.deload_microcycle.week_number}: "
          f"{plan.deload_microcycle.start_date:%Y-%m-%d} to "
          f"{plan.deload_microcycle.end_date:%Y-%m-%d}, "
          f"volume -{plan.total_volume_reduction:.1f}%")
    for adj in plan.exercise_adjustments:
        print(f"  {get_exercise(adj.exercise_id).name:<26} "
              f"{adj.original_sets} -> {adj.deload_sets} sets")

    print()
    rotation = get_rotation_recommendations(20, 8, list_exercises())
    print(f"Rotation: {rotation.message}")
    print(f"  Alternatives: {', '.join(e.name for e in rotation.alternatives)}")


if __name__ == "__main__":
    main()
