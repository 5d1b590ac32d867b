"""Print the volume trend for every period selector from sample training data.

Runs the pure trend engine only, no database involved.

Usage:
    python scripts/simulate_trend.py [YYYY-MM-DD]
"""

import datetime
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.schemas.trend import PeriodSelector, SetRecord
from app.trends import aggregate, build_series, resolve_period

TODAY = datetime.date(2026, 2, 8)

# ─── (date, exercise, weight lbs, reps) ─────────────────────────────
RAW_DATA = [
    # Nov 13 - Deadlift day
    ("2025-11-13", "Deadlift", 135, 10),
    ("2025-11-13", "Deadlift", 185, 5),
    ("2025-11-13", "Deadlift", 225, 3),
    ("2025-11-13", "Bent Over Row (Dumbbell)", 45, 10),
    ("2025-11-13", "Plank", 0, 1),
    # Nov 26 - Squat/Press day
    ("2025-11-26", "Squat (Barbell)", 95, 7),
    ("2025-11-26", "Squat (Barbell)", 135, 5),
    ("2025-11-26", "Squat (Barbell)", 155, 4),
    ("2025-11-26", "Overhead Press (Barbell)", 65, 7),
    ("2025-11-26", "Overhead Press (Barbell)", 85, 3),
    ("2025-11-26", "Bench Press (Barbell)", 95, 10),
    # Dec 5 - Deadlift day
    ("2025-12-05", "Deadlift", 135, 8),
    ("2025-12-05", "Deadlift", 185, 5),
    ("2025-12-05", "Deadlift", 205, 3),
    ("2025-12-05", "Bent Over Row (Dumbbell)", 30, 10),
    # Jan 10
    ("2026-01-10", "Bench Press (Barbell)", 115, 3),
    ("2026-01-10", "Pull-Ups", 10, 3),
    # Jan 16 - Deadlift day
    ("2026-01-16", "Pull-Ups", 0, 7),
    ("2026-01-16", "Deadlift", 135, 8),
    ("2026-01-16", "Deadlift", 185, 5),
    ("2026-01-16", "Deadlift", 185, 3),
    ("2026-01-16", "Seated Cable Row", 110, 6),
    # Jan 26 - Squat/Press day
    ("2026-01-26", "Squat (Barbell)", 45, 8),
    ("2026-01-26", "Squat (Barbell)", 115, 5),
    ("2026-01-26", "Overhead Press (Barbell)", 65, 5),
    ("2026-01-26", "Bench Press (Barbell)", 95, 5),
    # Jan 31 - Deadlift day
    ("2026-01-31", "Deadlift", 115, 5),
    ("2026-01-31", "Deadlift", 155, 3),
    ("2026-01-31", "Deadlift", 185, 2),
    ("2026-01-31", "Seated Cable Row", 130, 5),
    # Feb 5
    ("2026-02-05", "Bench Press (Barbell)", 115, 5),
    ("2026-02-05", "Bench Press (Barbell)", 125, 3),
]


def main():
    today = datetime.date.fromisoformat(sys.argv[1]) if len(sys.argv) > 1 else TODAY
    records = [SetRecord(occurred_at=datetime.datetime.fromisoformat(day), weight=weight, reps=reps) for
               day, _exercise, weight, reps in RAW_DATA]
    earliest = min(r.occurred_at for r in records).date()

    for selector in PeriodSelector:
        window = resolve_period(selector, today, earliest)
        current = aggregate(records, window.current_start, window.current_end, window.granularity)
        previous = aggregate(records, window.previous_start, window.previous_end, window.granularity)
        trend = build_series(window, current, previous)

        print()
        print("=" * 60)
        print(f"{selector.value:<4} {window.granularity.value:<6} "
              f"current [{window.current_start}, {window.current_end})  "
              f"previous [{window.previous_start}, {window.previous_end})")
        print("=" * 60)
        print(f"{'Bucket':<12} {'Volume':>10} {'Previous':>10}")
        for point in trend.points:
            previous_volume = f"{point.previous_volume:>10.0f}" if point.previous_volume is not None else f"{'--':>10}"
            print(f"{point.bucket_key.isoformat():<12} {point.current_volume:>10.0f} {previous_volume}")
        print(f"{'Total':<12} {trend.current_total:>10.0f} {trend.previous_total:>10.0f}"
              f"  change {trend.percentage_change:+.1f}%")


if __name__ == "__main__":
    main()
