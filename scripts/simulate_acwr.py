"""Print the ACWR series for a sample training log.

Usage:
    python scripts/simulate_acwr.py [--timezone Asia/Tokyo]
"""

import argparse
import datetime
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.schemas.workload import TrainingLoadRecord
from app.workload.acwr import calculate_workload_series
from app.workload.calendar import DayPolicy
from app.workload.risk import classify_ratio, summarize_latest

# (date, rpe, duration_min): four steady weeks, a rest week, then a spike
RAW_DATA = [
    *[(f"2025-01-{d:02d}", 6, 60) for d in range(1, 29) if d % 7 not in (0, 3)],
    ("2025-02-03", 5, 40),
    ("2025-02-05", 5, 40),
    *[(f"2025-02-{d:02d}", 8, 90) for d in range(8, 15)],
]
# Double session
RAW_DATA.append(("2025-02-14", 7, 45))


def main():
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--timezone", default="UTC")
    args = parser.parse_args()

    records = [TrainingLoadRecord(user_id=1, date=d, rpe=rpe, duration_min=dur) for d, rpe, dur in RAW_DATA]
    evaluation_time = datetime.datetime(2025, 2, 16, 6, 0, tzinfo=datetime.timezone.utc)
    series = calculate_workload_series(records, evaluation_time, day_policy=DayPolicy(args.timezone))

    print("=" * 72)
    print(f"{'Date':<12} {'Acute':>8} {'Chronic':>9} {'ACWR':>6}  {'History':<8} {'Tier'}")
    print("=" * 72)
    for p in series:
        tier = classify_ratio(p.ratio) if p.has_enough_history else "--"
        print(f"{p.date.isoformat():<12} {p.acute_load:>8.0f} {p.chronic_load:>9.1f} {p.ratio:>6.2f}  "
              f"{'yes' if p.has_enough_history else 'no':<8} {tier}")

    latest = summarize_latest(series)
    print()
    print(f"Latest: {latest.risk_level} (ACWR {latest.latest_ratio:.2f}), "
          f"last training {latest.last_training_date} ({latest.days_since_last_training} days ago)")


if __name__ == "__main__":
    main()
