"""Example: drive the ShiftEngine directly (no Flask, no chat gateway).

Goal: show that the command layer is thin and the rules live in the engine.
"""

import tempfile
from datetime import datetime, timedelta, timezone
from pathlib import Path

from src.shift_tracker.shift_tracker.container import build_container


def main():
    data_file = Path(tempfile.mkdtemp()) / "shift-data.json"
    container = build_container(data_file=data_file)
    engine = container.engine

    t0 = datetime(2026, 1, 31, 8, 30, tzinfo=timezone.utc)
    engine.register_staff("U1", "Alice", "Manager", "alice@example.com", now=t0)
    engine.clock_in("U1", now=t0)
    record = engine.clock_out("U1", now=t0 + timedelta(minutes=95))

    print(f"Worked {record.hours}h {record.minutes}m")
    print(engine.admin_stats())
    print(data_file.read_text(encoding="utf-8"))


if __name__ == "__main__":
    main()
