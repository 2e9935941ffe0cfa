"""Print roster/shift counts from the data file.

Note: Read-only. The file is decoded directly (no bootstrap), so a missing
or unreadable data file is reported and left untouched.
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.shift_tracker.shift_tracker.core.exceptions import PersistenceError
from src.shift_tracker.shift_tracker.persistence.codec import JsonSnapshotCodec
from src.shift_tracker.shift_tracker.persistence.snapshot import Snapshot


def resolve_data_file(data_file: str) -> Path:
    path = Path(data_file)
    if not path.is_absolute():
        path = REPO_ROOT / path
    return path


def read_snapshot(data_file: Path) -> Snapshot:
    if not data_file.exists():
        raise SystemExit(f"No data file at {data_file}.")

    try:
        return JsonSnapshotCodec().decode(data_file.read_bytes())
    except (OSError, PersistenceError) as e:
        raise SystemExit(f"Cannot read {data_file}: {e}")


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    data_file = resolve_data_file(settings.DATA_FILE)
    snapshot = read_snapshot(data_file)

    print(f"data:   {data_file}")
    print(f"staff:  {len(snapshot.staff)}")
    print(f"shifts: {len(snapshot.shifts)}")


if __name__ == "__main__":
    main()
