from __future__ import annotations

from datetime import datetime, timezone

import pytest

from src.shift_tracker.shift_tracker.engine.service import ShiftEngine
from src.shift_tracker.shift_tracker.persistence.manager import PersistenceManager
from src.shift_tracker.shift_tracker.shifts.history import ShiftHistoryStore
from src.shift_tracker.shift_tracker.shifts.tracker import ActiveShiftTracker
from src.shift_tracker.shift_tracker.staff.registry import StaffRegistry


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 1, 8, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "data" / "shift-data.json"


@pytest.fixture
def engine(fixed_now) -> ShiftEngine:
    return ShiftEngine(StaffRegistry(), ActiveShiftTracker(), ShiftHistoryStore(), clock=lambda: fixed_now)


@pytest.fixture
def persisted_engine(fixed_now, data_file):
    persistence = PersistenceManager(data_file)
    eng = ShiftEngine(
        StaffRegistry(),
        ActiveShiftTracker(),
        ShiftHistoryStore(),
        persistence=persistence,
        save_on_mutation=True,
        clock=lambda: fixed_now,
    )
    return eng, persistence
