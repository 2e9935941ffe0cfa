from __future__ import annotations

import threading
from typing import Iterable, List

from ..common.validators import require_positive
from ..core.constants import DEFAULT_HISTORY_LIMIT
from .model import ShiftRecord
from .repository import ShiftHistoryRepository


class ShiftHistoryStore(ShiftHistoryRepository):
    """Append-only log of completed shifts, kept in clock-out order."""

    def __init__(self):
        self._records: List[ShiftRecord] = []
        self._lock = threading.RLock()

    def append(self, record: ShiftRecord) -> None:
        with self._lock:
            self._records.append(record)

    def for_identity(self, identity: str) -> List[ShiftRecord]:
        with self._lock:
            return [r for r in self._records if r.identity == identity]

    def recent(self, identity: str, n: int = DEFAULT_HISTORY_LIMIT) -> List[ShiftRecord]:
        """Last `n` records for identity, most recent first."""
        n = require_positive(n, "History limit")
        return list(reversed(self.for_identity(identity)[-n:]))

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def count_for_identity(self, identity: str) -> int:
        with self._lock:
            return sum(1 for r in self._records if r.identity == identity)

    def all(self) -> List[ShiftRecord]:
        with self._lock:
            return list(self._records)

    def restore(self, records: Iterable[ShiftRecord]) -> None:
        loaded = list(records)
        with self._lock:
            self._records = loaded
