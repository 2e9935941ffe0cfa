from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional, Protocol, Sequence, Tuple

from .model import ActiveShift, ShiftRecord


class ActiveShiftRepository(Protocol):
    """Transient set of open shifts. Never part of the durable snapshot."""

    def start(self, identity: str, display_name: str, role: str, now: datetime) -> ActiveShift:
        raise NotImplementedError

    def end(self, identity: str, now: datetime) -> Tuple[ActiveShift, int]:
        raise NotImplementedError

    def peek(self, identity: str) -> Optional[ActiveShift]:
        raise NotImplementedError

    def size(self) -> int:
        raise NotImplementedError


class ShiftHistoryRepository(Protocol):
    def append(self, record: ShiftRecord) -> None:
        raise NotImplementedError

    def for_identity(self, identity: str) -> Sequence[ShiftRecord]:
        raise NotImplementedError

    def recent(self, identity: str, n: int = 5) -> Sequence[ShiftRecord]:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError

    def count_for_identity(self, identity: str) -> int:
        raise NotImplementedError

    def all(self) -> Sequence[ShiftRecord]:
        raise NotImplementedError

    def restore(self, records: Iterable[ShiftRecord]) -> None:
        raise NotImplementedError
