from __future__ import annotations

import threading
from datetime import datetime
from typing import Dict, Optional, Tuple

from ..common.datetime_utils import elapsed_minutes
from ..core.exceptions import AlreadyClockedIn, NotClockedIn
from .model import ActiveShift
from .repository import ActiveShiftRepository


class ActiveShiftTracker(ActiveShiftRepository):
    """Open shifts keyed by identity; at most one per identity."""

    def __init__(self):
        self._open: Dict[str, ActiveShift] = {}
        self._lock = threading.RLock()

    def start(self, identity: str, display_name: str, role: str, now: datetime) -> ActiveShift:
        with self._lock:
            if identity in self._open:
                raise AlreadyClockedIn(identity)

            shift = ActiveShift(identity=identity, display_name=display_name, role=role, clock_in_at=now)
            self._open[identity] = shift
            return shift

    def end(self, identity: str, now: datetime) -> Tuple[ActiveShift, int]:
        """Close the open shift and return it together with its duration.

        If `now` is earlier than the clock-in time the duration is clamped
        to 0 minutes instead of going negative.
        """
        with self._lock:
            shift = self._open.pop(identity, None)
            if shift is None:
                raise NotClockedIn(identity)
            return shift, elapsed_minutes(shift.clock_in_at, now)

    def peek(self, identity: str) -> Optional[ActiveShift]:
        with self._lock:
            return self._open.get(identity)

    def size(self) -> int:
        with self._lock:
            return len(self._open)
