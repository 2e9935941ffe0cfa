from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from ..common.datetime_utils import ensure_utc, split_minutes


@dataclass(frozen=True)
class ActiveShift:
    """An open shift (clocked in, not yet clocked out).

    display_name/role are copied from the roster at clock-in time so the
    resulting history stays stable even if the roster changes later.
    """

    identity: str
    display_name: str
    role: str
    clock_in_at: datetime


@dataclass(frozen=True)
class ShiftRecord:
    """A completed shift in the append-only history log."""

    identity: str
    display_name: str
    role: str
    clock_in_at: datetime
    clock_out_at: datetime
    duration_minutes: int

    @property
    def hours(self) -> int:
        return split_minutes(self.duration_minutes)[0]

    @property
    def minutes(self) -> int:
        return split_minutes(self.duration_minutes)[1]

    @property
    def date(self) -> date:
        return ensure_utc(self.clock_out_at).date()

    @classmethod
    def close(cls, shift: ActiveShift, *, clock_out_at: datetime, duration_minutes: int) -> "ShiftRecord":
        return cls(
            identity=shift.identity,
            display_name=shift.display_name,
            role=shift.role,
            clock_in_at=shift.clock_in_at,
            clock_out_at=clock_out_at,
            duration_minutes=int(duration_minutes),
        )
