from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, List, Optional

from ..common.datetime_utils import elapsed_minutes, ensure_utc, now_utc
from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_HISTORY_LIMIT
from ..core.enums import ShiftState
from ..core.exceptions import NotRegistered
from ..persistence.manager import PersistenceManager
from ..persistence.snapshot import Snapshot
from ..shifts.model import ActiveShift, ShiftRecord
from ..shifts.repository import ActiveShiftRepository, ShiftHistoryRepository
from ..staff.model import StaffMember
from ..staff.repository import StaffRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StaffStatus:
    member: StaffMember
    state: ShiftState
    active: Optional[ActiveShift] = None
    elapsed_minutes: int = 0
    shift_count: int = 0

    @property
    def clocked_in(self) -> bool:
        return self.state == ShiftState.CLOCKED_IN


@dataclass(frozen=True)
class AdminStats:
    staff_count: int
    total_shifts: int
    active_count: int


class ShiftEngine:
    """Use cases: register / clock in / clock out / status / history / stats.

    The engine owns no data itself; it orchestrates the roster, the open-shift
    tracker and the history log. Domain failures (AlreadyRegistered,
    NotRegistered, AlreadyClockedIn, NotClockedIn, ValidationError) are
    raised to the caller untouched.
    """

    def __init__(
        self,
        staff: StaffRepository,
        active: ActiveShiftRepository,
        history: ShiftHistoryRepository,
        *,
        persistence: Optional[PersistenceManager] = None,
        save_on_mutation: bool = False,
        clock: Callable[[], datetime] = now_utc,
        settings: Optional[dict] = None,
    ):
        self._staff = staff
        self._active = active
        self._history = history
        self._persistence = persistence
        self._save_on_mutation = bool(save_on_mutation)
        self._clock = clock
        self._settings = dict(settings or {})
        # Composite operations (clock-out = end + append) and snapshots run under one lock.
        self._lock = threading.RLock()

    def _now(self, now: Optional[datetime]) -> datetime:
        return ensure_utc(now or self._clock())

    def _after_mutation(self) -> None:
        if self._save_on_mutation and self._persistence is not None:
            self._persistence.save_from(self.snapshot)

    def state(self, identity: str) -> ShiftState:
        with self._lock:
            if self._staff.find(identity) is None:
                return ShiftState.UNREGISTERED
            if self._active.peek(identity) is not None:
                return ShiftState.CLOCKED_IN
            return ShiftState.CLOCKED_OUT

    def register_staff(
        self,
        identity: str,
        display_name: str,
        role: str,
        contact: str,
        *,
        now: Optional[datetime] = None,
    ) -> StaffMember:
        identity = require_non_empty(identity, "Identity")
        role = require_non_empty(role, "Role")
        contact = require_non_empty(contact, "Contact")
        display_name = (display_name or "").strip() or identity

        with self._lock:
            member = self._staff.register(
                identity,
                display_name,
                role,
                contact,
                registered_at=self._now(now),
            )

        logger.info("Registered %s (%s) as %s", member.display_name, member.identity, member.role)
        self._after_mutation()
        return member

    def clock_in(self, identity: str, *, now: Optional[datetime] = None) -> ActiveShift:
        with self._lock:
            member = self._staff.find(identity)
            if member is None:
                raise NotRegistered(identity)

            shift = self._active.start(identity, member.display_name, member.role, self._now(now))

        logger.info("%s clocked in at %s", shift.display_name, shift.clock_in_at.isoformat())
        return shift

    def clock_out(self, identity: str, *, now: Optional[datetime] = None) -> ShiftRecord:
        now = self._now(now)

        with self._lock:
            # raises NotClockedIn when there is no open shift
            shift, minutes = self._active.end(identity, now)
            clock_out_at = now
            if now < shift.clock_in_at:
                logger.warning(
                    "Clock-out for %s is earlier than clock-in (%s < %s); recording a 0 minute shift",
                    identity,
                    now.isoformat(),
                    shift.clock_in_at.isoformat(),
                )
                clock_out_at = shift.clock_in_at

            record = ShiftRecord.close(shift, clock_out_at=clock_out_at, duration_minutes=minutes)
            self._history.append(record)

        logger.info("%s clocked out after %dh %dm", record.display_name, record.hours, record.minutes)
        self._after_mutation()
        return record

    def status(self, identity: str, *, now: Optional[datetime] = None) -> StaffStatus:
        with self._lock:
            member = self._staff.find(identity)
            if member is None:
                raise NotRegistered(identity)

            shift = self._active.peek(identity)
            if shift is not None:
                return StaffStatus(
                    member=member,
                    state=ShiftState.CLOCKED_IN,
                    active=shift,
                    elapsed_minutes=elapsed_minutes(shift.clock_in_at, self._now(now)),
                )

            return StaffStatus(
                member=member,
                state=ShiftState.CLOCKED_OUT,
                shift_count=self._history.count_for_identity(identity),
            )

    def history(self, identity: str, limit: int = DEFAULT_HISTORY_LIMIT) -> List[ShiftRecord]:
        return list(self._history.recent(identity, limit))

    def admin_stats(self) -> AdminStats:
        with self._lock:
            return AdminStats(
                staff_count=self._staff.count(),
                total_shifts=self._history.count(),
                active_count=self._active.size(),
            )

    def snapshot(self) -> Snapshot:
        with self._lock:
            return Snapshot(
                staff=tuple(self._staff.all()),
                shifts=tuple(self._history.all()),
                settings=dict(self._settings),
            )

    def restore(self, snapshot: Snapshot) -> None:
        """Rehydrate roster and history at startup. Open shifts start empty."""
        with self._lock:
            self._staff.restore(snapshot.staff)
            self._history.restore(snapshot.shifts)
            self._settings = dict(snapshot.settings)
