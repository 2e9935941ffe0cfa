"""Snapshot codecs.

The on-disk key names follow the original bot's `data/shift-data.json`, so
files written by it load unchanged:

    staff:  userId, username, role, email, registeredAt
    shifts: userId, username, role, clockIn, clockOut,
            hours, minutes, totalMinutes, date
"""

from __future__ import annotations

import json
from typing import Any, Dict, Protocol

from ..common.datetime_utils import parse_iso, to_iso
from ..core.exceptions import PersistenceError
from ..shifts.model import ShiftRecord
from ..staff.model import StaffMember
from .snapshot import Snapshot


class SnapshotCodec(Protocol):
    def encode(self, snapshot: Snapshot) -> bytes:
        raise NotImplementedError

    def decode(self, data: bytes) -> Snapshot:
        raise NotImplementedError


def staff_to_dict(m: StaffMember) -> Dict[str, Any]:
    return {
        "userId": m.identity,
        "username": m.display_name,
        "role": m.role,
        "email": m.contact,
        "registeredAt": to_iso(m.registered_at),
    }


def staff_from_dict(d: Dict[str, Any]) -> StaffMember:
    return StaffMember(
        identity=str(d["userId"]),
        display_name=str(d["username"]),
        role=str(d["role"]),
        contact=str(d["email"]),
        registered_at=parse_iso(d["registeredAt"]),
    )


def shift_to_dict(r: ShiftRecord) -> Dict[str, Any]:
    return {
        "userId": r.identity,
        "username": r.display_name,
        "role": r.role,
        "clockIn": to_iso(r.clock_in_at),
        "clockOut": to_iso(r.clock_out_at),
        "hours": r.hours,
        "minutes": r.minutes,
        "totalMinutes": r.duration_minutes,
        "date": r.date.isoformat(),
    }


def shift_from_dict(d: Dict[str, Any]) -> ShiftRecord:
    clock_in = parse_iso(d["clockIn"])
    clock_out = parse_iso(d["clockOut"])
    total = int(d["totalMinutes"])
    if total < 0 or clock_out < clock_in:
        raise ValueError(f"Invalid shift duration for {d.get('userId')!r}")

    return ShiftRecord(
        identity=str(d["userId"]),
        display_name=str(d["username"]),
        role=str(d["role"]),
        clock_in_at=clock_in,
        clock_out_at=clock_out,
        duration_minutes=total,
    )


class JsonSnapshotCodec(SnapshotCodec):
    def __init__(self, *, indent: int = 2):
        self._indent = indent

    def encode(self, snapshot: Snapshot) -> bytes:
        payload = {
            "staff": [staff_to_dict(m) for m in snapshot.staff],
            "shifts": [shift_to_dict(r) for r in snapshot.shifts],
            "settings": dict(snapshot.settings),
        }
        try:
            return json.dumps(payload, indent=self._indent, ensure_ascii=False).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise PersistenceError(f"Cannot encode snapshot: {e}") from e

    def decode(self, data: bytes) -> Snapshot:
        try:
            payload = json.loads(data.decode("utf-8"))
            if not isinstance(payload, dict):
                raise ValueError("top-level value is not an object")

            staff = tuple(staff_from_dict(d) for d in payload.get("staff") or [])
            shifts = tuple(shift_from_dict(d) for d in payload.get("shifts") or [])
            settings = payload.get("settings") or {}
            if not isinstance(settings, dict):
                raise ValueError("settings is not an object")
        except (UnicodeDecodeError, ValueError, KeyError, TypeError, AttributeError, RecursionError) as e:
            raise PersistenceError(f"Cannot decode snapshot: {e}") from e

        seen = set()
        for m in staff:
            if m.identity in seen:
                raise PersistenceError(f"Cannot decode snapshot: duplicate staff identity {m.identity!r}")
            seen.add(m.identity)

        return Snapshot(staff=staff, shifts=shifts, settings=settings)
