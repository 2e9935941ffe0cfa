from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from ..shifts.model import ShiftRecord
from ..staff.model import StaffMember


@dataclass(frozen=True)
class Snapshot:
    """Durable image of the roster plus the completed-shift log.

    Open shifts are deliberately not part of it.
    """

    staff: Tuple[StaffMember, ...] = ()
    shifts: Tuple[ShiftRecord, ...] = ()
    settings: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> "Snapshot":
        return cls()
