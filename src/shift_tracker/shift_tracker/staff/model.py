from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class StaffMember:
    """Domain entity: a registered staff member.

    Note: Plain data object; the registry that owns it enforces uniqueness.
    """

    identity: str
    display_name: str
    role: str
    contact: str
    registered_at: datetime
