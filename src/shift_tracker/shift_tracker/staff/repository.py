from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional, Protocol, Sequence

from .model import StaffMember


class StaffRepository(Protocol):
    """Roster interface.

    Note (DIP): ShiftEngine depends on this interface, not on a concrete store.
    """

    def register(
        self,
        identity: str,
        display_name: str,
        role: str,
        contact: str,
        *,
        registered_at: datetime,
    ) -> StaffMember:
        raise NotImplementedError

    def find(self, identity: str) -> Optional[StaffMember]:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError

    def all(self) -> Sequence[StaffMember]:
        raise NotImplementedError

    def restore(self, members: Iterable[StaffMember]) -> None:
        raise NotImplementedError
