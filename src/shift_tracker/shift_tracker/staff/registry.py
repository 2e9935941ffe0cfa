from __future__ import annotations

import threading
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from ..core.exceptions import AlreadyRegistered, ValidationError
from .model import StaffMember
from .repository import StaffRepository


class StaffRegistry(StaffRepository):
    """In-memory roster keyed by identity.

    Uniqueness is enforced here, at the insertion boundary, under the
    registry's own lock.
    """

    def __init__(self):
        self._by_identity: Dict[str, StaffMember] = {}
        self._lock = threading.RLock()

    def register(
        self,
        identity: str,
        display_name: str,
        role: str,
        contact: str,
        *,
        registered_at: datetime,
    ) -> StaffMember:
        with self._lock:
            if identity in self._by_identity:
                raise AlreadyRegistered(identity)

            member = StaffMember(
                identity=identity,
                display_name=display_name,
                role=role,
                contact=contact,
                registered_at=registered_at,
            )
            self._by_identity[identity] = member
            return member

    def find(self, identity: str) -> Optional[StaffMember]:
        with self._lock:
            return self._by_identity.get(identity)

    def count(self) -> int:
        with self._lock:
            return len(self._by_identity)

    def all(self) -> List[StaffMember]:
        # dicts keep insertion order, i.e. registration order
        with self._lock:
            return list(self._by_identity.values())

    def restore(self, members: Iterable[StaffMember]) -> None:
        """Replace the roster with previously persisted members."""
        loaded: Dict[str, StaffMember] = {}
        for m in members:
            if m.identity in loaded:
                raise ValidationError(f"Duplicate staff identity in stored data: {m.identity}")
            loaded[m.identity] = m

        with self._lock:
            self._by_identity = loaded
