from __future__ import annotations

from enum import Enum


class ShiftState(str, Enum):
    """Position of one staff identity in the clock-in/clock-out state machine."""

    UNREGISTERED = "UNREGISTERED"
    CLOCKED_OUT = "REGISTERED_CLOCKED_OUT"
    CLOCKED_IN = "REGISTERED_CLOCKED_IN"


class LoadStatus(str, Enum):
    """Outcome of the last PersistenceManager.load() call."""

    LOADED = "LOADED"
    CREATED = "CREATED"
    CORRUPT = "CORRUPT"
