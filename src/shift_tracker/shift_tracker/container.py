from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional, Union

from .commands.dispatcher import CommandDispatcher
from .common.datetime_utils import now_utc
from .core.constants import DEFAULT_AUTOSAVE_INTERVAL_SECONDS, DEFAULT_COMMAND_PREFIX
from .core.enums import LoadStatus
from .engine.service import ShiftEngine
from .persistence.autosave import AutosaveTask
from .persistence.codec import SnapshotCodec
from .persistence.manager import PersistenceManager
from .shifts.history import ShiftHistoryStore
from .shifts.tracker import ActiveShiftTracker
from .staff.registry import StaffRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Container:
    staff_registry: StaffRegistry
    active_shifts: ActiveShiftTracker
    shift_history: ShiftHistoryStore

    persistence: PersistenceManager
    autosave: AutosaveTask

    engine: ShiftEngine
    dispatcher: CommandDispatcher


def bootstrap(engine: ShiftEngine, persistence: PersistenceManager, *, preserve_corrupt: bool = False) -> None:
    """Load the durable snapshot into the engine.

    A corrupt data file is replaced by an empty one (optionally after moving
    the broken file aside) so the next load starts clean.
    """
    snapshot = persistence.load()

    if persistence.last_status == LoadStatus.CORRUPT:
        if preserve_corrupt:
            persistence.quarantine()
        persistence.save(snapshot)

    engine.restore(snapshot)


def build_container(
    *,
    data_file: Union[str, Path],
    autosave_interval_seconds: float = DEFAULT_AUTOSAVE_INTERVAL_SECONDS,
    save_on_mutation: bool = True,
    preserve_corrupt: bool = False,
    command_prefix: str = DEFAULT_COMMAND_PREFIX,
    codec: Optional[SnapshotCodec] = None,
    clock: Callable[[], datetime] = now_utc,
) -> Container:
    staff_registry = StaffRegistry()
    active_shifts = ActiveShiftTracker()
    shift_history = ShiftHistoryStore()

    persistence = PersistenceManager(data_file, codec)
    engine = ShiftEngine(
        staff_registry,
        active_shifts,
        shift_history,
        persistence=persistence,
        save_on_mutation=save_on_mutation,
        clock=clock,
    )
    bootstrap(engine, persistence, preserve_corrupt=preserve_corrupt)

    autosave = AutosaveTask(persistence, engine.snapshot, interval_seconds=autosave_interval_seconds)
    dispatcher = CommandDispatcher(engine, prefix=command_prefix)

    stats = engine.admin_stats()
    logger.info("Registered staff: %d", stats.staff_count)
    logger.info("Total shifts: %d", stats.total_shifts)
    logger.info("Active shifts: %d", stats.active_count)

    return Container(
        staff_registry=staff_registry,
        active_shifts=active_shifts,
        shift_history=shift_history,
        persistence=persistence,
        autosave=autosave,
        engine=engine,
        dispatcher=dispatcher,
    )
