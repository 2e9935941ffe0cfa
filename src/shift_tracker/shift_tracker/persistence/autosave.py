from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

from .manager import PersistenceManager
from .snapshot import Snapshot

logger = logging.getLogger(__name__)


class AutosaveTask:
    """Periodic background save, owned by the process lifecycle.

    `snapshot_fn` is called on every tick (and once more on stop) and its
    result handed to PersistenceManager.save. Saves happen whether or not
    anything changed.
    """

    def __init__(
        self,
        persistence: PersistenceManager,
        snapshot_fn: Callable[[], Snapshot],
        *,
        interval_seconds: float,
    ):
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")

        self._persistence = persistence
        self._snapshot_fn = snapshot_fn
        self._interval = float(interval_seconds)
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.running:
            return

        self._stop.clear()
        self._thread = threading.Thread(target=self._loop, name="shift-tracker-autosave", daemon=True)
        self._thread.start()
        logger.info("Auto-save enabled (every %ss)", int(self._interval))

    def stop(self, *, flush: bool = True) -> None:
        self._stop.set()
        if self._thread and self._thread.is_alive():
            self._thread.join(timeout=5.0)
        self._thread = None

        if flush:
            self.save_now()

    def save_now(self) -> bool:
        try:
            return self._persistence.save_from(self._snapshot_fn)
        except Exception:
            # Keep the loop alive; the next tick retries.
            logger.exception("Auto-save could not build a snapshot")
            return False

    def _loop(self) -> None:
        while not self._stop.wait(self._interval):
            self.save_now()
