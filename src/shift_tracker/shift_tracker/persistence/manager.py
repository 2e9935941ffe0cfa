from __future__ import annotations

import logging
import os
import tempfile
import threading
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional, Union

from ..core.enums import LoadStatus
from ..core.exceptions import PersistenceError
from .codec import JsonSnapshotCodec, SnapshotCodec
from .snapshot import Snapshot

logger = logging.getLogger(__name__)


class PersistenceManager:
    """Loads/saves the durable Snapshot. Knows nothing about business rules.

    Persistence failures are handled here (logged, not raised): a storage
    hiccup must not fail an in-memory operation that already succeeded.
    """

    def __init__(self, path: Union[str, Path], codec: Optional[SnapshotCodec] = None):
        self._path = Path(path)
        self._codec = codec or JsonSnapshotCodec()
        self._save_lock = threading.RLock()
        self.last_status: Optional[LoadStatus] = None

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Snapshot:
        if not self._path.exists():
            logger.info("No data file at %s, creating an empty one", self._path)
            snapshot = Snapshot.empty()
            self.save(snapshot)
            self.last_status = LoadStatus.CREATED
            return snapshot

        try:
            snapshot = self._codec.decode(self._path.read_bytes())
        except (OSError, PersistenceError):
            logger.exception("Error loading data from %s; starting with an empty snapshot", self._path)
            self.last_status = LoadStatus.CORRUPT
            return Snapshot.empty()

        self.last_status = LoadStatus.LOADED
        logger.info("Loaded %d staff members", len(snapshot.staff))
        logger.info("Loaded %d historical shifts", len(snapshot.shifts))
        return snapshot

    def save(self, snapshot: Snapshot) -> bool:
        """Write the snapshot; returns False (after logging) on failure.

        Writes go to a temp file in the same directory which then replaces
        the real file, so a crash mid-write leaves either the old file or
        the new one, never a half-written one.
        """
        with self._save_lock:
            tmp_path = None
            try:
                data = self._codec.encode(snapshot)
                self._path.parent.mkdir(parents=True, exist_ok=True)
                fd, tmp_path = tempfile.mkstemp(dir=str(self._path.parent), suffix=".tmp")
                with os.fdopen(fd, "wb") as f:
                    f.write(data)
                    f.flush()
                    os.fsync(f.fileno())
                os.replace(tmp_path, self._path)
                tmp_path = None
            except (OSError, PersistenceError):
                logger.exception("Error saving data to %s", self._path)
                return False
            finally:
                if tmp_path is not None:
                    try:
                        os.unlink(tmp_path)
                    except OSError:
                        pass

        logger.debug("Saved %d staff / %d shifts to %s", len(snapshot.staff), len(snapshot.shifts), self._path)
        return True

    def save_from(self, snapshot_fn: Callable[[], Snapshot]) -> bool:
        """Build the snapshot and write it while holding the save lock.

        Concurrent savers (autosave tick vs. save-on-mutation) therefore
        cannot overwrite a newer snapshot with an older one.
        """
        with self._save_lock:
            return self.save(snapshot_fn())

    def quarantine(self) -> Optional[Path]:
        """Move an unreadable data file aside so it is not overwritten."""
        if not self._path.exists():
            return None

        ts = datetime.now().strftime("%Y%m%d%H%M%S")
        target = self._path.with_name(f"{self._path.name}.corrupt-{ts}")
        try:
            os.replace(self._path, target)
        except OSError:
            logger.exception("Could not preserve corrupt data file %s", self._path)
            return None

        logger.warning("Preserved corrupt data file as %s", target)
        return target
