"""Snapshot store for aggregated movie scores.

Persists one JSON document at a fixed path. Writes go to a
temporary file in the same directory that is then renamed over
the target, so readers see either the old or the new document.
"""

import json
import logging
import os
import tempfile
from pathlib import Path

from scorebot.etl.types import Snapshot
from scorebot.etl.utils.logger import setup_logger

JSON_INDENT = 2


class SnapshotStoreError(Exception):
    """Base exception for snapshot store errors."""

    pass


class SnapshotWriteError(SnapshotStoreError):
    """Raised when the snapshot document cannot be written."""

    pass


class SnapshotReadError(SnapshotStoreError):
    """Raised when an existing snapshot document cannot be read."""

    pass


class SnapshotStore:
    """Single-document JSON store with atomic replace.

    Attributes:
        path: Location of the snapshot document.
    """

    def __init__(
        self,
        path: Path | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize store.

        Args:
            path: Document path (default: ``settings.paths.snapshot_path``).
            logger: Optional logger instance.
        """
        if path is None:
            from scorebot.settings import settings

            path = settings.paths.snapshot_path
        self._path = Path(path)
        self._logger = logger or setup_logger("etl.loader.snapshot")

    @property
    def path(self) -> Path:
        """Return snapshot document path."""
        return self._path

    def exists(self) -> bool:
        """Check if a snapshot has been written.

        Returns:
            True if the document exists.
        """
        return self._path.exists()

    def write(self, snapshot: Snapshot) -> Path:
        """Replace the persisted snapshot.

        Args:
            snapshot: Complete snapshot to persist.

        Returns:
            Path of the written document.

        Raises:
            SnapshotWriteError: If serialization or any filesystem step fails.
        """
        try:
            payload = json.dumps(snapshot, indent=JSON_INDENT, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise SnapshotWriteError(f"Snapshot is not serializable: {e}") from e

        try:
            self._atomic_write(payload)
        except OSError as e:
            raise SnapshotWriteError(f"Could not write {self._path}: {e}") from e

        self._logger.info(f"Data saved to {self._path}")
        return self._path

    def read(self) -> Snapshot | None:
        """Load the most recently written snapshot.

        Returns:
            Snapshot, or None if nothing has been written yet.

        Raises:
            SnapshotReadError: If the document exists but is unreadable or malformed.
        """
        try:
            with self._path.open(encoding="utf-8") as f:
                snapshot = json.load(f)
        except FileNotFoundError:
            return None
        except (OSError, json.JSONDecodeError) as e:
            raise SnapshotReadError(f"Invalid snapshot file {self._path}: {e}") from e

        if not isinstance(snapshot, dict) or not all(
            isinstance(record, dict) for record in snapshot.values()
        ):
            raise SnapshotReadError(f"Invalid snapshot file {self._path}: not an object of records")
        return snapshot

    def _atomic_write(self, payload: str) -> None:
        """Write payload to a temp file, then rename it over the target.

        Args:
            payload: Serialized document.
        """
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self._path.parent,
            prefix=f".{self._path.name}.",
            suffix=".tmp",
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
