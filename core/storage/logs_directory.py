"""
Resolution and provisioning of the logs directory.

The logs directory is `<uploads_dir>/logs`. It is created on first use,
seeded with an inert `index.html` so the directory is never browsable, and
its path (or the failure to provide it) is cached on the resolver instance
for the rest of the process.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Optional, Union

from exceptions.exceptions import LogsDirectoryError


logger = logging.getLogger(__name__)

LOGS_SUBDIR = "logs"
MARKER_FILENAME = "index.html"
MARKER_CONTENT = "<!-- Silence is golden -->"


class HostStorage:
    """File-storage facility of the host: an uploads base + mkdir -p."""

    def __init__(self, uploads_dir: Optional[Union[str, Path]]) -> None:
        self.uploads_dir: Optional[Path] = Path(uploads_dir) if uploads_dir else None

    def create_directory_recursive(self, path: Path) -> bool:
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.warning("[LOGS] Could not create directory %s: %s", path, exc)
            return False
        return path.is_dir()


class LogsDirectoryResolver:
    """Resolve `<uploads_dir>/logs` once and remember the answer."""

    def __init__(self, storage: HostStorage) -> None:
        self._storage = storage
        self._lock = threading.Lock()
        self._resolved: Optional[Path] = None
        self._failed = False

    def resolve(self) -> Path:
        """Return the absolute logs directory path.

        Raises
        ------
        LogsDirectoryError
            If the uploads base is missing or the directory cannot be
            created. The failure is cached; later calls raise immediately.
        """
        with self._lock:
            if self._resolved is not None:
                return self._resolved
            if self._failed:
                raise LogsDirectoryError()

            logs_dir = self._provision()
            if logs_dir is None:
                self._failed = True
                raise LogsDirectoryError()

            self._resolved = logs_dir
            return logs_dir

    def is_available(self) -> bool:
        try:
            self.resolve()
        except LogsDirectoryError:
            return False
        return True

    def _provision(self) -> Optional[Path]:
        base = self._storage.uploads_dir
        if base is None:
            logger.warning("[LOGS] No uploads directory configured")
            return None

        logs_dir = (base / LOGS_SUBDIR).absolute()
        if not logs_dir.is_dir():
            if not self._storage.create_directory_recursive(logs_dir):
                return None
            logger.info("[LOGS] Created logs directory %s", logs_dir)

        self._write_marker(logs_dir)
        return logs_dir

    @staticmethod
    def _write_marker(logs_dir: Path) -> None:
        """Attempt to place the index marker; ignore failure."""
        marker = logs_dir / MARKER_FILENAME
        if marker.exists():
            return
        try:
            marker.write_text(MARKER_CONTENT, encoding="utf-8")
        except OSError as exc:
            logger.debug("[LOGS] Skipping index marker in %s: %s", logs_dir, exc)
