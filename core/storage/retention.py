"""RetentionOps: operator-triggered, irreversible deletion of one log file."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from core.storage.file_guard import FileGuard, sanitize_filename
from core.storage.models import DeleteOutcome
from exceptions.exceptions import PathEscapeError


logger = logging.getLogger(__name__)

FILE_FALLBACK_MODE = 0o644


class RetentionOps:
    def __init__(self, guard: FileGuard) -> None:
        self._guard = guard

    def delete_file(self, logs_dir: Path, filename: str) -> DeleteOutcome:
        try:
            self._guard.resolve_safe(logs_dir, filename, must_exist=False)
        except PathEscapeError:
            logger.warning("[LOGS] Rejected delete outside the logs directory")
            return DeleteOutcome.PATH_ESCAPE

        # Remove the entry the caller named, not the target of a symlink.
        path = Path(logs_dir) / sanitize_filename(filename)
        if not path.is_file():
            return DeleteOutcome.NOT_FOUND

        if not os.access(path, os.W_OK):
            try:
                os.chmod(path, FILE_FALLBACK_MODE)
            except OSError as exc:
                logger.debug("[LOGS] chmod %s failed: %s", path.name, exc)

        try:
            path.unlink()
        except FileNotFoundError:
            return DeleteOutcome.NOT_FOUND
        except OSError as exc:
            logger.warning("[LOGS] Could not delete %s: %s", path.name, exc)
            return DeleteOutcome.PERMISSION_ERROR

        logger.info("[LOGS] Deleted %s", path.name)
        return DeleteOutcome.DELETED
