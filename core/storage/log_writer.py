"""
LogWriter: append one timestamped line to today's file for a log type.

Line format (UTF-8, one entry per line):

    [YYYY-MM-DD HH:MM:SS] <message>

Debug entries are only written while debug mode is enabled; attention
entries are always written. Appends hold an exclusive `flock` for the
duration of the write so concurrent writers never interleave partial lines.
"""

from __future__ import annotations

import fcntl
import logging
import os
from contextlib import contextmanager
from datetime import timezone
from pathlib import Path
from typing import Callable, Iterator, Optional, TextIO

from core.options.debug_mode import DebugMode
from core.storage.filename_policy import Clock, FilenamePolicy, utc_now
from core.storage.models import LogType
from exceptions.exceptions import LogsDirectoryError


logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
DIR_FALLBACK_MODE = 0o755


def format_entry(message: str, timestamp: str) -> str:
    return f"[{timestamp}] {message.strip()}\n"


@contextmanager
def append_with_lock(path: Path) -> Iterator[TextIO]:
    """Open `path` for appending and hold an exclusive lock while in use."""
    with path.open("a", encoding="utf-8") as f:
        fcntl.flock(f.fileno(), fcntl.LOCK_EX)
        try:
            yield f
            f.flush()
        finally:
            fcntl.flock(f.fileno(), fcntl.LOCK_UN)


def relax_directory_permissions(directory: Path) -> None:
    """Best-effort chmod of a non-writable directory; never raises."""
    if os.access(directory, os.W_OK):
        return
    try:
        os.chmod(directory, DIR_FALLBACK_MODE)
    except OSError as exc:
        logger.debug("[LOGS] chmod %s failed: %s", directory, exc)


class LogWriter:
    def __init__(
        self,
        filename_policy: FilenamePolicy,
        debug_mode: DebugMode,
        now: Optional[Clock] = None,
    ) -> None:
        self._policy = filename_policy
        self._debug_mode = debug_mode
        self._now: Callable = now or utc_now

    def write(self, message: str, log_type: Optional[str] = "debug") -> bool:
        """Append `message` to today's file for `log_type`.

        Returns True when the line was written, False otherwise. A False
        result covers both a skipped debug entry and an I/O failure; the
        reason is only reported through the process logger.
        """
        # Only an explicit "debug" is gated; other values are written and
        # then filed under debug by the normalization below.
        if log_type == LogType.DEBUG.value and not self._debug_mode.enabled:
            logger.debug("[LOGS] Debug mode disabled, entry skipped")
            return False

        normalized = LogType.normalize(log_type)

        moment = self._now().astimezone(timezone.utc)
        try:
            log_path = self._policy.build_log_path(normalized.value, at=moment)
        except LogsDirectoryError:
            logger.debug("[LOGS] Logs directory unavailable, entry dropped")
            return False

        line = format_entry(message, moment.strftime(TIMESTAMP_FORMAT))

        relax_directory_permissions(log_path.parent)

        try:
            with append_with_lock(log_path) as f:
                f.write(line)
        except OSError as exc:
            logger.warning("[LOGS] Failed to append to %s: %s", log_path.name, exc)
            return False
        return True
