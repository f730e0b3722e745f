"""
LogStore: the public entry point for daily log files.

Files live under the host uploads directory:

    <uploads_dir>/logs/debug-YYYYMMDD.log
    <uploads_dir>/logs/attention-YYYYMMDD.log

Application code calls `create()`; the admin API calls `list_files()`,
`view_file()`, `delete_file()` and the debug toggle. Directory problems
never propagate out of `create()` / `list_files()` / `delete_file()`;
they degrade to False, an empty list, or NOT_FOUND.
"""

import logging
import time
from pathlib import Path
from typing import List, Optional

from core.options.debug_mode import DebugMode
from core.options.option_store import INSTALLED_TIME_OPTION, OptionStore
from core.storage.file_guard import FileGuard
from core.storage.filename_policy import Clock, FilenamePolicy
from core.storage.log_catalog import LogCatalog
from core.storage.log_writer import LogWriter
from core.storage.logs_directory import HostStorage, LogsDirectoryResolver
from core.storage.models import DeleteOutcome, LogFile
from core.storage.retention import RetentionOps
from exceptions.exceptions import LogFileReadError, LogsDirectoryError


logger = logging.getLogger(__name__)


class LogStore:
    """Facade wiring the resolver, writer, catalog, guard and retention.

    Parameters
    ----------
    uploads_dir:
        Host uploads base directory; logs go to `<uploads_dir>/logs`.
    option_store:
        Host option store holding the debug flag and install time. An
        in-memory store is used if omitted.
    now:
        Clock returning an aware UTC datetime (tests pin the date with it).
    """

    def __init__(
        self,
        uploads_dir: Optional[str],
        option_store: Optional[OptionStore] = None,
        now: Optional[Clock] = None,
    ) -> None:
        self.options = option_store or OptionStore()
        self.debug_mode = DebugMode(self.options)
        self.resolver = LogsDirectoryResolver(HostStorage(uploads_dir))
        self.policy = FilenamePolicy(self.resolver, now=now)
        self.writer = LogWriter(self.policy, self.debug_mode, now=now)
        self.catalog = LogCatalog()
        self.guard = FileGuard()
        self.retention = RetentionOps(self.guard)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def activate(self) -> None:
        """First-run setup: install time, default debug flag, logs directory."""
        if not self.options.get_option(INSTALLED_TIME_OPTION):
            self.options.set_option(INSTALLED_TIME_OPTION, int(time.time()))

        if not self.debug_mode.is_configured():
            self.debug_mode.set_enabled(True)

        if not self.resolver.is_available():
            logger.warning("[LOGS] Logs directory could not be provisioned")

    def logs_directory(self) -> Path:
        """Resolved logs directory; raises LogsDirectoryError if unavailable."""
        return self.resolver.resolve()

    # ------------------------------------------------------------------
    # Debug toggle
    # ------------------------------------------------------------------

    def is_debug(self) -> bool:
        return self.debug_mode.enabled

    def set_debug(self, enabled: bool) -> None:
        self.debug_mode.set_enabled(enabled)
        logger.info("[LOGS] Debug mode %s", "enabled" if enabled else "disabled")

    # ------------------------------------------------------------------
    # Writing
    # ------------------------------------------------------------------

    def create(self, message: str, log_type: Optional[str] = "debug") -> bool:
        """Log `message`; see LogWriter.write for the return value."""
        return self.writer.write(message, log_type)

    # ------------------------------------------------------------------
    # Browsing
    # ------------------------------------------------------------------

    def list_files(self, search: str = "") -> List[LogFile]:
        try:
            logs_dir = self.resolver.resolve()
        except LogsDirectoryError:
            return []
        return self.catalog.list_files(logs_dir, search)

    def latest_file(self, log_type: Optional[str] = "debug") -> Optional[LogFile]:
        try:
            logs_dir = self.resolver.resolve()
        except LogsDirectoryError:
            return None
        return self.catalog.latest_file(logs_dir, log_type)

    def view_file(self, filename: str) -> str:
        """Return the full text of a log file.

        Raises
        ------
        LogsDirectoryError
            If the logs directory is unavailable.
        PathEscapeError
            If `filename` does not name an existing file inside it.
        LogFileReadError
            If the file exists but cannot be read.
        """
        path = self.guard.resolve_safe(self.resolver.resolve(), filename)
        if not path.is_file():
            raise LogFileReadError()
        try:
            return path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            logger.warning("[LOGS] Could not read %s: %s", path.name, exc)
            raise LogFileReadError() from exc

    # ------------------------------------------------------------------
    # Deleting
    # ------------------------------------------------------------------

    def delete_file(self, filename: str) -> DeleteOutcome:
        try:
            logs_dir = self.resolver.resolve()
        except LogsDirectoryError:
            return DeleteOutcome.NOT_FOUND
        return self.retention.delete_file(logs_dir, filename)
