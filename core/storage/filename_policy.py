"""Daily filename derivation: `<log_type>-<YYYYMMDD>.log` under the logs directory."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Optional

from core.storage.logs_directory import LogsDirectoryResolver
from core.storage.models import LogType


Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class FilenamePolicy:
    def __init__(self, resolver: LogsDirectoryResolver, now: Optional[Clock] = None) -> None:
        self._resolver = resolver
        self._now = now or utc_now

    def filename_for(self, log_type: Optional[str], at: Optional[datetime] = None) -> str:
        normalized = LogType.normalize(log_type)
        day = (at or self._now()).astimezone(timezone.utc).strftime("%Y%m%d")
        return f"{normalized.value}-{day}.log"

    def build_log_path(
        self, log_type: Optional[str] = "debug", at: Optional[datetime] = None
    ) -> Path:
        """Absolute path of the file for `log_type` on the UTC day of `at` (default: now).

        Raises LogsDirectoryError if the logs directory is unavailable.
        """
        return self._resolver.resolve() / self.filename_for(log_type, at)
