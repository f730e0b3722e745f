"""
Log-file models shared by core/storage and the runtime.

These describe:
- LogType enum (debug, attention) and the filename prefix inference
- LogFile: an existing file in the logs directory plus its metadata
- DeleteOutcome enum (deleted, not_found, permission_error, path_escape)
"""

import re
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel


# <type>-<YYYYMMDD>.log
CANONICAL_NAME_RE = re.compile(r"^(debug|attention)-(\d{8})\.log$")


class LogType(str, Enum):
    DEBUG = "debug"
    ATTENTION = "attention"

    @classmethod
    def normalize(cls, value: Optional[str]) -> "LogType":
        """Lowercase + trim; anything unrecognised falls back to DEBUG."""
        candidate = (value or "").strip().lower()
        for member in cls:
            if member.value == candidate:
                return member
        return cls.DEBUG


def infer_log_type(filename: str) -> str:
    """Return 'debug', 'attention' or 'unknown' from the filename prefix."""
    for member in LogType:
        if filename.startswith(f"{member.value}-"):
            return member.value
    return "unknown"


def format_size(size_bytes: int) -> str:
    if size_bytes < 1024:
        return f"{size_bytes} B"
    size = float(size_bytes)
    for unit in ["KB", "MB", "GB"]:
        size /= 1024
        if size < 1024 or unit == "GB":
            break
    return f"{size:.1f} {unit}"


class LogFile(BaseModel):
    path: str
    name: str
    log_type: str            # "debug", "attention" or "unknown"
    date_stamp: Optional[str] = None  # YYYYMMDD for canonical names
    size_bytes: int
    modified_at: datetime

    @property
    def size_label(self) -> str:
        return format_size(self.size_bytes)

    @classmethod
    def from_path(cls, path: Path) -> "LogFile":
        """Build a LogFile from a path on disk (raises OSError if it vanished)."""
        stat = path.stat()
        match = CANONICAL_NAME_RE.match(path.name)
        return cls(
            path=str(path),
            name=path.name,
            log_type=infer_log_type(path.name),
            date_stamp=match.group(2) if match else None,
            size_bytes=stat.st_size,
            modified_at=datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
        )


class DeleteOutcome(str, Enum):
    DELETED = "deleted"
    NOT_FOUND = "not_found"
    PERMISSION_ERROR = "permission_error"
    PATH_ESCAPE = "path_escape"

    def notice(self, filename: str) -> str:
        """Operator-facing message for this outcome.

        Path escapes do not echo the attempted filename.
        """
        if self is DeleteOutcome.DELETED:
            return f"Deleted {filename}"
        if self is DeleteOutcome.NOT_FOUND:
            return f"File not found: {filename}"
        if self is DeleteOutcome.PERMISSION_ERROR:
            return "Unable to delete the file (permission issue)."
        return "Unable to delete the selected file."
