"""
LogCatalog: enumerate `*.log` files in the logs directory.

Every call re-reads the directory; nothing about the listing is cached.
Results are ordered most recently modified first.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from core.storage.models import LogFile, LogType


logger = logging.getLogger(__name__)


def _collect(paths: Iterable[Path]) -> List[LogFile]:
    files: List[LogFile] = []
    # Sort by name first so equal mtimes keep a deterministic order.
    for path in sorted(paths, key=lambda p: p.name):
        if not path.is_file():
            continue
        try:
            files.append(LogFile.from_path(path))
        except OSError:
            # Deleted between glob and stat.
            logger.debug("[LOGS] %s vanished during listing", path.name)
    files.sort(key=lambda f: f.modified_at, reverse=True)
    return files


class LogCatalog:
    def list_files(self, logs_dir: Path, search: str = "") -> List[LogFile]:
        """Return log files, optionally filtered by a case-insensitive substring."""
        needle = (search or "").strip().lower()
        candidates = (
            p for p in Path(logs_dir).glob("*.log")
            if not needle or needle in p.name.lower()
        )
        return _collect(candidates)

    def latest_file(self, logs_dir: Path, log_type: Optional[str] = "debug") -> Optional[LogFile]:
        """Most recently modified file of the given type, or None."""
        normalized = LogType.normalize(log_type)
        files = _collect(Path(logs_dir).glob(f"{normalized.value}-*.log"))
        return files[0] if files else None
