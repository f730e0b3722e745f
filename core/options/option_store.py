"""Host configuration store: string-keyed options with optional JSON backing.

The design mirrors a host environment's generic option table:
- In-memory access is the primary source of truth during a run.
- If a path is configured, every change is also written to that JSON file
  so the values survive a restart.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional


logger = logging.getLogger(__name__)

DEBUG_OPTION = "daylog_enable_debug"
INSTALLED_TIME_OPTION = "daylog_installed_time"


class OptionStore:
    """In-memory + optional file-backed key/value store.

    Parameters
    ----------
    path:
        JSON file used for persistence. If not provided, options only live
        for the lifetime of this object.
    """

    def __init__(self, path: Optional[str] = None) -> None:
        self._path: Optional[Path] = Path(path) if path else None
        self._options: Dict[str, Any] = self._load()

    def _load(self) -> Dict[str, Any]:
        if self._path is None or not self._path.is_file():
            return {}
        try:
            with self._path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError):
            logger.warning("[OPTIONS] Ignoring unreadable option file %s", self._path)
            return {}
        if not isinstance(data, dict):
            logger.warning("[OPTIONS] Ignoring malformed option file %s", self._path)
            return {}
        return data

    def get_option(self, key: str, default: Any = None) -> Any:
        return self._options.get(key, default)

    def set_option(self, key: str, value: Any) -> None:
        self._options[key] = value
        self._persist()

    def delete_option(self, key: str) -> None:
        if self._options.pop(key, None) is not None:
            self._persist()

    def _persist(self) -> None:
        """Write all options to disk if a path is configured."""
        if self._path is None:
            return

        self._path.parent.mkdir(parents=True, exist_ok=True)
        with self._path.open("w", encoding="utf-8") as f:
            json.dump(self._options, f, ensure_ascii=False, indent=2)
