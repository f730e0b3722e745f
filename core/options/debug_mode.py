"""
Typed view over the debug-mode option.

The flag is persisted as an integer 0/1 in the host option store; only a
value that coerces to exactly 1 (after taking the absolute value) enables
debug logging.
"""

from typing import Any

from core.options.option_store import DEBUG_OPTION, OptionStore


def _coerce_flag(value: Any) -> bool:
    try:
        return abs(int(value)) == 1
    except (TypeError, ValueError):
        return False


class DebugMode:
    """Boolean port used by LogWriter to decide whether debug entries are kept."""

    def __init__(self, option_store: OptionStore) -> None:
        self._options = option_store

    @property
    def enabled(self) -> bool:
        return _coerce_flag(self._options.get_option(DEBUG_OPTION, 0))

    def set_enabled(self, enabled: bool) -> None:
        self._options.set_option(DEBUG_OPTION, 1 if enabled else 0)

    def is_configured(self) -> bool:
        return self._options.get_option(DEBUG_OPTION) is not None
