"""
Process logging setup for the daylog server.

This configures Python's own diagnostic logging (console). It is unrelated
to the daily log files managed by core/storage.
"""

from __future__ import annotations

import logging


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger with a single console handler."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        handlers=[logging.StreamHandler()],
        force=True,
    )
