from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv


load_dotenv()


class Settings:
    """
    Central configuration for daylog.

    Values are loaded once from environment variables (with sensible defaults)
    and then exposed via typed properties.
    """

    def __init__(self) -> None:
        # Host storage: logs are provisioned under <uploads_dir>/logs
        self._uploads_dir = Path(
            os.getenv("DAYLOG_UPLOADS_DIR", "runtime/data/uploads")
        )
        # Host option store (debug flag, install time)
        self._runtime_data_dir = Path(
            os.getenv("DAYLOG_RUNTIME_DATA_DIR", "runtime/data")
        )

        self._log_level = os.getenv("DAYLOG_LOG_LEVEL", "INFO")

    # ------------------------------------------------------------------
    # Paths
    # ------------------------------------------------------------------

    @property
    def uploads_dir(self) -> Path:
        return self._uploads_dir

    @property
    def runtime_data_dir(self) -> Path:
        return self._runtime_data_dir

    @property
    def options_file(self) -> Path:
        return self._runtime_data_dir / "options.json"

    # ------------------------------------------------------------------
    # Process logging
    # ------------------------------------------------------------------

    @property
    def log_level(self) -> str:
        return self._log_level.upper()


settings = Settings()
