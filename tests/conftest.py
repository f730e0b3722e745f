from datetime import datetime, timezone
from pathlib import Path

import pytest

from core.options.option_store import DEBUG_OPTION, OptionStore
from runtime.store.log_store import LogStore


FIXED_NOW = datetime(2024, 6, 1, 12, 30, 45, tzinfo=timezone.utc)


class FakeClock:
    """Mutable clock so a test can move across UTC midnight."""

    def __init__(self, now: datetime = FIXED_NOW) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def uploads_dir(tmp_path: Path) -> Path:
    path = tmp_path / "uploads"
    path.mkdir()
    return path


@pytest.fixture
def logs_dir(uploads_dir: Path) -> Path:
    path = uploads_dir / "logs"
    path.mkdir()
    return path


@pytest.fixture
def option_store() -> OptionStore:
    store = OptionStore()
    store.set_option(DEBUG_OPTION, 1)
    return store


@pytest.fixture
def log_store(uploads_dir: Path, option_store: OptionStore, clock: FakeClock) -> LogStore:
    return LogStore(uploads_dir=str(uploads_dir), option_store=option_store, now=clock)
