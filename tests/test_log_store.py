import re
from pathlib import Path

import pytest

from core.options.option_store import DEBUG_OPTION, INSTALLED_TIME_OPTION, OptionStore
from core.storage.models import DeleteOutcome
from exceptions.exceptions import LogFileReadError, LogsDirectoryError, PathEscapeError
from runtime.store.log_store import LogStore


def test_attention_scenario(log_store: LogStore, uploads_dir: Path) -> None:
    log_store.set_debug(False)

    assert log_store.create("Unexpected issue", "attention") is True

    lines = (uploads_dir / "logs" / "attention-20240601.log").read_text(
        encoding="utf-8"
    ).splitlines()
    assert len(lines) == 1
    assert re.fullmatch(r"\[2024-06-01 \d{2}:\d{2}:\d{2}\] Unexpected issue", lines[0])


def test_debug_disabled_scenario(log_store: LogStore, uploads_dir: Path) -> None:
    log_store.set_debug(False)

    assert log_store.create("trace info") is False
    assert log_store.list_files() == []
    assert not (uploads_dir / "logs" / "debug-20240601.log").exists()


def test_list_view_delete_cycle(log_store: LogStore) -> None:
    log_store.create("one")
    log_store.create("two", "attention")

    names = {f.name for f in log_store.list_files()}
    assert names == {"debug-20240601.log", "attention-20240601.log"}
    assert [f.name for f in log_store.list_files("ATT")] == ["attention-20240601.log"]

    assert log_store.view_file("debug-20240601.log") == "[2024-06-01 12:30:45] one\n"
    assert log_store.latest_file("attention").name == "attention-20240601.log"

    assert log_store.delete_file("debug-20240601.log") is DeleteOutcome.DELETED
    assert log_store.delete_file("debug-20240601.log") is DeleteOutcome.NOT_FOUND
    assert [f.name for f in log_store.list_files()] == ["attention-20240601.log"]


def test_view_rejects_escapes_and_missing_files(log_store: LogStore, uploads_dir: Path) -> None:
    (uploads_dir / "secret.txt").write_text("nope", encoding="utf-8")

    with pytest.raises(PathEscapeError):
        log_store.view_file("../secret.txt")
    with pytest.raises(PathEscapeError):
        log_store.view_file("missing.log")


def test_view_rejects_directories(log_store: LogStore) -> None:
    (log_store.logs_directory() / "dir.log").mkdir()

    with pytest.raises(LogFileReadError):
        log_store.view_file("dir.log")


def test_unavailable_directory_degrades(tmp_path: Path, option_store: OptionStore) -> None:
    blocker = tmp_path / "uploads"
    blocker.write_text("x", encoding="utf-8")
    store = LogStore(uploads_dir=str(blocker), option_store=option_store)

    assert store.create("lost", "attention") is False
    assert store.list_files() == []
    assert store.latest_file("debug") is None
    assert store.delete_file("debug-20240601.log") is DeleteOutcome.NOT_FOUND
    with pytest.raises(LogsDirectoryError):
        store.view_file("debug-20240601.log")


def test_activate_sets_defaults_once(uploads_dir: Path) -> None:
    options = OptionStore()
    store = LogStore(uploads_dir=str(uploads_dir), option_store=options)

    store.activate()

    installed = options.get_option(INSTALLED_TIME_OPTION)
    assert isinstance(installed, int) and installed > 0
    assert options.get_option(DEBUG_OPTION) == 1
    assert (uploads_dir / "logs" / "index.html").is_file()

    store.set_debug(False)
    options.set_option(INSTALLED_TIME_OPTION, 123)
    store.activate()

    assert store.is_debug() is False
    assert options.get_option(INSTALLED_TIME_OPTION) == 123


def test_default_option_store_is_in_memory(uploads_dir: Path) -> None:
    store = LogStore(uploads_dir=str(uploads_dir))

    assert store.is_debug() is False
    assert store.create("hidden") is False
