import os
from pathlib import Path

from core.storage.log_catalog import LogCatalog


def _make(logs_dir: Path, name: str, mtime: int, content: str = "[x] y\n") -> Path:
    path = logs_dir / name
    path.write_text(content, encoding="utf-8")
    os.utime(path, (mtime, mtime))
    return path


def test_list_files_sorted_newest_first(logs_dir: Path) -> None:
    _make(logs_dir, "debug-20240530.log", 1_000)
    _make(logs_dir, "attention-20240601.log", 3_000)
    _make(logs_dir, "debug-20240601.log", 2_000)
    (logs_dir / "index.html").write_text("<!-- -->", encoding="utf-8")
    (logs_dir / "notes.txt").write_text("ignored", encoding="utf-8")

    names = [f.name for f in LogCatalog().list_files(logs_dir)]

    assert names == [
        "attention-20240601.log",
        "debug-20240601.log",
        "debug-20240530.log",
    ]


def test_equal_mtimes_have_deterministic_order(logs_dir: Path) -> None:
    for name in ["c.log", "a.log", "b.log"]:
        _make(logs_dir, name, 5_000)

    catalog = LogCatalog()
    first = [f.name for f in catalog.list_files(logs_dir)]

    assert first == ["a.log", "b.log", "c.log"]
    assert [f.name for f in catalog.list_files(logs_dir)] == first


def test_search_is_case_insensitive_substring(logs_dir: Path) -> None:
    _make(logs_dir, "debug-20240601.log", 1_000)
    _make(logs_dir, "attention-20240601.log", 2_000)
    _make(logs_dir, "Custom-ATTACHED.log", 3_000)

    catalog = LogCatalog()

    assert [f.name for f in catalog.list_files(logs_dir, "att")] == [
        "Custom-ATTACHED.log",
        "attention-20240601.log",
    ]
    assert [f.name for f in catalog.list_files(logs_dir, "ATT")] == [
        "Custom-ATTACHED.log",
        "attention-20240601.log",
    ]
    assert len(catalog.list_files(logs_dir, "")) == 3
    assert catalog.list_files(logs_dir, "nomatch") == []


def test_log_file_metadata(logs_dir: Path) -> None:
    _make(logs_dir, "attention-20240601.log", 1_717_243_845, content="[a] b\n")
    _make(logs_dir, "other.log", 1_000)

    files = {f.name: f for f in LogCatalog().list_files(logs_dir)}

    attention = files["attention-20240601.log"]
    assert attention.log_type == "attention"
    assert attention.date_stamp == "20240601"
    assert attention.size_bytes == 6
    assert attention.size_label == "6 B"
    assert int(attention.modified_at.timestamp()) == 1_717_243_845
    assert Path(attention.path) == logs_dir / "attention-20240601.log"

    assert files["other.log"].log_type == "unknown"
    assert files["other.log"].date_stamp is None


def test_listing_is_not_cached(logs_dir: Path) -> None:
    catalog = LogCatalog()
    assert catalog.list_files(logs_dir) == []

    _make(logs_dir, "debug-20240601.log", 1_000)

    assert len(catalog.list_files(logs_dir)) == 1


def test_latest_file_by_type(logs_dir: Path) -> None:
    _make(logs_dir, "debug-20240530.log", 1_000)
    _make(logs_dir, "debug-20240531.log", 2_000)
    _make(logs_dir, "attention-20240601.log", 9_000)

    catalog = LogCatalog()

    assert catalog.latest_file(logs_dir, "debug").name == "debug-20240531.log"
    assert catalog.latest_file(logs_dir, "attention").name == "attention-20240601.log"
    # Unknown types are looked up as debug.
    assert catalog.latest_file(logs_dir, "bogus").name == "debug-20240531.log"


def test_latest_file_none_when_no_match(logs_dir: Path) -> None:
    _make(logs_dir, "debug-20240530.log", 1_000)

    assert LogCatalog().latest_file(logs_dir, "attention") is None
