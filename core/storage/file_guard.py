"""
FileGuard: the single gate for caller-supplied filenames.

Any view or delete of a named file goes through `resolve_safe` first. The
candidate is collapsed to a bare filename, then both it and the logs
directory are canonicalized (symlinks resolved) and the candidate must sit
strictly inside the directory.
"""

from __future__ import annotations

import os
from pathlib import Path

from exceptions.exceptions import PathEscapeError


_REJECTED_NAMES = {"", ".", ".."}


def sanitize_filename(candidate: str) -> str:
    """Strip directory components, leaving only the final path segment.

    Raises PathEscapeError if nothing usable remains.
    """
    if candidate is None or "\x00" in candidate:
        raise PathEscapeError()
    name = candidate.replace("\\", "/").rsplit("/", 1)[-1].strip()
    if name in _REJECTED_NAMES:
        raise PathEscapeError()
    return name


class FileGuard:
    def resolve_safe(self, logs_dir: Path, candidate: str, must_exist: bool = True) -> Path:
        """Return the canonical path of `candidate` inside `logs_dir`.

        Parameters
        ----------
        logs_dir:
            The logs directory.
        candidate:
            Filename as supplied by the caller (untrusted).
        must_exist:
            When True (the default), a missing file is rejected as well.

        Raises
        ------
        PathEscapeError
            If the canonical path is not inside the canonical logs
            directory, or the file is missing while `must_exist` is set.
        """
        name = sanitize_filename(candidate)

        root = os.path.realpath(logs_dir)
        resolved = os.path.realpath(os.path.join(root, name))

        if not resolved.startswith(root + os.sep):
            raise PathEscapeError()
        if must_exist and not os.path.exists(resolved):
            raise PathEscapeError()
        return Path(resolved)
