"""
Custom exceptions for daylog.

These exceptions are intentionally simple and descriptive.
They are used across:

  - core/storage/
  - runtime/store/
  - runtime/api/

Placing them at the project root (exceptions/) avoids circular imports
and keeps exception types consistent across modules.

Messages never contain the caller-supplied filename, so they are safe to
show to an operator as-is.
"""


class LogsDirectoryError(Exception):
    """
    Raised when the logs directory cannot be resolved, created or used.

    The resolver caches this failure for the lifetime of the process.
    """

    def __init__(self, details=None):
        self.details = details or "Uploads/logs directory is not accessible."
        super().__init__(self.details)


class SecurityError(Exception):
    """Base class for rejected access to a named log file."""


class PathEscapeError(SecurityError):
    """
    Raised when a supplied filename does not canonicalize to a file inside
    the logs directory (traversal sequences, symlinks, missing files).
    """

    def __init__(self):
        super().__init__("Requested file is outside the logs directory.")


class LogFileReadError(Exception):
    """
    Raised when a validated log file cannot be read as text, e.g. it is
    not a regular file or the read fails.
    """

    def __init__(self, details=None):
        self.details = details or "Unable to read the selected file."
        super().__init__(self.details)
