"""
Core logic for daylog, independent of the HTTP layer.

- storage: logs directory, filenames, writing, listing, path guard, deletion
- options: host option store and the typed debug-mode flag
"""
