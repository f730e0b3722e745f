"""
Storage abstractions for the daylog runtime.

Includes:
- LogStore: daily log files (write, list, view, delete) and the debug toggle
"""
