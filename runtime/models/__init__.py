"""
Pydantic / datamodels used by the daylog runtime.

- api_models: HTTP request/response schemas

LogFile, LogType and DeleteOutcome live in core/storage/models.py.
"""
