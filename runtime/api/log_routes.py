"""HTTP routes for browsing and managing daily log files.

Exposes endpoints like:

- GET    /logs                    -> list files (optional ?s= filename filter)
- GET    /logs/latest/{log_type}  -> newest file of a type
- GET    /logs/files/{filename}   -> full file contents
- DELETE /logs/files/{filename}   -> delete one file, returns the outcome
- POST   /logs/entries            -> append an entry (same as LogStore.create)
- GET    /logs/settings/debug     -> current debug toggle
- PUT    /logs/settings/debug     -> change debug toggle

Authentication is left to whatever fronts this app.
"""

import logging

from fastapi import APIRouter, HTTPException, Query
from typing import Optional

from core.storage.models import LogFile
from exceptions.exceptions import LogFileReadError, LogsDirectoryError, SecurityError
from ..models.api_models import (
    CreateEntryRequest,
    CreateEntryResponse,
    DebugSetting,
    DeleteResponse,
    LogContentResponse,
    LogListResponse,
)
from ..store.log_store import LogStore


logger = logging.getLogger(__name__)

# Router for all log-related endpoints
router = APIRouter()

UNREADABLE_DETAIL = "Unable to read the selected file."


# Module-level reference, to be initialized by the server.
_LOG_STORE: Optional[LogStore] = None


def init_routes(log_store: LogStore) -> None:
    """Initialize module-level references used by the route handlers."""
    global _LOG_STORE
    _LOG_STORE = log_store


def _require_log_store() -> LogStore:
    if _LOG_STORE is None:
        raise HTTPException(
            status_code=500,
            detail="LogStore is not configured on the server.",
        )
    return _LOG_STORE


def _require_logs_dir(store: LogStore):
    try:
        return store.logs_directory()
    except LogsDirectoryError as e:
        raise HTTPException(status_code=503, detail=e.details)


@router.get("", response_model=LogListResponse)
def list_logs(s: str = Query("", description="Case-insensitive filename filter")) -> LogListResponse:
    store = _require_log_store()
    logs_dir = _require_logs_dir(store)
    return LogListResponse(
        logs_dir=str(logs_dir),
        debug_enabled=store.is_debug(),
        files=store.list_files(s),
    )


@router.get("/latest/{log_type}", response_model=LogFile)
def latest_log(log_type: str) -> LogFile:
    store = _require_log_store()
    _require_logs_dir(store)
    latest = store.latest_file(log_type)
    if latest is None:
        raise HTTPException(status_code=404, detail="No log files found.")
    return latest


@router.get("/files/{filename}", response_model=LogContentResponse)
def view_log(filename: str) -> LogContentResponse:
    """Return the whole file. Rejections never echo the requested name."""
    store = _require_log_store()
    _require_logs_dir(store)
    try:
        content = store.view_file(filename)
    except (SecurityError, LogFileReadError) as e:
        logger.warning("[LOGS] View rejected: %s", e.__class__.__name__)
        raise HTTPException(status_code=404, detail=UNREADABLE_DETAIL)
    return LogContentResponse(filename=filename, content=content)


@router.delete("/files/{filename}", response_model=DeleteResponse)
def delete_log(filename: str) -> DeleteResponse:
    store = _require_log_store()
    outcome = store.delete_file(filename)
    return DeleteResponse(
        filename=filename,
        outcome=outcome,
        notice=outcome.notice(filename),
    )


@router.post("/entries", response_model=CreateEntryResponse)
def create_entry(request: CreateEntryRequest) -> CreateEntryResponse:
    store = _require_log_store()
    return CreateEntryResponse(written=store.create(request.message, request.log_type))


@router.get("/settings/debug", response_model=DebugSetting)
def get_debug_setting() -> DebugSetting:
    store = _require_log_store()
    return DebugSetting(enabled=store.is_debug())


@router.put("/settings/debug", response_model=DebugSetting)
def update_debug_setting(setting: DebugSetting) -> DebugSetting:
    store = _require_log_store()
    store.set_debug(setting.enabled)
    return DebugSetting(enabled=store.is_debug())


@router.get("/healthz")
def health_check():
    """
    Simple health check endpoint for uptime monitoring.
    """
    return {"status": "ok"}
