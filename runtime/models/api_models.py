"""
HTTP request/response models for the daylog admin API.
"""

from pydantic import BaseModel
from typing import List

from core.storage.models import DeleteOutcome, LogFile


class LogListResponse(BaseModel):
    logs_dir: str
    debug_enabled: bool
    files: List[LogFile]


class LogContentResponse(BaseModel):
    filename: str
    content: str


class DeleteResponse(BaseModel):
    filename: str
    outcome: DeleteOutcome
    notice: str


class CreateEntryRequest(BaseModel):
    message: str
    log_type: str = "debug"


class CreateEntryResponse(BaseModel):
    written: bool


class DebugSetting(BaseModel):
    enabled: bool
