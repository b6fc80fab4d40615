from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class Severity(str, Enum):
    info = "info"
    success = "success"
    warning = "warning"
    error = "error"


class ToastMessage(BaseModel):
    text: str
    severity: Severity = Severity.info
    icon: str
    color: str
    progress: str = Field(..., description="CSS gradient for the countdown bar.")
    duration_ms: int = 3000
    shown_at: datetime = Field(default_factory=datetime.utcnow)


class WorkspaceState(BaseModel):
    file_name: str
    file_size: str
    has_file: bool
    preview_visible: bool
    busy: bool
    toast: Optional[ToastMessage] = None
    toast_visible: bool = False
