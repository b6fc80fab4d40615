from __future__ import annotations

import time
from datetime import timedelta
from functools import lru_cache
from typing import Callable, Optional

from fastapi import Depends, Request

from pdfsnap.core.config import Settings, get_settings
from pdfsnap.models import Workspace, WorkspaceState
from pdfsnap.services.conversion_service import ConversionOrchestrator
from pdfsnap.services.intake_service import FileIntake
from pdfsnap.services.toast_service import ToastNotifier
from pdfsnap.storage.local import LocalStorage
from pdfsnap.storage.registry import DownloadRegistry
from pdfsnap.storage.sessions import SessionRegistry


class ConverterController:
    """Owns one session's workspace and wires the notifier, intake and conversion services to it."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        storage: Optional[LocalStorage] = None,
        clock: Callable[[], float] = time.monotonic,
        delay: Optional[float] = None,
    ) -> None:
        settings = settings or get_settings()
        self.workspace = Workspace()
        self.storage = storage or LocalStorage()
        self.downloads = DownloadRegistry(ttl=timedelta(minutes=settings.download_ttl_minutes))
        self.notifier = ToastNotifier(duration=settings.toast_duration_seconds, clock=clock)
        self.intake = FileIntake(self.workspace, self.notifier, self.storage)
        self.orchestrator = ConversionOrchestrator(
            self.workspace,
            self.notifier,
            self.storage,
            self.downloads,
            page_width=settings.page_width,
            delay=settings.conversion_delay_seconds if delay is None else delay,
        )

    def state(self) -> WorkspaceState:
        workspace = self.workspace
        return WorkspaceState(
            file_name=workspace.display_name,
            file_size=workspace.display_size,
            has_file=workspace.selected is not None,
            preview_visible=workspace.preview_visible,
            busy=workspace.busy,
            toast=self.notifier.current,
            toast_visible=self.notifier.visible,
        )

    def close(self) -> None:
        """Remove the staged upload of an abandoned session."""
        previous = self.workspace.reset()
        if previous:
            self.storage.cleanup([previous.path])


@lru_cache()
def get_sessions() -> SessionRegistry:
    settings = get_settings()
    return SessionRegistry(ConverterController, ttl=timedelta(minutes=settings.session_ttl_minutes))


def get_controller(request: Request, sessions: SessionRegistry = Depends(get_sessions)) -> ConverterController:
    # request.state.session_id is assigned by the session middleware in main.py
    return sessions.get(request.state.session_id)
