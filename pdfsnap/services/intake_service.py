from __future__ import annotations

import mimetypes
from pathlib import Path
from typing import Sequence

from pdfsnap.core.logging import configure_logging
from pdfsnap.models import CandidateFile, SelectedImage, Severity, Workspace
from pdfsnap.services.toast_service import ToastNotifier
from pdfsnap.storage.local import LocalStorage
from pdfsnap.utils.file_utils import format_size, is_allowed_image

INVALID_TYPE_MESSAGE = "❌ Please upload a valid image file (JPG, PNG, WEBP)"
LOADED_MESSAGE = "📄 Image loaded successfully!"
REMOVED_MESSAGE = "🗑️ File removed"


class FileIntake:
    """Validates user supplied images and stages one of them in the workspace."""

    def __init__(self, workspace: Workspace, notifier: ToastNotifier, storage: LocalStorage) -> None:
        self.workspace = workspace
        self.notifier = notifier
        self.storage = storage
        self.logger = configure_logging()

    # ------------------------------------------------------------------
    def select_file(self, candidate: CandidateFile) -> bool:
        if not is_allowed_image(candidate.media_type):
            self.notifier.notify(INVALID_TYPE_MESSAGE, Severity.error)
            self.logger.info("Rejected %s (%s)", candidate.name, candidate.media_type)
            return False

        suffix = Path(candidate.name).suffix or mimetypes.guess_extension(candidate.media_type) or ".bin"
        path = self.storage.save_bytes(candidate.content, suffix=suffix)

        previous = self.workspace.selected
        image = SelectedImage(path=path, media_type=candidate.media_type, name=candidate.name, size=candidate.size)
        self.workspace.show(image, format_size(candidate.size))
        if previous:
            self.storage.cleanup([previous.path])

        self.notifier.notify(LOADED_MESSAGE, Severity.success)
        self.logger.info("Staged %s (%s bytes)", candidate.name, candidate.size)
        return True

    def drop(self, candidates: Sequence[CandidateFile]) -> bool:
        """Drag-and-drop entry point; only the first dropped file is considered."""
        if not candidates:
            return False
        return self.select_file(candidates[0])

    def clear(self) -> None:
        previous = self.workspace.reset()
        if previous:
            self.storage.cleanup([previous.path])
        self.notifier.notify(REMOVED_MESSAGE, Severity.info)
