from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

PLACEHOLDER_NAME = "No file selected"
PLACEHOLDER_SIZE = "-"


@dataclass
class CandidateFile:
    """A file offered by the user, before validation."""

    media_type: str
    name: str
    content: bytes
    size: int


@dataclass
class SelectedImage:
    path: Path
    media_type: str
    name: str
    size: int


@dataclass
class Workspace:
    """Mutable state shared by the intake and conversion services."""

    selected: Optional[SelectedImage] = None
    display_name: str = PLACEHOLDER_NAME
    display_size: str = PLACEHOLDER_SIZE
    preview_visible: bool = False
    busy: bool = False

    def show(self, image: SelectedImage, formatted_size: str) -> None:
        self.selected = image
        self.display_name = image.name
        self.display_size = formatted_size
        self.preview_visible = True

    def reset(self) -> Optional[SelectedImage]:
        """Drop the staged image and restore placeholders; returns what was staged."""
        previous = self.selected
        self.selected = None
        self.display_name = PLACEHOLDER_NAME
        self.display_size = PLACEHOLDER_SIZE
        self.preview_visible = False
        return previous
