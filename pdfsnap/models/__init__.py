
from .common import Severity, ToastMessage, WorkspaceState
from .conversion import CelebrationOptions, ConversionResult
from .workspace import CandidateFile, SelectedImage, Workspace

__all__ = [
    "CandidateFile",
    "CelebrationOptions",
    "ConversionResult",
    "SelectedImage",
    "Severity",
    "ToastMessage",
    "Workspace",
    "WorkspaceState",
]
