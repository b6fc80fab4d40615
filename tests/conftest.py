import os
import tempfile
from io import BytesIO

# Keep scratch files out of the working tree; must happen before settings load.
os.environ.setdefault("STORAGE_DIR", tempfile.mkdtemp(prefix="pdfsnap-tests-"))

import pytest
from PIL import Image

from pdfsnap.models import CandidateFile, Workspace
from pdfsnap.services.controller import ConverterController
from pdfsnap.services.toast_service import ToastNotifier
from pdfsnap.storage.local import LocalStorage
from pdfsnap.storage.registry import DownloadRegistry
from pdfsnap.storage.sessions import SessionRegistry


class FakeClock:
    def __init__(self, now: float = 100.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingNotifier(ToastNotifier):
    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.history = []

    def notify(self, message, severity="info"):
        toast = super().notify(message, severity)
        self.history.append(toast)
        return toast


def make_image_bytes(width=800, height=400, fmt="PNG", mode="RGB", color=(67, 97, 238)) -> bytes:
    if mode == "RGBA":
        color = color + (128,)
    buffer = BytesIO()
    Image.new(mode, (width, height), color).save(buffer, format=fmt)
    return buffer.getvalue()


def make_candidate(name="photo.png", media_type="image/png", content=None) -> CandidateFile:
    content = make_image_bytes() if content is None else content
    return CandidateFile(media_type=media_type, name=name, content=content, size=len(content))


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def notifier(clock):
    return RecordingNotifier(duration=3.0, clock=clock)


@pytest.fixture
def storage(tmp_path):
    return LocalStorage(tmp_path / "storage")


@pytest.fixture
def workspace():
    return Workspace()


@pytest.fixture
def downloads():
    return DownloadRegistry()


@pytest.fixture
def sessions(storage, clock):
    return SessionRegistry(lambda: ConverterController(storage=storage, clock=clock, delay=0))
