from pathlib import Path
from typing import Iterable, Optional
from uuid import uuid4

from pdfsnap.core.config import get_settings


class LocalStorage:
    """Scratch storage for images staged between intake and conversion."""

    def __init__(self, base_dir: Optional[Path] = None) -> None:
        settings = get_settings()
        self.base_dir = Path(base_dir or settings.storage_dir)
        self.temp_dir = self.base_dir / "tmp" if base_dir else settings.temp_dir

        for directory in (self.base_dir, self.temp_dir):
            directory.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def _generate_filename(suffix: str) -> str:
        suffix = suffix if suffix.startswith(".") else f".{suffix.lstrip('.')}"
        return f"{uuid4().hex}{suffix}"

    def save_bytes(self, data: bytes, *, suffix: str, directory: Optional[Path] = None) -> Path:
        directory = directory or self.temp_dir
        target_path = directory / self._generate_filename(suffix or ".bin")
        target_path.write_bytes(data)
        return target_path

    def cleanup(self, paths: Iterable[Optional[Path]]) -> None:
        for path in paths:
            if path and path.exists():
                path.unlink(missing_ok=True)
