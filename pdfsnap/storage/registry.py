from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from io import BytesIO
from typing import Callable, Dict, Optional
from uuid import uuid4

from fastapi import HTTPException, status
from pypdf import PdfReader


def count_pages(data: bytes) -> int:
    return len(PdfReader(BytesIO(data)).pages)


@dataclass
class GeneratedDocument:
    token: str
    filename: str
    data: bytes
    created_at: datetime
    page_count: int

    @property
    def size_bytes(self) -> int:
        return len(self.data)

    @property
    def download_url(self) -> str:
        return f"/convert/download/{self.token}"


class DownloadRegistry:
    """Holds freshly generated PDFs in memory until they are downloaded once or expire."""

    def __init__(self, ttl: timedelta = timedelta(minutes=10), clock: Callable[[], datetime] = datetime.utcnow) -> None:
        self._entries: Dict[str, GeneratedDocument] = {}
        self._ttl = ttl
        self._clock = clock

    def register(self, data: bytes, filename: str, page_count: Optional[int] = None) -> GeneratedDocument:
        """Store a PDF; its page count is read back unless the caller already knows it."""
        self.cleanup()

        entry = GeneratedDocument(
            token=uuid4().hex,
            filename=filename,
            data=data,
            created_at=self._clock(),
            page_count=count_pages(data) if page_count is None else page_count,
        )
        self._entries[entry.token] = entry
        return entry

    def pop(self, token: str) -> GeneratedDocument:
        self.cleanup()
        entry = self._entries.pop(token, None)
        if not entry:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="The requested document does not exist or has expired.",
            )
        return entry

    def __len__(self) -> int:
        return len(self._entries)

    def cleanup(self) -> None:
        """Drop entries older than the retention window."""
        now = self._clock()
        expired = [token for token, entry in self._entries.items() if now - entry.created_at > self._ttl]
        for token in expired:
            self._entries.pop(token, None)
