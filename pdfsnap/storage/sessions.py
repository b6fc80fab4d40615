from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Callable, Dict, Optional
from uuid import uuid4

if TYPE_CHECKING:
    from pdfsnap.services.controller import ConverterController


@dataclass
class _Session:
    controller: ConverterController
    last_seen: datetime


class SessionRegistry:
    """One controller per browser session, created on first use and closed after inactivity."""

    def __init__(
        self,
        factory: Callable[[], ConverterController],
        ttl: timedelta = timedelta(hours=1),
        clock: Callable[[], datetime] = datetime.utcnow,
    ) -> None:
        self._factory = factory
        self._ttl = ttl
        self._clock = clock
        self._sessions: Dict[str, _Session] = {}

    @staticmethod
    def new_id() -> str:
        return uuid4().hex

    def get(self, session_id: str) -> ConverterController:
        self.cleanup()
        session = self._sessions.get(session_id)
        if session is None:
            session = _Session(controller=self._factory(), last_seen=self._clock())
            self._sessions[session_id] = session
        session.last_seen = self._clock()
        return session.controller

    def peek(self, session_id: str) -> Optional[ConverterController]:
        session = self._sessions.get(session_id)
        return session.controller if session else None

    def __len__(self) -> int:
        return len(self._sessions)

    def cleanup(self) -> None:
        """Close and forget sessions idle for longer than the retention window."""
        now = self._clock()
        expired = [sid for sid, session in self._sessions.items() if now - session.last_seen > self._ttl]
        for sid in expired:
            self._sessions.pop(sid).controller.close()
