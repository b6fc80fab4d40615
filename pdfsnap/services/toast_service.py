from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from pdfsnap.core.logging import configure_logging
from pdfsnap.models import Severity, ToastMessage

TOAST_ICONS = {
    Severity.info: "fas fa-info-circle",
    Severity.success: "fas fa-check-circle",
    Severity.warning: "fas fa-exclamation-triangle",
    Severity.error: "fas fa-exclamation-circle",
}

TOAST_COLORS = {
    Severity.info: "#4361ee",
    Severity.success: "#4cc9f0",
    Severity.warning: "#f8961e",
    Severity.error: "#ef233c",
}

_LOG_LEVELS = {
    Severity.info: logging.INFO,
    Severity.success: logging.INFO,
    Severity.warning: logging.WARNING,
    Severity.error: logging.ERROR,
}


class ToastNotifier:
    """
    Keeps the single status message shown to the user.

    A newer toast always replaces the current one and restarts the display
    window; visibility is measured against ``clock`` rather than timers.
    """

    def __init__(self, duration: float = 3.0, clock: Callable[[], float] = time.monotonic) -> None:
        self.duration = duration
        self._clock = clock
        self._hide_at: Optional[float] = None
        self.current: Optional[ToastMessage] = None
        self.logger = configure_logging()

    def notify(self, message: str, severity: Severity = Severity.info) -> ToastMessage:
        severity = Severity(severity)
        color = TOAST_COLORS[severity]
        tail = "#3a0ca3" if severity is Severity.success else "#f72585"

        toast = ToastMessage(
            text=message,
            severity=severity,
            icon=TOAST_ICONS[severity],
            color=color,
            progress=f"linear-gradient(90deg, {color}, {tail})",
            duration_ms=int(self.duration * 1000),
        )
        self.current = toast
        self._hide_at = self._clock() + self.duration

        self.logger.log(_LOG_LEVELS[severity], "toast[%s]: %s", severity.value, message)
        return toast

    @property
    def visible(self) -> bool:
        return self._hide_at is not None and self._clock() < self._hide_at

    def hide(self) -> None:
        self._hide_at = None
