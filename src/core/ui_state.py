"""Transient UI state: copy confirmation and expand/collapse.

Both are small explicit state objects owned by a single view. Neither one
affects filtering or sorting.
"""

from __future__ import annotations

import logging
from typing import Optional

from core.config import DEFAULT_COPY_FEEDBACK_SECONDS
from core.ports import ClipboardPort, SchedulerPort

LOGGER = logging.getLogger(__name__)


class CopyFeedback:
    """Tracks the one identifier currently shown as "copied".

    Each confirmation gets a generation token. A scheduled expiry only clears
    the state when its token is still the latest one, so a newer copy always
    outlives the timers of earlier copies.
    """

    def __init__(self, delay_seconds: float = DEFAULT_COPY_FEEDBACK_SECONDS) -> None:
        self.delay_seconds = delay_seconds
        self._copied: Optional[str] = None
        self._generation = 0

    @property
    def copied(self) -> Optional[str]:
        return self._copied

    @property
    def is_idle(self) -> bool:
        return self._copied is None

    def is_confirmed(self, identifier: str) -> bool:
        return self._copied == identifier

    def confirm(self, identifier: str) -> int:
        self._generation += 1
        self._copied = identifier
        return self._generation

    def expire(self, token: int) -> bool:
        """Return to idle if ``token`` belongs to the latest confirmation."""

        if token != self._generation:
            return False
        self._copied = None
        return True


def copy_with_feedback(
    feedback: CopyFeedback,
    clipboard: ClipboardPort,
    scheduler: SchedulerPort,
    text: str,
    identifier: str,
) -> bool:
    """Copy ``text`` and show confirmation for ``identifier``.

    Clipboard failures are logged and leave the feedback state untouched.
    """

    try:
        clipboard.copy(text)
    except Exception:
        LOGGER.warning("Failed to copy %s to clipboard", identifier, exc_info=True)
        return False

    token = feedback.confirm(identifier)
    scheduler.call_later(feedback.delay_seconds, lambda: feedback.expire(token))
    return True


class ExpandState:
    """At most one expanded identifier; selecting it again collapses it."""

    def __init__(self) -> None:
        self._expanded: Optional[str] = None

    @property
    def expanded(self) -> Optional[str]:
        return self._expanded

    def is_expanded(self, identifier: str) -> bool:
        return self._expanded == identifier

    def toggle(self, identifier: str) -> Optional[str]:
        if self._expanded == identifier:
            self._expanded = None
        else:
            self._expanded = identifier
        return self._expanded

    def collapse(self) -> None:
        self._expanded = None
