"""Ports (interfaces) used by the core UI state helpers.

Ports define the minimal contracts for clipboard and timer adapters so that
the core can be driven by the Textual frontend or by plain test doubles.
"""

from __future__ import annotations

from typing import Callable, Protocol


class ClipboardPort(Protocol):
    """Clipboard write required by copy feedback. May raise when unavailable."""

    def copy(self, text: str) -> None:
        ...


class SchedulerPort(Protocol):
    """Fire-and-forget delayed callback."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> None:
        ...
