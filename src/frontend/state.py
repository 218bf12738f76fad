"""Per-tab state container and the Textual-backed port implementations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from textual.app import App
from textual.widget import Widget

from core.ui_state import CopyFeedback, ExpandState
from core.view import CollectionView


@dataclass
class TabState:
    view: CollectionView
    copy_feedback: CopyFeedback
    expand: ExpandState = field(default_factory=ExpandState)


class AppClipboard:
    """ClipboardPort backed by the terminal clipboard (OSC 52)."""

    def __init__(self, app: App) -> None:
        self._app = app

    def copy(self, text: str) -> None:
        self._app.copy_to_clipboard(text)


class WidgetScheduler:
    """SchedulerPort backed by widget timers; ``on_fire`` runs after each callback."""

    def __init__(self, widget: Widget, on_fire: Callable[[], None]) -> None:
        self._widget = widget
        self._on_fire = on_fire

    def call_later(self, delay: float, callback: Callable[[], None]) -> None:
        def _fire() -> None:
            callback()
            self._on_fire()

        self._widget.set_timer(delay, _fire)
