"""Main Textual app for browsing posts and notes."""

from __future__ import annotations

from typing import Any, Iterable, Optional

from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Center, Container, Horizontal, Vertical
from textual.widgets import ContentSwitcher, Footer, Static, Tab, Tabs

import settings
from core.models import Record
from core.sorting import SortState
from core.ui_state import CopyFeedback
from core.view import CollectionView

from .constants import ACCENT
from .state import TabState
from .tabs.collection import CollectionTab


class ContentBrowserApp(App):
    """Tabs per collection, each with its own filter, sort, and copy state."""

    BINDINGS = [
        ("q", "quit", "Quit"),
        ("ctrl+c", "quit", "Quit"),
    ]

    CSS_PATH = "app.tcss"

    def __init__(
        self,
        records: Iterable[Record],
        collections: Optional[list[str]] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self._records = list(records)
        self._collections = collections or list(settings.COLLECTIONS)

    def _tab_state(self, collection: str) -> TabState:
        view = CollectionView.for_collection(
            self._records,
            collection,
            sort_state=SortState(field=settings.DEFAULT_SORT),
        )
        return TabState(
            view=view,
            copy_feedback=CopyFeedback(settings.COPY_FEEDBACK_SECONDS),
        )

    def compose(self) -> ComposeResult:
        with Container(id="header"):
            with Horizontal(id="header-row"):
                with Vertical(id="header-left"):
                    yield Static(self._title_text(), id="title")
                    yield Static(f"{len(self._records)} records", classes="subtle")
                with Vertical(id="header-right"):
                    yield Static(f"content: {settings.CONTENT_DIR}", classes="subtle")

        with Container(id="tabs-bar"):
            with Center(id="tabs-center"):
                yield Tabs(
                    *(Tab(collection.title(), id=collection) for collection in self._collections),
                    id="tabs",
                )

        with ContentSwitcher(id="content"):
            for collection in self._collections:
                noun = collection.rstrip("s") or collection
                yield CollectionTab(
                    self._tab_state(collection),
                    placeholder=f"Search a {noun}...",
                    id=collection,
                )
        yield Footer()

    def on_mount(self) -> None:
        if self._collections:
            self._set_active_tab(self._collections[0])

    def on_tabs_tab_activated(self, event: Tabs.TabActivated) -> None:
        tab_id = event.tab.id or ""
        if not tab_id:
            label = event.tab.label
            if hasattr(label, "plain"):
                label = label.plain
            tab_id = str(label).strip().lower()
        self._set_active_tab(tab_id)

    def _set_active_tab(self, tab_id: str) -> None:
        switcher = self.query_one("#content", ContentSwitcher)
        switcher.current = tab_id

    @staticmethod
    def _title_text() -> Text:
        return Text.assemble(
            ("CONTENT", ACCENT),
            ("SCOPE > Browser", "bold"),
        )
