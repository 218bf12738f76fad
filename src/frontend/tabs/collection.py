"""Collection tab: search, tag/language filters, and a sortable table."""

from __future__ import annotations

from typing import Any, Optional

from rich.text import Text
from textual import on
from textual.containers import Container, Horizontal, Vertical
from textual.widgets import Button, DataTable, Input, Static

from core.models import Record
from core.sorting import SORTABLE_FIELDS, SortDirection
from core.ui_state import copy_with_feedback

from ..constants import DESCRIPTION_CLIP, SORT_ASC_MARK, SORT_DESC_MARK
from ..state import AppClipboard, TabState, WidgetScheduler

COLUMNS = (
    ("date", "date", 12),
    ("title", "title", 36),
    ("language", "language", 10),
    ("tags", "tags", 24),
    ("description", "description", 40),
)


class FacetButton(Button):
    """Toggle button carrying a tag or language value."""

    def __init__(self, value: str, kind: str, **kwargs: Any) -> None:
        super().__init__(value, classes=f"facet facet-{kind}", **kwargs)
        self.value = value
        self.kind = kind


class CollectionTab(Container):
    """One searchable, filterable view over a single collection."""

    BINDINGS = [
        ("c", "copy_slug", "Copy slug"),
        ("escape", "reset_filters", "Reset"),
    ]

    def __init__(self, state: TabState, placeholder: str, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.state = state
        self._placeholder = placeholder
        self._table_ready = False

    def compose(self):
        facets = self.state.view.facets
        with Vertical(classes="collection-panel"):
            yield Input(placeholder=self._placeholder, classes="search-input")
            with Horizontal(classes="filters-header"):
                yield Static("Filters", classes="filters-title")
                yield Button("Reset", classes="reset-btn")
            if facets.facets:
                with Horizontal(classes="facet-row"):
                    for language in facets.facets:
                        yield FacetButton(language, "language")
            if facets.tags:
                with Horizontal(classes="facet-row"):
                    for tag in facets.tags:
                        yield FacetButton(tag, "tag")
            yield Static("", classes="result-count")
            yield DataTable(classes="records-table", cursor_type="row")
            yield Static("", classes="record-detail")
            yield Static("", classes="copy-status")

    def on_mount(self) -> None:
        table = self.query_one(DataTable)
        table.zebra_stripes = True
        self._table_ready = True
        self.refresh_view()

    @on(Input.Changed)
    def _on_query_changed(self, event: Input.Changed) -> None:
        self.state.view.set_query(event.value)
        self.refresh_view()

    @on(Button.Pressed, ".facet")
    def _on_facet_pressed(self, event: Button.Pressed) -> None:
        button = event.button
        if not isinstance(button, FacetButton):
            return
        if button.kind == "tag":
            self.state.view.toggle_tag(button.value)
        else:
            self.state.view.select_facet(button.value)
        self.refresh_view()

    @on(Button.Pressed, ".reset-btn")
    def _on_reset_pressed(self) -> None:
        self.action_reset_filters()

    def on_data_table_header_selected(self, event: DataTable.HeaderSelected) -> None:
        field = event.column_key.value
        if field not in SORTABLE_FIELDS:
            return
        self.state.view.sort_by(field)
        self.refresh_view()

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        slug = event.row_key.value
        if slug is None:
            return
        self.state.expand.toggle(slug)
        self._refresh_detail()

    def action_reset_filters(self) -> None:
        self.state.view.reset_filters()
        self.query_one(Input).value = ""
        self.refresh_view()

    def action_copy_slug(self) -> None:
        slug = self._cursor_slug()
        if slug is None:
            return
        copy_with_feedback(
            self.state.copy_feedback,
            AppClipboard(self.app),
            WidgetScheduler(self, self._refresh_copy_status),
            slug,
            slug,
        )
        self._refresh_copy_status()

    def refresh_view(self) -> None:
        if not self._table_ready:
            return
        view = self.state.view
        visible = view.visible()
        self._rebuild_table(visible)
        self.query_one(".result-count", Static).update(view.result_label(len(visible)))
        self.query_one(".reset-btn", Button).display = view.filter_state.is_active
        self._refresh_facet_buttons()
        visible_slugs = {record.slug for record in visible}
        expanded = self.state.expand.expanded
        if expanded is not None and expanded not in visible_slugs:
            self.state.expand.collapse()
        self._refresh_detail()

    def _rebuild_table(self, records: list[Record]) -> None:
        table = self.query_one(DataTable)
        table.clear(columns=True)
        for key, label, width in COLUMNS:
            table.add_column(self._column_label(key, label), key=key, width=width)
        for record in records:
            table.add_row(
                str(record.pub_date),
                record.title,
                record.language or "",
                ", ".join(record.tags),
                self._clip_text(record.description or ""),
                key=record.slug,
            )

    def _column_label(self, key: str, label: str) -> str:
        sort_state = self.state.view.sort_state
        if sort_state is None or sort_state.field != key:
            return label
        mark = SORT_ASC_MARK if sort_state.direction is SortDirection.ASC else SORT_DESC_MARK
        return f"{label}{mark}"

    def _refresh_facet_buttons(self) -> None:
        filter_state = self.state.view.filter_state
        for button in self.query(FacetButton):
            if button.kind == "tag":
                selected = button.value in filter_state.tags
            else:
                selected = button.value == filter_state.facet
            button.set_class(selected, "selected")

    def _refresh_detail(self) -> None:
        detail = self.query_one(".record-detail", Static)
        slug = self.state.expand.expanded
        record = self._record_by_slug(slug) if slug else None
        if record is None:
            detail.update("")
            detail.display = False
            return
        detail.display = True
        detail.update(self._detail_text(record))

    def _refresh_copy_status(self) -> None:
        copied = self.state.copy_feedback.copied
        status = self.query_one(".copy-status", Static)
        status.update(f"copied: {copied}" if copied else "")

    def _cursor_slug(self) -> Optional[str]:
        table = self.query_one(DataTable)
        if table.row_count == 0:
            return None
        row_key, _ = table.coordinate_to_cell_key(table.cursor_coordinate)
        return row_key.value

    def _record_by_slug(self, slug: str) -> Optional[Record]:
        for record in self.state.view.records:
            if record.slug == slug:
                return record
        return None

    @staticmethod
    def _detail_text(record: Record) -> Text:
        lines = [
            Text(record.title, style="bold"),
            Text(record.path, style="dim"),
            Text(f"published {record.pub_date}"),
        ]
        if record.updated_date is not None:
            lines.append(Text(f"updated {record.updated_date}"))
        if record.reading_time:
            lines.append(Text(record.reading_time))
        if record.description:
            lines.extend([Text(""), Text(record.description)])
        return Text("\n").join(lines)

    @staticmethod
    def _clip_text(value: str, limit: int = DESCRIPTION_CLIP) -> str:
        if len(value) <= limit:
            return value
        return value[: limit - 3] + "..."
