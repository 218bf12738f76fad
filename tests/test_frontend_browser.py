from __future__ import annotations

import asyncio
from datetime import date

from textual.widgets import DataTable, Input

from core.models import Record
from frontend.app import ContentBrowserApp
from frontend.tabs.collection import CollectionTab


def _make_record(slug: str, title: str, tags: tuple[str, ...]) -> Record:
    return Record(slug=slug, title=title, pub_date=date(2024, 1, 1), tags=tags)


RECORDS = [
    _make_record("lombok-tips", "Lombok Tips", ("java", "lombok")),
    _make_record("dynamodb-exists", "DynamoDB Exists", ("dynamodb", "java")),
]


def test_search_input_filters_table() -> None:
    async def _run() -> None:
        app = ContentBrowserApp(records=RECORDS, collections=["posts"])
        async with app.run_test() as pilot:
            tab = app.query(CollectionTab).first()
            table = tab.query_one(DataTable)
            assert table.row_count == 2

            tab.query_one(Input).value = "lombok"
            await pilot.pause()
            assert tab.state.view.visible_slugs() == ["lombok-tips"]
            assert table.row_count == 1

            tab.action_reset_filters()
            await pilot.pause()
            assert table.row_count == 2

    asyncio.run(_run())


def test_copy_action_sets_feedback() -> None:
    async def _run() -> None:
        app = ContentBrowserApp(records=RECORDS, collections=["posts"])
        async with app.run_test() as pilot:
            tab = app.query(CollectionTab).first()
            tab.action_copy_slug()
            await pilot.pause()
            # Default sort is by title, so DynamoDB comes first.
            assert tab.state.copy_feedback.copied == "dynamodb-exists"

    asyncio.run(_run())
