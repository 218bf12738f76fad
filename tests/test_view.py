from __future__ import annotations

from datetime import date

from core.models import Record
from core.sorting import SortDirection, SortState
from core.view import CollectionView


def _make_record(
    slug: str,
    title: str,
    collection: str = "notes",
    tags: tuple[str, ...] = (),
    language: str | None = None,
) -> Record:
    return Record(
        slug=slug,
        title=title,
        pub_date=date(2024, 1, 1),
        collection=collection,
        tags=tags,
        language=language,
    )


RECORDS = [
    _make_record("streams", "Java Streams", tags=("java",), language="Java"),
    _make_record("coroutines", "coroutines basics", tags=("kotlin",), language="Kotlin"),
    _make_record("records", "Records", tags=("java", "records"), language="Java"),
    _make_record("lombok-tips", "Lombok Tips", collection="posts", tags=("java", "lombok")),
]


def test_for_collection_selects_only_that_collection() -> None:
    view = CollectionView.for_collection(RECORDS, "notes")
    assert view.visible_slugs() == ["streams", "coroutines", "records"]
    assert view.facets.tags == ("java", "kotlin", "records")
    assert view.facets.facets == ("Java", "Kotlin")


def test_filters_apply_in_sequence_and_reset() -> None:
    view = CollectionView.for_collection(RECORDS, "notes")
    view.select_facet("Java")
    assert view.visible_slugs() == ["streams", "records"]
    view.toggle_tag("records")
    assert view.visible_slugs() == ["records"]
    view.set_query("streams")
    assert view.visible_slugs() == []
    assert view.result_label() == "0 notes found"

    view.reset_filters()
    assert not view.filter_state.is_active
    assert view.visible_slugs() == ["streams", "coroutines", "records"]


def test_sort_by_header_clicks() -> None:
    view = CollectionView.for_collection(RECORDS, "notes")
    assert view.sort_state is None
    view.sort_by("title")
    assert view.visible_slugs() == ["coroutines", "streams", "records"]
    state = view.sort_by("title")
    assert state.direction is SortDirection.DESC
    assert view.visible_slugs() == ["records", "streams", "coroutines"]


def test_sort_applies_after_filter() -> None:
    view = CollectionView.for_collection(RECORDS, "notes", sort_state=SortState(field="title"))
    view.set_query("java")
    assert view.visible_slugs() == ["streams", "records"]


def test_result_label_singular() -> None:
    view = CollectionView.for_collection(RECORDS, "posts")
    assert view.result_label() == "1 post found"


def test_facets_are_not_rebuilt_by_filtering() -> None:
    view = CollectionView.for_collection(RECORDS, "notes")
    before = view.facets
    view.set_query("kotlin")
    assert view.facets is before
    view.replace_records(RECORDS[:1])
    assert view.facets.tags == ("java",)
