from __future__ import annotations

from datetime import date

import pytest

from core.models import Record
from core.sorting import SortDirection, SortState, compare, sort_records


def _make_record(slug: str, title: str, language: str | None = None) -> Record:
    return Record(slug=slug, title=title, pub_date=date(2024, 1, 1), language=language)


def test_sort_is_case_insensitive() -> None:
    records = [_make_record("b", "beta"), _make_record("a", "Alpha"), _make_record("c", "Charlie")]
    result = sort_records(records, SortState(field="title"))
    assert [r.slug for r in result] == ["a", "b", "c"]


def test_descending_is_inverse() -> None:
    a = _make_record("a", "Alpha")
    b = _make_record("b", "beta")
    assert compare(a, b, "title", SortDirection.ASC) == -1
    assert compare(a, b, "title", SortDirection.DESC) == 1
    assert compare(a, a, "title", SortDirection.DESC) == 0


def test_equal_keys_keep_prior_order() -> None:
    records = [
        _make_record("first", "Same"),
        _make_record("second", "same"),
        _make_record("third", "SAME"),
    ]
    for direction in (SortDirection.ASC, SortDirection.DESC):
        result = sort_records(records, SortState(field="title", direction=direction))
        assert [r.slug for r in result] == ["first", "second", "third"]


def test_missing_values_sort_first_ascending() -> None:
    records = [_make_record("a", "A", language="Java"), _make_record("b", "B")]
    result = sort_records(records, SortState(field="language"))
    assert [r.slug for r in result] == ["b", "a"]


def test_toggle_rules() -> None:
    state = SortState(field="title")
    flipped = state.toggle("title")
    assert flipped == SortState(field="title", direction=SortDirection.DESC)
    switched = flipped.toggle("language")
    assert switched == SortState(field="language", direction=SortDirection.ASC)


def test_double_toggle_restores_ascending_order() -> None:
    records = [_make_record("c", "Charlie"), _make_record("a", "Alpha"), _make_record("b", "Beta")]
    state = SortState(field="title")
    ascending = sort_records(records, state)
    assert sort_records(records, state.toggle("title").toggle("title")) == ascending
    assert sort_records(records, state.toggle("title")) == list(reversed(ascending))


def test_unknown_field_is_rejected() -> None:
    with pytest.raises(ValueError):
        SortState(field="tags")
    with pytest.raises(ValueError):
        SortState().toggle("nope")
