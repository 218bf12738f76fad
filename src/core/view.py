"""Collection view orchestration.

This module is integration-agnostic. It owns the filter and sort state for a
single view and recomputes the visible records on demand after each change,
so any frontend can drive it with plain method calls.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from core.facets import FacetIndex, build_facet_index
from core.filters import FilterState, apply_filters
from core.models import Record
from core.sorting import SortState, sort_records

LOGGER = logging.getLogger(__name__)

_NOUNS = {"posts": "post", "notes": "note"}


class CollectionView:
    """Filter -> sort pipeline for one collection snapshot."""

    def __init__(
        self,
        records: Iterable[Record],
        sort_state: Optional[SortState] = None,
        noun: str = "post",
    ) -> None:
        self._noun = noun
        self._sort: Optional[SortState] = sort_state
        self._filter = FilterState()
        self.replace_records(records)

    @classmethod
    def for_collection(
        cls,
        records: Iterable[Record],
        collection: str,
        sort_state: Optional[SortState] = None,
    ) -> "CollectionView":
        selected = [record for record in records if record.collection == collection]
        return cls(selected, sort_state=sort_state, noun=_NOUNS.get(collection, "item"))

    def replace_records(self, records: Iterable[Record]) -> None:
        """Swap in a new snapshot; the facet index is rebuilt only here."""

        self._records: List[Record] = list(records)
        self._facets = build_facet_index(self._records)
        LOGGER.debug(
            "View loaded %s records (%s tags, %s languages)",
            len(self._records),
            len(self._facets.tags),
            len(self._facets.facets),
        )

    @property
    def records(self) -> List[Record]:
        return list(self._records)

    @property
    def facets(self) -> FacetIndex:
        return self._facets

    @property
    def filter_state(self) -> FilterState:
        return self._filter

    @property
    def sort_state(self) -> Optional[SortState]:
        return self._sort

    def set_query(self, query: str) -> None:
        self._filter = self._filter.with_query(query)

    def toggle_tag(self, tag: str) -> None:
        self._filter = self._filter.toggle_tag(tag)

    def select_facet(self, facet: Optional[str]) -> None:
        self._filter = self._filter.select_facet(facet)

    def reset_filters(self) -> None:
        self._filter = self._filter.reset()

    def sort_by(self, field: str) -> SortState:
        """Apply a header click; an unsorted view starts ascending on ``field``."""

        if self._sort is None:
            self._sort = SortState(field=field)
        else:
            self._sort = self._sort.toggle(field)
        return self._sort

    def visible(self) -> List[Record]:
        filtered = apply_filters(self._records, self._filter)
        if self._sort is None:
            return filtered
        return sort_records(filtered, self._sort)

    def visible_slugs(self) -> List[str]:
        return [record.slug for record in self.visible()]

    def result_label(self, count: Optional[int] = None) -> str:
        if count is None:
            count = len(self.visible())
        suffix = "" if count == 1 else "s"
        return f"{count} {self._noun}{suffix} found"
