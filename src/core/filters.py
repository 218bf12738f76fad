"""Filter state and per-record matching (core domain)."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import FrozenSet, Iterable, List, Optional

from core.models import Record


@dataclass(frozen=True)
class FilterState:
    """User-entered criteria for one view.

    Every transition returns a new state so a view can swap it in one step.
    """

    query: str = ""
    tags: FrozenSet[str] = field(default_factory=frozenset)
    facet: Optional[str] = None

    @property
    def is_active(self) -> bool:
        return bool(normalize_query(self.query)) or bool(self.tags) or self.facet is not None

    def with_query(self, query: str) -> "FilterState":
        return replace(self, query=query)

    def toggle_tag(self, tag: str) -> "FilterState":
        if tag in self.tags:
            return replace(self, tags=self.tags - {tag})
        return replace(self, tags=self.tags | {tag})

    def select_facet(self, facet: Optional[str]) -> "FilterState":
        """Select a facet value; picking the current one clears it."""

        if facet == self.facet:
            return replace(self, facet=None)
        return replace(self, facet=facet or None)

    def reset(self) -> "FilterState":
        return FilterState()


def normalize_query(query: str) -> str:
    return query.strip().lower()


def matches_text(record: Record, query: str) -> bool:
    """Case-insensitive substring match on title, description, and tags."""

    needle = normalize_query(query)
    if not needle:
        return True
    if needle in record.title.lower():
        return True
    if needle in (record.description or "").lower():
        return True
    return any(needle in tag.lower() for tag in record.tags)


def matches_tags(record: Record, tags: Iterable[str]) -> bool:
    """Every selected tag must be present, compared literally."""

    return all(tag in record.tags for tag in tags)


def matches_facet(record: Record, facet: Optional[str]) -> bool:
    if facet is None:
        return True
    return record.language == facet


def matches(record: Record, state: FilterState) -> bool:
    """Return True when the record satisfies text, tag, and facet criteria."""

    return (
        matches_text(record, state.query)
        and matches_tags(record, state.tags)
        and matches_facet(record, state.facet)
    )


def apply_filters(records: Iterable[Record], state: FilterState) -> List[Record]:
    """Filter records, keeping their original relative order."""

    return [record for record in records if matches(record, state)]
