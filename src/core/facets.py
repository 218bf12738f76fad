"""Facet index construction (core domain)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

from core.models import Record


@dataclass(frozen=True)
class FacetIndex:
    """Distinct tag and language values present in a collection."""

    tags: Tuple[str, ...] = ()
    facets: Tuple[str, ...] = ()


def build_facet_index(records: Iterable[Record]) -> FacetIndex:
    """Collect distinct tags and languages, sorted for stable display.

    Values are kept exactly as authored, so ``Java`` and ``java`` are two
    separate entries.
    """

    tags: set[str] = set()
    facets: set[str] = set()
    for record in records:
        tags.update(record.tags)
        if record.language:
            facets.add(record.language)
    return FacetIndex(tags=tuple(sorted(tags)), facets=tuple(sorted(facets)))
