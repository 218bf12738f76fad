"""Sort state and record ordering (core domain)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import cmp_to_key
from typing import Iterable, List

from core.models import Record


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


SORTABLE_FIELDS = ("title", "slug", "collection", "language", "description", "date")


def _validate_field(field: str) -> str:
    if field not in SORTABLE_FIELDS:
        raise ValueError(f"Unsupported sort field: {field}")
    return field


@dataclass(frozen=True)
class SortState:
    """Active sort column and direction for a table view."""

    field: str = "title"
    direction: SortDirection = SortDirection.ASC

    def __post_init__(self) -> None:
        _validate_field(self.field)

    def toggle(self, field: str) -> "SortState":
        """Header click: flip the active field, or switch to a new one ascending."""

        if field == self.field:
            return SortState(field=field, direction=self.direction.flipped())
        return SortState(field=_validate_field(field), direction=SortDirection.ASC)


def sort_key(record: Record, field: str) -> str:
    if field == "date":
        value = record.pub_date
    else:
        value = getattr(record, _validate_field(field))
    if value is None:
        return ""
    return str(value).lower()


def compare(a: Record, b: Record, field: str, direction: SortDirection) -> int:
    """Case-insensitive three-way comparison; descending is the exact inverse."""

    a_val = sort_key(a, field)
    b_val = sort_key(b, field)
    if a_val == b_val:
        return 0
    result = -1 if a_val < b_val else 1
    if direction is SortDirection.DESC:
        return -result
    return result


def sort_records(records: Iterable[Record], state: SortState) -> List[Record]:
    """Sort records by the active field; equal keys keep their prior order."""

    # sorted() is stable, so ties fall back to the incoming order.
    return sorted(
        records,
        key=cmp_to_key(lambda a, b: compare(a, b, state.field, state.direction)),
    )
