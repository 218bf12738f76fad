"""Core domain models.

These dataclasses are shared across the core and adapters to avoid tight
coupling to any loader- or UI-specific types.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Tuple, Union

DateValue = Union[date, str]


@dataclass(frozen=True)
class Record:
    """A single post or note as seen by the search and filter core."""

    slug: str
    title: str
    pub_date: DateValue
    collection: str = "posts"
    description: Optional[str] = None
    updated_date: Optional[DateValue] = None
    tags: Tuple[str, ...] = field(default_factory=tuple)
    language: Optional[str] = None
    draft: bool = False
    reading_time: Optional[str] = None

    @property
    def freshness_date(self) -> DateValue:
        """Date used for freshness metadata; an update beats the publish date."""

        if self.updated_date is not None:
            return self.updated_date
        return self.pub_date

    @property
    def path(self) -> str:
        return public_path(self.collection, self.slug)


@dataclass(frozen=True)
class ContentDate:
    """One entry of the freshness map consumed by sitemap generation."""

    path: str
    collection: str
    slug: str
    date: str


@dataclass(frozen=True)
class FeedItem:
    """Data for one feed entry; XML emission happens elsewhere."""

    title: str
    description: Optional[str]
    pub_date: DateValue
    link: str
    categories: Tuple[str, ...]


def public_path(collection: str, slug: str) -> str:
    """Return the public page path for a record, e.g. ``/notes/lombok/``."""

    return f"/{collection}/{slug}/"
