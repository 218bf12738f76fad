"""Feed and sitemap data helpers.

Only the data is derived here; XML emission belongs to whatever renders the
feed or sitemap.
"""

from __future__ import annotations

from typing import Iterable, List, Mapping, Optional
from urllib.parse import urlparse

from core.models import ContentDate, FeedItem, Record


def build_feed_items(records: Iterable[Record], collection: str = "posts") -> List[FeedItem]:
    """Return feed entries for one collection, newest publish date first."""

    selected = [record for record in records if record.collection == collection]
    # Equal dates keep their loading order because sorted() is stable.
    selected = sorted(selected, key=lambda record: str(record.pub_date), reverse=True)
    return [
        FeedItem(
            title=record.title,
            description=record.description,
            pub_date=record.pub_date,
            link=record.path,
            categories=tuple(record.tags),
        )
        for record in selected
    ]


def lastmod_for(url: str, content_dates: Mapping[str, ContentDate]) -> Optional[str]:
    """Look up a sitemap page's lastmod by URL pathname."""

    path = urlparse(url).path or "/"
    entry = content_dates.get(path)
    if entry is None:
        return None
    return entry.date
