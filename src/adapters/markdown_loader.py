"""Markdown content loader.

Reads ``<content_dir>/<collection>/*.md(x)`` files into core Records. Drafts
are dropped here so the core never sees them.
"""

from __future__ import annotations

import logging
import re
from dataclasses import replace
from datetime import date, datetime
from pathlib import Path
from typing import Any, Iterable, Iterator, List, Optional, Tuple

import yaml

from core.config import ReadingConfig
from core.metadata import (
    build_content_dates,
    reading_time_for_markdown,
    slug_from_filename,
    split_front_matter,
)
from core.models import ContentDate, Record

LOGGER = logging.getLogger(__name__)

CONTENT_SUFFIXES = (".md", ".mdx")
TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"
ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}(?:$|[Tt ])")


class ContentError(ValueError):
    """Raised when a content document cannot be turned into a Record."""


def iter_documents(content_dir: Path, collections: Iterable[str]) -> Iterator[Tuple[str, str, str]]:
    """Yield ``(collection, filename, text)`` for every content file."""

    for collection in collections:
        directory = Path(content_dir) / collection
        if not directory.is_dir():
            LOGGER.debug("Skipping missing collection directory %s", directory)
            continue
        for path in sorted(directory.iterdir()):
            if path.suffix not in CONTENT_SUFFIXES or not path.is_file():
                continue
            yield collection, path.name, path.read_text(encoding="utf-8")


class _FrontMatterLoader(yaml.SafeLoader):
    """SafeLoader that leaves timestamps as plain strings."""


_FrontMatterLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def _as_date(value: Any, filename: str) -> Any:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    if not ISO_DATE_RE.match(text):
        return text
    try:
        if len(text) == 10:
            return date.fromisoformat(text)
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError as exc:
        raise ContentError(f"{filename}: invalid date {text!r}: {exc}") from exc


def _as_tags(value: Any, filename: str) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if isinstance(value, list):
        return tuple(str(tag) for tag in value if tag is not None)
    raise ContentError(f"{filename}: tags must be a list")


def parse_record(
    collection: str,
    filename: str,
    text: str,
    reading_config: Optional[ReadingConfig] = None,
) -> Record:
    """Parse one document's YAML front matter and body into a Record."""

    reading_config = reading_config or ReadingConfig()
    front_matter, body = split_front_matter(text)
    if front_matter is None:
        raise ContentError(f"{filename}: missing front matter")
    try:
        data = yaml.load(front_matter, Loader=_FrontMatterLoader) or {}
    except (yaml.YAMLError, ValueError) as exc:
        raise ContentError(f"{filename}: invalid front matter: {exc}") from exc
    if not isinstance(data, dict):
        raise ContentError(f"{filename}: front matter must be a mapping")

    title = str(data.get("title") or "").strip()
    if not title:
        raise ContentError(f"{filename}: title is required")
    pub_date = _as_date(data.get("pubDate"), filename)
    if pub_date is None:
        raise ContentError(f"{filename}: pubDate is required")

    description = data.get("description")
    language = data.get("language")
    record = Record(
        slug=slug_from_filename(filename),
        title=title,
        pub_date=pub_date,
        collection=collection,
        description=str(description) if description is not None else None,
        updated_date=_as_date(data.get("updatedDate"), filename),
        tags=_as_tags(data.get("tags"), filename),
        language=str(language) if language else None,
        draft=bool(data.get("draft", False)),
    )
    reading_time = reading_time_for_markdown(body, reading_config.words_per_minute)
    return replace(record, reading_time=reading_time.text)


def load_records(
    content_dir: Path,
    collections: Iterable[str],
    reading_config: Optional[ReadingConfig] = None,
) -> List[Record]:
    """Load every non-draft record; broken documents are logged and skipped."""

    records: List[Record] = []
    drafts = 0
    for collection, filename, text in iter_documents(content_dir, collections):
        try:
            record = parse_record(collection, filename, text, reading_config)
        except ContentError as exc:
            LOGGER.warning("Skipping %s/%s: %s", collection, filename, exc)
            continue
        if record.draft:
            drafts += 1
            continue
        records.append(record)
    LOGGER.info("Loaded %s records from %s (%s drafts skipped)", len(records), content_dir, drafts)
    return records


def load_content_dates(content_dir: Path, collections: Iterable[str]) -> dict[str, ContentDate]:
    """Build the sitemap freshness map straight from the raw files."""

    return build_content_dates(iter_documents(content_dir, collections))
