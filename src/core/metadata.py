"""Build-time metadata derivation (core domain).

Freshness dates are pulled from raw front matter text so the sitemap can be
fed without a full YAML parse, and reading time is estimated from the plain
text of a Markdown body.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

import markdown
from bs4 import BeautifulSoup

from core.config import DEFAULT_WORDS_PER_MINUTE
from core.models import ContentDate, public_path

FRONT_MATTER_RE = re.compile(r"\A---\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|\Z)", re.DOTALL)
UPDATED_DATE_RE = re.compile(r"^[ \t]*updatedDate:[ \t]*(\S+)", re.MULTILINE)
PUB_DATE_RE = re.compile(r"^[ \t]*pubDate:[ \t]*(\S+)", re.MULTILINE)
CONTENT_SUFFIX_RE = re.compile(r"\.(md|mdx)$")

MARKDOWN_EXTENSIONS = ["fenced_code", "tables"]


@dataclass(frozen=True)
class ReadingTime:
    """Reading-time estimate for one document."""

    words: int
    minutes: float
    text: str


def split_front_matter(text: str) -> Tuple[Optional[str], str]:
    """Split a document into (front matter, body).

    Front matter is the block between a leading ``---`` line and the next
    ``---`` line. Documents without it return ``None`` and the full text.
    """

    clean_text = text.lstrip("\ufeff")
    match = FRONT_MATTER_RE.match(clean_text)
    if not match:
        return None, text
    return match.group(1), clean_text[match.end():]


def _literal(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"":
        return value[1:-1]
    return value


def extract_content_date(front_matter: str) -> Optional[str]:
    """Return the update date if present, else the publish date, else None.

    The value is returned as written; calendar correctness is not checked.
    """

    for pattern in (UPDATED_DATE_RE, PUB_DATE_RE):
        match = pattern.search(front_matter)
        if match:
            value = _literal(match.group(1))
            # A quoted empty value counts as absent.
            if value:
                return value
    return None


def slug_from_filename(filename: str) -> str:
    return CONTENT_SUFFIX_RE.sub("", filename)


def build_content_dates(documents: Iterable[Tuple[str, str, str]]) -> dict[str, ContentDate]:
    """Build the freshness map keyed by public path.

    ``documents`` yields ``(collection, filename, raw_text)``. Documents with
    no front matter or no date field are left out of the map.
    """

    dates: dict[str, ContentDate] = {}
    for collection, filename, text in documents:
        front_matter, _ = split_front_matter(text)
        if front_matter is None:
            continue
        value = extract_content_date(front_matter)
        if value is None:
            continue
        slug = slug_from_filename(filename)
        path = public_path(collection, slug)
        dates[path] = ContentDate(path=path, collection=collection, slug=slug, date=value)
    return dates


def markdown_to_text(body: str) -> str:
    """Render Markdown and keep only its text content."""

    html = markdown.markdown(body, extensions=MARKDOWN_EXTENSIONS)
    return BeautifulSoup(html, "html.parser").get_text(" ", strip=True)


def count_words(text: str) -> int:
    return len(text.split())


def estimate_reading_time(text: str, words_per_minute: int = DEFAULT_WORDS_PER_MINUTE) -> ReadingTime:
    """Estimate reading time for plain text, e.g. ``"2 min read"``."""

    if words_per_minute <= 0:
        raise ValueError(f"words_per_minute must be positive, got {words_per_minute}")
    words = count_words(text)
    minutes = words / words_per_minute
    # Rounding first keeps 2.0000001 from displaying as 3 minutes.
    displayed = math.ceil(round(minutes, 2))
    return ReadingTime(words=words, minutes=minutes, text=f"{displayed} min read")


def reading_time_for_markdown(body: str, words_per_minute: int = DEFAULT_WORDS_PER_MINUTE) -> ReadingTime:
    return estimate_reading_time(markdown_to_text(body), words_per_minute)
