from __future__ import annotations

import pytest

from core.metadata import (
    build_content_dates,
    estimate_reading_time,
    extract_content_date,
    markdown_to_text,
    reading_time_for_markdown,
    split_front_matter,
)

PUB_ONLY = """---
title: Lombok Tips
pubDate: 2024-03-01
tags: [java, lombok]
---
Body text.
"""

BOTH_DATES = """---
title: DynamoDB Exists
pubDate: 2024-03-01
updatedDate: 2024-05-10
---
Body text.
"""


def test_split_front_matter() -> None:
    front_matter, body = split_front_matter(PUB_ONLY)
    assert front_matter is not None
    assert "pubDate: 2024-03-01" in front_matter
    assert body.strip() == "Body text."


def test_split_front_matter_accepts_crlf() -> None:
    front_matter, body = split_front_matter(PUB_ONLY.replace("\n", "\r\n"))
    assert front_matter is not None
    assert "title: Lombok Tips" in front_matter
    assert body.strip() == "Body text."


def test_split_without_front_matter() -> None:
    front_matter, body = split_front_matter("# Just a heading\n")
    assert front_matter is None
    assert body == "# Just a heading\n"


def test_publish_date_used_when_no_update() -> None:
    front_matter, _ = split_front_matter(PUB_ONLY)
    assert extract_content_date(front_matter) == "2024-03-01"


def test_update_date_wins() -> None:
    front_matter, _ = split_front_matter(BOTH_DATES)
    assert extract_content_date(front_matter) == "2024-05-10"


def test_empty_quoted_update_date_falls_back_to_publish_date() -> None:
    front_matter = "title: X\npubDate: 2024-01-01\nupdatedDate: \"\"\n"
    assert extract_content_date(front_matter) == "2024-01-01"
    assert extract_content_date("title: X\nupdatedDate: ''\n") is None

    documents = [("posts", "x.md", "---\n" + front_matter + "---\nbody\n")]
    assert build_content_dates(documents)["/posts/x/"].date == "2024-01-01"


def test_no_date_is_absent_not_error() -> None:
    assert extract_content_date("title: Undated") is None


def test_dates_are_literal() -> None:
    assert extract_content_date("pubDate: 2024-02-31") == "2024-02-31"
    assert extract_content_date("pubDate: '2024-01-05'") == "2024-01-05"


def test_build_content_dates_keys_by_public_path() -> None:
    documents = [
        ("posts", "lombok-tips.md", PUB_ONLY),
        ("notes", "dynamodb-exists.mdx", BOTH_DATES),
        ("notes", "undated.md", "---\ntitle: Undated\n---\nbody"),
        ("posts", "bare.md", "no front matter"),
    ]
    dates = build_content_dates(documents)
    assert set(dates) == {"/posts/lombok-tips/", "/notes/dynamodb-exists/"}
    assert dates["/posts/lombok-tips/"].date == "2024-03-01"
    assert dates["/notes/dynamodb-exists/"].date == "2024-05-10"
    assert dates["/notes/dynamodb-exists/"].collection == "notes"
    assert dates["/notes/dynamodb-exists/"].slug == "dynamodb-exists"


def test_reading_time_for_400_words() -> None:
    text = " ".join(["word"] * 400)
    estimate = estimate_reading_time(text, words_per_minute=200)
    assert estimate.words == 400
    assert estimate.text == "2 min read"


def test_reading_time_rounds_up_partial_minutes() -> None:
    text = " ".join(["word"] * 250)
    assert estimate_reading_time(text).text == "2 min read"


def test_reading_time_for_empty_text() -> None:
    assert estimate_reading_time("").text == "0 min read"


def test_reading_time_rejects_bad_rate() -> None:
    with pytest.raises(ValueError):
        estimate_reading_time("word", words_per_minute=0)


def test_markdown_is_stripped_to_text() -> None:
    text = markdown_to_text("# Title\n\nSome **bold** text with a [link](https://example.com).\n")
    assert "**" not in text
    assert "#" not in text
    assert "https://example.com" not in text
    assert "bold" in text
    assert "link" in text


def test_reading_time_counts_markdown_words_only() -> None:
    body = "## Heading\n\n" + " ".join(["**word**"] * 399)
    assert reading_time_for_markdown(body, 200).words == 400
