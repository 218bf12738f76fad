"""Application entry point for contentscope."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from art import tprint

import settings
from adapters.markdown_loader import load_content_dates, load_records
from core.config import ReadingConfig
from core.models import Record
from core.sorting import SORTABLE_FIELDS, SortDirection, SortState
from core.view import CollectionView

NAME = "CONTENTSCOPE"
FONT = "tarty-1"


def _print_banner() -> None:
    tprint(NAME, FONT, space=1)


def _configure_logging() -> None:
    config = settings.LOGGING or {}
    if not config.get("enabled", False):
        return

    level_name = str(config.get("level", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

    handlers: list[logging.Handler] = []

    if config.get("console", True):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    file_cfg = config.get("file", {})
    if file_cfg.get("enabled", False):
        path = file_cfg.get("path", "logs/contentscope.log")
        if not os.path.isabs(path):
            path = os.path.join(settings.PROJECT_ROOT, path)
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        max_bytes = int(file_cfg.get("max_bytes", 5 * 1024 * 1024))
        backup_count = int(file_cfg.get("backup_count", 5))
        file_handler = RotatingFileHandler(
            path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if not handlers:
        return

    logging.basicConfig(level=level, handlers=handlers)


def _content_dir() -> Path:
    content_dir = Path(settings.CONTENT_DIR)
    if not content_dir.is_dir():
        raise SystemExit(f"Content directory not found: {content_dir}")
    return content_dir


def _load() -> list[Record]:
    return load_records(
        _content_dir(),
        settings.COLLECTIONS,
        ReadingConfig(words_per_minute=settings.WORDS_PER_MINUTE),
    )


def _browse() -> None:
    _print_banner()
    from frontend.app import ContentBrowserApp

    ContentBrowserApp(records=_load()).run()


def _search(args: argparse.Namespace) -> None:
    sort_state = None
    if args.sort:
        direction = SortDirection.DESC if args.desc else SortDirection.ASC
        sort_state = SortState(field=args.sort, direction=direction)
    view = CollectionView.for_collection(_load(), args.collection, sort_state=sort_state)
    view.set_query(args.query or "")
    for tag in args.tag or []:
        view.toggle_tag(tag)
    if args.language:
        view.select_facet(args.language)

    visible = view.visible()
    for record in visible:
        tags = ", ".join(record.tags)
        language = f" [{record.language}]" if record.language else ""
        print(f"{record.pub_date} | {record.slug} | {record.title}{language} | {tags} | {record.reading_time}")
    print(view.result_label(len(visible)))


def _dates() -> None:
    dates = load_content_dates(_content_dir(), settings.COLLECTIONS)
    payload = {path: entry.date for path, entry in sorted(dates.items())}
    json.dump(payload, sys.stdout, indent=2, ensure_ascii=True)
    print()


def _facets(args: argparse.Namespace) -> None:
    view = CollectionView.for_collection(_load(), args.collection)
    print("tags: " + ", ".join(view.facets.tags))
    print("languages: " + ", ".join(view.facets.facets))


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(prog="contentscope")
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("browse", help="Launch the content browser TUI")

    search = subparsers.add_parser("search", help="Filter a collection and print the matches")
    search.add_argument("--collection", default="posts")
    search.add_argument("--query", "-q", default="")
    search.add_argument("--tag", "-t", action="append", help="Required tag (repeatable)")
    search.add_argument("--language", "-l")
    search.add_argument("--sort", choices=SORTABLE_FIELDS)
    search.add_argument("--desc", action="store_true", help="Sort descending")

    subparsers.add_parser("dates", help="Print the sitemap freshness map as JSON")

    facets = subparsers.add_parser("facets", help="List tags and languages of a collection")
    facets.add_argument("--collection", default="posts")

    args = parser.parse_args(argv)
    _configure_logging()
    logger = logging.getLogger(__name__)
    logger.info("Starting contentscope (%s)", args.command or "browse")

    if args.command == "search":
        _search(args)
        return
    if args.command == "dates":
        _dates()
        return
    if args.command == "facets":
        _facets(args)
        return
    _browse()


if __name__ == "__main__":
    main()
