"""Static configuration for contentscope.

All user-editable settings (content location, reading speed, UI feedback,
logging) live in a single JSON file for quick edits without touching Python.
"""

import json
import os

from dotenv import load_dotenv

from core.config import DEFAULT_COPY_FEEDBACK_SECONDS, DEFAULT_WORDS_PER_MINUTE

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

# .env lets a checkout point at another site without editing config.json.
load_dotenv(os.path.join(PROJECT_ROOT, ".env"))

CONFIG_PATH = os.getenv("CONTENTSCOPE_CONFIG") or os.path.join(PROJECT_ROOT, "config.json")


def _load_json_config() -> dict:
    """Load config.json with a flat, user-friendly schema."""

    if not os.path.exists(CONFIG_PATH):
        # Every key has a default, so a missing file is not fatal.
        return {}

    with open(CONFIG_PATH, "r", encoding="utf-8") as handle:
        return json.load(handle)


def _resolve_path(path: str) -> str:
    if os.path.isabs(path):
        return path
    return os.path.join(PROJECT_ROOT, path)


_CONFIG = _load_json_config()

# Expose the raw config for modules that need structured access.
CONFIG = _CONFIG

# Content lives in one directory per collection, e.g. src/content/posts.
_content = _CONFIG.get("content", {})
CONTENT_DIR = _resolve_path(os.getenv("CONTENTSCOPE_CONTENT_DIR") or _content.get("dir", "src/content"))
COLLECTIONS = list(_content.get("collections", ["posts", "notes"]))

# Reading-time heuristic.
_reading = _CONFIG.get("reading", {})
WORDS_PER_MINUTE = int(_reading.get("words_per_minute", DEFAULT_WORDS_PER_MINUTE))

# Terminal UI behaviour.
# - COPY_FEEDBACK_SECONDS: how long the "copied" marker stays visible
# - DEFAULT_SORT: column the table views start sorted by
_ui = _CONFIG.get("ui", {})
COPY_FEEDBACK_SECONDS = float(_ui.get("copy_feedback_seconds", DEFAULT_COPY_FEEDBACK_SECONDS))
DEFAULT_SORT = _ui.get("default_sort", "title")

# Logging configuration (optional).
LOGGING = _CONFIG.get("logging", {})
