"""Shared constants for the Textual UI."""

from __future__ import annotations

ACCENT = "#4F8EF7"
SORT_ASC_MARK = " ▲"
SORT_DESC_MARK = " ▼"
DESCRIPTION_CLIP = 60
