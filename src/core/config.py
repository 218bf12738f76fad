"""Core configuration dataclasses.

We keep config parsing outside the core, but these dataclasses define the
shape the core expects so adapters and app layers can build safely.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_WORDS_PER_MINUTE = 200
DEFAULT_COPY_FEEDBACK_SECONDS = 2.0


@dataclass(frozen=True)
class ReadingConfig:
    """Reading-time estimation settings."""

    words_per_minute: int = DEFAULT_WORDS_PER_MINUTE

