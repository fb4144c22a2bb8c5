"""Configuration defaults and .env loading.

WHY: The CLI flags have defaults that users may want to change per
machine or per shell session (e.g. always encode punctuation) without
typing the flag every time. Keeping those defaults in one module makes
them easy to find and override.

HOW: python-dotenv loads a .env file on import. Each default is read
from an environment variable with a fallback. Parsing helpers turn the
raw strings into booleans, integers and logging levels.

RULES:
- MORSENCODE_EXTENDED defaults to true, MORSENCODE_PUNCTUATION to false
- Booleans: "1", "true", "yes", "on" (any case) are true, anything else false
- MORSENCODE_CHUNK_SIZE must be a positive integer; otherwise ValueError
- MORSENCODE_LOG_LEVEL is a logging level name; unknown names fall back to WARNING
- Command-line flags always win over these defaults
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from dotenv import load_dotenv

# Load .env from the directory the command is run from
load_dotenv()

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})

DEFAULT_CHUNK_SIZE = 4096
DEFAULT_LOG_LEVEL = "WARNING"


def parse_bool(value: Optional[str], default: bool) -> bool:
    """Interpret an environment string as a boolean.

    Unset (None) or blank values return ``default``.
    """
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUE_VALUES


def load_extended() -> bool:
    return parse_bool(os.getenv("MORSENCODE_EXTENDED"), True)


def load_punctuation() -> bool:
    return parse_bool(os.getenv("MORSENCODE_PUNCTUATION"), False)


def load_chunk_size() -> int:
    """Read the stdin chunk size used by the CLI.

    RULES:
    - Unset or blank → DEFAULT_CHUNK_SIZE
    - Raises ValueError for non-integers and values below 1
    """
    raw = os.getenv("MORSENCODE_CHUNK_SIZE", "").strip()
    if not raw:
        return DEFAULT_CHUNK_SIZE
    try:
        size = int(raw)
    except ValueError:
        raise ValueError(
            "MORSENCODE_CHUNK_SIZE must be an integer, got {!r}".format(raw)
        ) from None
    if size < 1:
        raise ValueError(
            "MORSENCODE_CHUNK_SIZE must be at least 1, got {}".format(size)
        )
    return size


def load_log_level() -> int:
    name = os.getenv("MORSENCODE_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level
    return logging.WARNING
