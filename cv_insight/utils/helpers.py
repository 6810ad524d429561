"""Helper utilities for keyword and pattern matching over CV text."""

import re
from typing import Iterable, List, Optional, Pattern

# JavaScript-style trim: Unicode whitespace plus U+FEFF
_TRIM_RE = re.compile(r"\A[\s\ufeff]+|[\s\ufeff]+\Z")


def trim_text(text: str) -> str:
    """Strip surrounding whitespace and byte-order marks (str.strip() keeps U+FEFF)."""
    return _TRIM_RE.sub("", text)


def first_match(pattern: Pattern[str], text: str) -> Optional[str]:
    """Return the first full match of a compiled pattern, or None."""
    if not text:
        return None
    m = pattern.search(text)
    return m.group(0) if m else None


def ordered_unique(items: Iterable[str]) -> List[str]:
    """Drop duplicates, keeping the first occurrence of each item."""
    return list(dict.fromkeys(items))


def find_catalog_keywords(text: str, catalog: Iterable[str]) -> List[str]:
    """
    Return catalog entries that occur in text as case-insensitive substrings.
    Order follows the catalog, not the position in text.
    """
    if not text:
        return []
    lower_text = text.lower()
    return ordered_unique(k for k in catalog if k.lower() in lower_text)


def parse_int_prefix(value: object) -> Optional[int]:
    """
    Parse a leading integer the way a lenient form parser would: '12abc' -> 12,
    ' -3' -> -3, 7.9 -> 7. Returns None when no integer can be read.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return None
        return int(value)
    if not isinstance(value, str):
        return None
    m = re.match(r"\s*([+-]?\d+)", value)
    return int(m.group(1)) if m else None
