"""Utility exports."""

from .helpers import (
    find_catalog_keywords,
    first_match,
    ordered_unique,
    parse_int_prefix,
    trim_text,
)
from .logger import get_logger

__all__ = [
    "get_logger",
    "find_catalog_keywords",
    "first_match",
    "ordered_unique",
    "parse_int_prefix",
    "trim_text",
]
