"""Tests for the text helpers shared by the extractor and the request layer."""

from cv_insight.utils.helpers import find_catalog_keywords, ordered_unique, parse_int_prefix, trim_text


def test_trim_text_removes_whitespace_and_byte_order_marks():
    assert trim_text("\ufeff  Jane Doe \xa0\n") == "Jane Doe"
    assert trim_text(" \ufeff \ufeff ") == ""
    assert trim_text("a\ufeffb") == "a\ufeffb"


def test_find_catalog_keywords_follows_catalog_order():
    assert find_catalog_keywords("react then python", ("Python", "React")) == ["Python", "React"]
    assert find_catalog_keywords("", ("Python",)) == []


def test_ordered_unique():
    assert ordered_unique(["b", "a", "b"]) == ["b", "a"]


def test_parse_int_prefix():
    assert parse_int_prefix("12abc") == 12
    assert parse_int_prefix(" -3") == -3
    assert parse_int_prefix(7.9) == 7
    assert parse_int_prefix("abc") is None
    assert parse_int_prefix(True) is None
    assert parse_int_prefix(None) is None
