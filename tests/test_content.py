"""Tests for metadata extraction and text helpers."""

from htmlpress.content import (
    count_words,
    extract_content,
    extract_meta,
    format_date,
    parse_raw_date,
    reading_time,
    split_lines,
    strip_html,
)


def test_extract_meta_returns_value():
    lines = ["<!-- title: Foo -->", "<p>Body</p>"]
    assert extract_meta(lines, "title") == "Foo"


def test_extract_meta_missing_key_is_empty():
    assert extract_meta(["<p>Body</p>"], "title") == ""


def test_extract_meta_first_match_wins():
    lines = ["<!-- date: 2024-01-01 -->", "<!-- date: 2025-01-01 -->"]
    assert extract_meta(lines, "date") == "2024-01-01"


def test_extract_meta_tolerates_missing_closing_marker():
    assert extract_meta(["<!-- title: Open ended"], "title") == "Open ended"


def test_extract_meta_requires_exact_prefix():
    lines = ["  <!-- title: Indented -->", "<!--title: Tight -->"]
    assert extract_meta(lines, "title") == ""


def test_extract_content_drops_reserved_comment_lines():
    lines = [
        "<!-- title: T -->",
        "<p>one</p>",
        "<!-- collection: c -->",
        "<!-- keep me -->",
        "<p>two</p>",
        "<!-- date: 2024-01-01 -->",
        "<!-- description: d -->",
    ]
    assert extract_content(lines) == "<p>one</p>\n<!-- keep me -->\n<p>two</p>"


def test_extract_content_drops_comment_mentioning_key_mid_sentence():
    lines = ["<!-- note: see the title: below -->", "<p>x</p>"]
    assert extract_content(lines) == "<p>x</p>"


def test_extract_content_keeps_keys_outside_comments():
    lines = ["<p>title: not metadata</p>"]
    assert extract_content(lines) == "<p>title: not metadata</p>"


def test_split_lines_keeps_carriage_returns():
    assert split_lines("a\r\nb") == ["a\r", "b"]


def test_strip_html_collapses_whitespace():
    assert strip_html("<p>Hello\n  <b>big</b>\tworld</p>  ") == "Hello big world"


def test_count_words_counts_tags():
    assert count_words("<p>Hello world</p>") == 2
    assert count_words("<p> Hello world </p>") == 4


def test_reading_time():
    assert reading_time(" ".join(["word"] * 200)) == 1
    assert reading_time(" ".join(["word"] * 401)) == 2
    assert reading_time(" ".join(["word"] * 10)) == 1
    assert reading_time("") == 1


def test_parse_raw_date_is_strict():
    assert parse_raw_date("2024-03-05").isoformat() == "2024-03-05"
    assert parse_raw_date("2024-3-5") is None
    assert parse_raw_date("unknown") is None
    assert parse_raw_date("2024-02-30") is None


def test_format_date():
    assert format_date("2024-03-05") == "March 5, 2024"
    assert format_date("sometime") == "sometime"
