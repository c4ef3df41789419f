from __future__ import annotations

import datetime as dt
import re

META_KEYS = ("title:", "date:", "description:", "collection:")
DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
TAG_RE = re.compile(r"<[^>]*>")
SPACE_RE = re.compile(r"\s+")
WORDS_PER_MINUTE = 200

# Source files may hold bytes that are not valid UTF-8; they are carried
# through as surrogates and written back unchanged.
SOURCE_ENCODING = "utf-8"
SOURCE_ERRORS = "surrogateescape"


def split_lines(text: str) -> list[str]:
    return text.split("\n")


def extract_meta(lines: list[str], key: str) -> str:
    """Return the value of the first ``<!-- key: value -->`` line, or ""."""
    prefix = f"<!-- {key}: "
    for line in lines:
        if line.startswith(prefix):
            return line[len(prefix) :].removesuffix(" -->").strip()
    return ""


def extract_content(lines: list[str]) -> str:
    # Any comment line mentioning a reserved key is dropped, even mid-sentence.
    kept = []
    for line in lines:
        if line.startswith("<!--") and any(key in line for key in META_KEYS):
            continue
        kept.append(line)
    return "\n".join(kept)


def strip_html(text: str) -> str:
    text = TAG_RE.sub("", text)
    return SPACE_RE.sub(" ", text).strip()


def count_words(text: str) -> int:
    return len(text.split())


def reading_time(text: str) -> int:
    return int(max(count_words(text) / WORDS_PER_MINUTE, 1.0))


def parse_raw_date(raw: str) -> dt.date | None:
    if not DATE_RE.match(raw):
        return None
    try:
        return dt.datetime.strptime(raw, "%Y-%m-%d").date()
    except ValueError:
        return None


def format_date(raw: str) -> str:
    value = parse_raw_date(raw)
    if value is None:
        return raw
    return f"{value:%B} {value.day}, {value.year}"


def today_raw_date() -> str:
    return dt.date.today().isoformat()
