from __future__ import annotations

import re

from .content import TAG_RE
from .models import TocItem

NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")
HEADING_RES = (
    (2, re.compile(r"<h2>(.*?)</h2>")),
    (3, re.compile(r"<h3>(.*?)</h3>")),
)


def generate_id(text: str) -> str:
    text = TAG_RE.sub("", text)
    text = text.lower().strip()
    text = NON_ALNUM_RE.sub("-", text)
    return text.strip("-")


def process_content_with_toc(content: str) -> tuple[str, list[TocItem]]:
    """Add ``id`` attributes to h2/h3 headings and collect the outline.

    All h2 headings are handled before any h3, so the outline lists every
    level-2 entry first. Headings spanning several lines are left untouched.
    Identical heading texts produce identical ids.
    """
    toc: list[TocItem] = []

    for level, pattern in HEADING_RES:

        def repl(match: re.Match, level: int = level) -> str:
            text = match.group(1)
            anchor = generate_id(text)
            toc.append(TocItem(id=anchor, text=text, level=level))
            return f'<h{level} id="{anchor}">{text}</h{level}>'

        content = pattern.sub(repl, content)

    return content, toc
