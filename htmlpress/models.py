from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TocItem:
    id: str
    text: str
    level: int


@dataclass(frozen=True)
class Post:
    slug: str
    title: str
    date: str
    raw_date: str
    content: str
    description: str = ""
    collection: str = ""
    collection_title: str = ""
    collection_description: str = ""
    collection_index: int = 0
    collection_total: int = 0
    read_time_minutes: int = 1
    toc: tuple[TocItem, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Collection:
    slug: str
    title: str
    description: str = ""
    description_text: str = ""
    posts: tuple[Post, ...] = field(default_factory=tuple)
