from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator, Optional

from .content import (
    SOURCE_ENCODING,
    SOURCE_ERRORS,
    extract_content,
    extract_meta,
    format_date,
    reading_time,
    split_lines,
    strip_html,
    today_raw_date,
)
from .errors import NotFoundError, WalkError
from .models import Collection, Post
from .toc import process_content_with_toc

SOURCE_SUFFIX = ".html"


def _raise(exc: OSError) -> None:
    raise exc


def iter_source_files(root: Path, strict: bool = True) -> Iterator[Path]:
    """Yield ``*.html`` files under ``root`` in lexical depth-first order.

    With ``strict`` any unreadable directory (the root included) raises
    ``WalkError``; otherwise such entries are skipped.
    """
    onerror = _raise if strict else None
    try:
        for dirpath, dirnames, filenames in os.walk(root, onerror=onerror):
            dirnames.sort()
            for name in sorted(filenames):
                if name.endswith(SOURCE_SUFFIX):
                    yield Path(dirpath) / name
    except OSError as exc:
        raise WalkError(f"cannot walk {root}: {exc}") from exc


def slug_for(path: Path) -> str:
    return path.name[: -len(SOURCE_SUFFIX)]


def read_lines(path: Path) -> Optional[list[str]]:
    """Return the lines of a source file, or None when it cannot be read.

    Bytes that are not valid UTF-8 are kept as surrogates so the body passes
    through unchanged.
    """
    try:
        text = path.read_text(encoding=SOURCE_ENCODING, errors=SOURCE_ERRORS)
    except OSError:
        return None
    return split_lines(text)


class ContentRepository:
    """Loads posts and collections from two flat directories of HTML files.

    Nothing is cached: every call re-reads the filesystem.
    """

    def __init__(self, posts_dir: Path | str, collections_dir: Path | str) -> None:
        self.posts_dir = Path(posts_dir)
        self.collections_dir = Path(collections_dir)

    def post_path(self, slug: str) -> Path:
        return self.posts_dir / f"{slug}{SOURCE_SUFFIX}"

    def collection_path(self, slug: str) -> Path:
        return self.collections_dir / f"{slug}{SOURCE_SUFFIX}"

    def load_post(self, slug: str) -> Post:
        lines = read_lines(self.post_path(slug)) if slug else None
        if lines is None:
            raise NotFoundError("post", slug)

        content, toc = process_content_with_toc(extract_content(lines))

        raw_date = extract_meta(lines, "date") or today_raw_date()

        collection_slug = extract_meta(lines, "collection")
        collection_title = ""
        collection_description = ""
        collection_index = 0
        collection_total = 0
        if collection_slug:
            collection_lines = read_lines(self.collection_path(collection_slug))
            if collection_lines is not None:
                collection_title = extract_meta(collection_lines, "title")
                collection_description = extract_content(collection_lines).strip()
            collection_index, collection_total = self.collection_position(slug, collection_slug)

        return Post(
            slug=slug,
            title=extract_meta(lines, "title") or slug,
            description=extract_meta(lines, "description"),
            date=format_date(raw_date),
            raw_date=raw_date,
            collection=collection_slug,
            collection_title=collection_title,
            collection_description=collection_description,
            collection_index=collection_index,
            collection_total=collection_total,
            content=content,
            read_time_minutes=reading_time(content),
            toc=tuple(toc),
        )

    def collection_position(self, slug: str, collection_slug: str) -> tuple[int, int]:
        """Return the 1-based position of ``slug`` among posts of a collection.

        Siblings are found by rescanning the posts directory and ordered by raw
        date, oldest first. The index is 0 when ``slug`` is not among them.
        """
        members: list[tuple[str, str]] = []
        for path in iter_source_files(self.posts_dir, strict=False):
            lines = read_lines(path)
            if lines is None:
                continue
            if extract_meta(lines, "collection") == collection_slug:
                members.append((slug_for(path), extract_meta(lines, "date")))

        members.sort(key=lambda item: item[1])
        for position, (member_slug, _) in enumerate(members, start=1):
            if member_slug == slug:
                return position, len(members)
        return 0, len(members)

    def load_collection(self, slug: str) -> Collection:
        lines = read_lines(self.collection_path(slug)) if slug else None
        if lines is None:
            raise NotFoundError("collection", slug)

        description = extract_content(lines).strip()
        posts = tuple(post for post in self.load_posts() if post.collection == slug)
        return Collection(
            slug=slug,
            title=extract_meta(lines, "title"),
            description=description,
            description_text=strip_html(description),
            posts=posts,
        )

    def load_posts(self) -> list[Post]:
        posts = [self.load_post(slug_for(path)) for path in iter_source_files(self.posts_dir)]
        posts.sort(key=lambda p: p.raw_date, reverse=True)
        return posts

    def load_collections(self) -> list[Collection]:
        collections = [
            self.load_collection(slug_for(path)) for path in iter_source_files(self.collections_dir)
        ]
        collections.sort(key=lambda c: c.title)
        return collections
