"""Shared fixtures for building small content trees."""

from pathlib import Path

import pytest

from htmlpress.config import Settings
from htmlpress.repository import ContentRepository


def write_source(directory: Path, slug: str, body: str = "", **meta: str) -> Path:
    lines = [f"<!-- {key}: {value} -->" for key, value in meta.items()]
    lines.append(body)
    path = directory / f"{slug}.html"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines), encoding="utf-8")
    return path


@pytest.fixture
def content_root(tmp_path):
    (tmp_path / "posts").mkdir()
    (tmp_path / "collections").mkdir()
    return tmp_path


@pytest.fixture
def repo(content_root):
    return ContentRepository(content_root / "posts", content_root / "collections")


@pytest.fixture
def settings(content_root):
    return Settings(
        posts=str(content_root / "posts"),
        collections=str(content_root / "collections"),
        static=str(content_root / "static"),
        templates=str(content_root / "templates"),
        output=str(content_root / "dist"),
        robots=str(content_root / "robots.txt"),
    )
