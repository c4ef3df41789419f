from __future__ import annotations

import re
import shutil
from pathlib import Path

from .content import SOURCE_ENCODING, SOURCE_ERRORS

DEFAULT_TEMPLATES = Path(__file__).parent / "templates"
BASE_TEMPLATE = "base.html"
PLACEHOLDER_RE = re.compile(r"\{\{(\w+)\}\}")


def render_template(template: str, **context: str) -> str:
    """Fill ``{{key}}`` placeholders of the template in a single pass.

    Substituted values are never scanned again, so author text that happens to
    contain ``{{...}}`` is kept literally. Unknown placeholders are left as is.
    """

    def repl(match: re.Match) -> str:
        return context.get(match.group(1), match.group(0))

    return PLACEHOLDER_RE.sub(repl, template)


def load_base_template(templates_dir: Path) -> str:
    path = templates_dir / BASE_TEMPLATE
    if not path.exists():
        path = DEFAULT_TEMPLATES / BASE_TEMPLATE
    return path.read_text(encoding="utf-8")


def encode_page(text: str) -> bytes:
    return text.encode(SOURCE_ENCODING, errors=SOURCE_ERRORS)


def write_page(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(encode_page(text))


def copy_static(static_dir: Path, dest_dir: Path) -> None:
    shutil.copytree(static_dir, dest_dir, dirs_exist_ok=True)
