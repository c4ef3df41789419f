from __future__ import annotations

import shutil
import sys
from pathlib import Path

from .config import Settings
from .feed import render_rss
from .pages import render_collection, render_collections, render_index, render_post
from .render import copy_static, load_base_template, write_page
from .repository import ContentRepository


def reset_output_dir(output_dir: Path, project_root: Path) -> None:
    """Empty ``output_dir`` for a fresh build; it must live strictly inside the project."""
    output_resolved = output_dir.resolve()
    root_resolved = project_root.resolve()
    if output_resolved == root_resolved or not output_resolved.is_relative_to(root_resolved):
        print(f"Refusing to write the site into {output_dir}: not inside {project_root}.", file=sys.stderr)
        sys.exit(1)
    if output_dir.exists():
        shutil.rmtree(output_dir)
    output_dir.mkdir(parents=True)


def build_site(settings: Settings, project_root: Path | None = None) -> None:
    """Render every page of the site into ``settings.output``.

    Content is loaded once, after the output directory has been reset; any
    load error propagates and leaves the build incomplete.
    """
    output_dir = settings.output_dir
    reset_output_dir(output_dir, project_root or Path.cwd())

    repo = ContentRepository(settings.posts_dir, settings.collections_dir)
    posts = repo.load_posts()
    collections = repo.load_collections()
    base_template = load_base_template(settings.templates_dir)

    print("Building index.html...")
    write_page(output_dir / "index.html", render_index(base_template, settings, posts))

    for post in posts:
        print(f"Building post/{post.slug}/index.html...")
        write_page(output_dir / "post" / post.slug / "index.html", render_post(base_template, settings, post))

    print("Building collections/index.html...")
    write_page(
        output_dir / "collections" / "index.html",
        render_collections(base_template, settings, collections),
    )

    for collection in collections:
        print(f"Building collection/{collection.slug}/index.html...")
        write_page(
            output_dir / "collection" / collection.slug / "index.html",
            render_collection(base_template, settings, collection),
        )

    print("Building feed.xml...")
    write_page(
        output_dir / "feed.xml",
        render_rss(posts, settings.base_url, settings.site_name, settings.site_description),
    )

    if settings.static_dir.exists():
        print("Copying static assets...")
        copy_static(settings.static_dir, output_dir / "static")

    if settings.robots_path.exists():
        print("Copying robots.txt...")
        shutil.copy2(settings.robots_path, output_dir / "robots.txt")

    print(f"Build complete! Output in ./{settings.output}")
