from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

from . import __version__
from .config import build_settings, load_config
from .errors import ContentError
from .export import build_site
from .server import serve


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve or build a site from HTML content files.")
    parser.add_argument(
        "--config",
        default="site.toml",
        help="Path to site config file (TOML/YAML/JSON).",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--posts", default=None, help="Directory containing post files.")
    parser.add_argument("--collections", default=None, help="Directory containing collection files.")
    parser.add_argument("--static", default=None, help="Directory containing static assets.")
    parser.add_argument("--templates", default=None, help="Directory containing base.html.")
    parser.add_argument("--site-name", default=None, help="Site title.")
    parser.add_argument("--site-description", default=None, help="Site description.")
    subparsers = parser.add_subparsers(dest="command")

    serve_parser = subparsers.add_parser("serve", help="Serve the site over HTTP.")
    serve_parser.add_argument("--host", default=None, help="Interface to bind.")
    serve_parser.add_argument("--port", default=None, type=int, help="Port to listen on (default: $PORT or 8080).")

    build_parser = subparsers.add_parser("build", help="Write the site as static files.")
    build_parser.add_argument(
        "base_url",
        nargs="?",
        default=None,
        help="Absolute site URL used for feed links.",
    )
    build_parser.add_argument("--output", default=None, help="Output directory for the site.")

    args = parser.parse_args(argv)
    if args.command is None:
        args.command = "serve"
    return args


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    config = load_config(Path(args.config))
    settings = build_settings(
        config,
        posts=args.posts,
        collections=args.collections,
        static=args.static,
        templates=args.templates,
        site_name=args.site_name,
        site_description=args.site_description,
        host=getattr(args, "host", None),
        port=getattr(args, "port", None),
        base_url=getattr(args, "base_url", None),
        output=getattr(args, "output", None),
    )

    if args.command == "serve":
        serve(settings)
        return

    start = time.perf_counter()
    try:
        build_site(settings)
    except (ContentError, OSError) as exc:
        print(f"Build failed: {exc}", file=sys.stderr)
        sys.exit(1)
    elapsed = time.perf_counter() - start
    print(f"Build completed in {elapsed:.2f}s.")


if __name__ == "__main__":
    main()
