from __future__ import annotations

import logging
from os import getenv

from flask import Flask, Response, abort, request, send_file

from .config import Settings
from .errors import NotFoundError, WalkError
from .feed import render_rss
from .pages import render_collection, render_collections, render_index, render_not_found, render_post
from .render import encode_page, load_base_template
from .repository import ContentRepository

logger = logging.getLogger(__name__)

HTML_MIMETYPE = "text/html; charset=utf-8"
RSS_MIMETYPE = "application/rss+xml; charset=utf-8"


def request_base_url() -> str:
    scheme = "http"
    if request.is_secure or request.headers.get("X-Forwarded-Proto") == "https":
        scheme = "https"
    return f"{scheme}://{request.host}"


def create_app(settings: Settings) -> Flask:
    app = Flask(
        __name__,
        static_folder=str(settings.static_dir.resolve()),
        static_url_path="/static",
    )
    repo = ContentRepository(settings.posts_dir, settings.collections_dir)

    # Templates are re-read per request so edits show up without a restart.
    def page(text: str, status: int = 200) -> Response:
        return Response(encode_page(text), status=status, content_type=HTML_MIMETYPE)

    @app.errorhandler(404)
    def not_found(_error):
        return page(render_not_found(load_base_template(settings.templates_dir), settings), 404)

    @app.errorhandler(WalkError)
    def walk_failed(error: WalkError):
        logger.error("Content walk failed: %s", error, exc_info=error)
        return Response(str(error), status=500, content_type="text/plain; charset=utf-8")

    @app.route("/")
    def index():
        posts = repo.load_posts()
        return page(render_index(load_base_template(settings.templates_dir), settings, posts))

    @app.route("/post/<slug>")
    def post(slug: str):
        try:
            item = repo.load_post(slug)
        except NotFoundError:
            logger.info("Post not found: %s", slug)
            abort(404)
        return page(render_post(load_base_template(settings.templates_dir), settings, item))

    @app.route("/collections")
    def collections():
        items = repo.load_collections()
        return page(render_collections(load_base_template(settings.templates_dir), settings, items))

    @app.route("/collection/<slug>")
    def collection(slug: str):
        try:
            item = repo.load_collection(slug)
        except NotFoundError:
            logger.info("Collection not found: %s", slug)
            abort(404)
        return page(render_collection(load_base_template(settings.templates_dir), settings, item))

    @app.route("/feed.xml")
    def feed():
        posts = repo.load_posts()
        body = render_rss(posts, request_base_url(), settings.site_name, settings.site_description)
        return Response(encode_page(body), content_type=RSS_MIMETYPE)

    @app.route("/robots.txt")
    def robots():
        path = settings.robots_path.resolve()
        if not path.is_file():
            abort(404)
        return send_file(path, mimetype="text/plain")

    return app


def configure_logging() -> None:
    level = logging.DEBUG if getenv("DEBUG_LOGGING") is not None else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)-21s %(levelname)-8s %(name)-12s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def serve(settings: Settings) -> None:
    configure_logging()
    app = create_app(settings)
    print(f"Server starting on http://localhost:{settings.port}")
    app.run(host=settings.host, port=settings.port, threaded=True)
