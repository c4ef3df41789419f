from __future__ import annotations

import datetime as dt
import html

from .models import Collection, Post, TocItem
from .render import render_template

PALETTE_SIZE = 5


def format_slug(slug: str) -> str:
    # A letter is capitalised when it follows any non-alphanumeric character.
    text = slug.replace("-", " ").replace("_", " ")
    chars = []
    previous = " "
    for char in text:
        chars.append(char if previous.isalnum() else char.upper())
        previous = char
    return "".join(chars)


def hash_color(text: str) -> int:
    value = 0
    for char in text:
        value = (value * 31 + ord(char)) & 0xFFFFFFFF
    return value % PALETTE_SIZE


def render_page(base_template: str, settings: object, title: str, page_type: str, content: str) -> str:
    site_name = settings.site_name
    page_title = f"{title} | {site_name}" if title else site_name
    return render_template(
        base_template,
        title=html.escape(page_title),
        site_name=html.escape(site_name),
        site_description=html.escape(settings.site_description),
        page_type=page_type,
        year=str(dt.datetime.now().year),
        content=content,
    )


def collection_chip(post: Post) -> str:
    if not post.collection:
        return ""
    label = post.collection_title or format_slug(post.collection)
    return (
        f'<a class="chip chip-{hash_color(post.collection)}" href="/collection/{post.collection}">'
        f"{html.escape(label)}</a>"
    )


def build_post_cards(posts: list[Post] | tuple[Post, ...]) -> str:
    cards = []
    for post in posts:
        url = f"/post/{post.slug}"
        description = f'<div class="post-summary">{post.description}</div>' if post.description else ""
        cards.append(
            '<article class="post-card">'
            '<div class="post-meta">'
            f'<time datetime="{post.raw_date}">{post.date}</time>'
            f'<span class="post-read">{post.read_time_minutes} min read</span>'
            f"{collection_chip(post)}"
            "</div>"
            f'<h2 class="post-title"><a href="{url}">{html.escape(post.title)}</a></h2>'
            f"{description}"
            "</article>"
        )
    return "\n".join(cards) if cards else '<p class="empty">No posts yet.</p>'


def build_toc(toc: tuple[TocItem, ...]) -> str:
    if not toc:
        return ""
    rows = [f'<li class="toc-level-{item.level}"><a href="#{item.id}">{item.text}</a></li>' for item in toc]
    return f'<nav class="toc"><h2>Contents</h2><ul>{"".join(rows)}</ul></nav>'


def build_collection_banner(post: Post) -> str:
    if not post.collection:
        return ""
    label = html.escape(post.collection_title or format_slug(post.collection))
    return (
        '<aside class="collection-banner">'
        f"Part {post.collection_index} of {post.collection_total} in "
        f'<a href="/collection/{post.collection}">{label}</a>'
        "</aside>"
    )


def render_index(base_template: str, settings: object, posts: list[Post]) -> str:
    content = f'<div class="post-list">{build_post_cards(posts)}</div>'
    return render_page(base_template, settings, "", "index", content)


def render_post(base_template: str, settings: object, post: Post) -> str:
    content = (
        '<article class="post">'
        f'<h1 class="post-title">{html.escape(post.title)}</h1>'
        '<div class="post-meta">'
        f'<time datetime="{post.raw_date}">{post.date}</time>'
        f'<span class="post-read">{post.read_time_minutes} min read</span>'
        "</div>"
        f"{build_collection_banner(post)}"
        f"{build_toc(post.toc)}"
        f'<div class="post-body">{post.content}</div>'
        '<div class="post-footer"><a href="/">Back to home</a></div>'
        "</article>"
    )
    return render_page(base_template, settings, post.title, "post", content)


def render_collections(base_template: str, settings: object, collections: list[Collection]) -> str:
    cards = []
    for collection in collections:
        count = len(collection.posts)
        noun = "post" if count == 1 else "posts"
        cards.append(
            f'<article class="collection-card color-{hash_color(collection.slug)}">'
            f'<h2><a href="/collection/{collection.slug}">{html.escape(collection.title)}</a></h2>'
            f"<p>{html.escape(collection.description_text)}</p>"
            f'<span class="count">{count} {noun}</span>'
            "</article>"
        )
    listing = "\n".join(cards) if cards else '<p class="empty">No collections yet.</p>'
    content = (
        '<div class="section-head"><h1>Collections</h1></div>'
        f'<div class="collection-list">{listing}</div>'
    )
    return render_page(base_template, settings, "Collections", "collections", content)


def render_collection(base_template: str, settings: object, collection: Collection) -> str:
    content = (
        '<div class="section-head">'
        f"<h1>{html.escape(collection.title)}</h1>"
        f'<div class="collection-description">{collection.description}</div>'
        "</div>"
        f'<div class="post-list">{build_post_cards(collection.posts)}</div>'
    )
    return render_page(base_template, settings, collection.title, "collection", content)


def render_not_found(base_template: str, settings: object) -> str:
    content = (
        '<div class="section-head">'
        "<h1>404</h1>"
        "<p>The page you requested does not exist.</p>"
        '<a href="/">Back to home</a>'
        "</div>"
    )
    return render_page(base_template, settings, "Not found", "not-found", content)
