from __future__ import annotations

import datetime as dt
import html
from dataclasses import dataclass
from email.utils import format_datetime

from .content import parse_raw_date
from .models import Post

FEED_TITLE = "BreakLab"
FEED_DESCRIPTION = "Blog posts from BreakLab"


@dataclass(frozen=True)
class FeedItem:
    title: str
    link: str
    description: str
    pub_date: str
    guid: str


def rfc822_from_raw(raw: str) -> str:
    """Publish date for a raw ``YYYY-MM-DD`` post date, midnight UTC; "" if unparsable."""
    value = parse_raw_date(raw)
    if value is None:
        return ""
    return format_datetime(dt.datetime.combine(value, dt.time(), tzinfo=dt.timezone.utc))


def post_link(base_url: str, slug: str) -> str:
    return f"{base_url.rstrip('/')}/post/{slug}"


def feed_items(posts: list[Post], base_url: str) -> list[FeedItem]:
    items = []
    for post in posts:
        link = post_link(base_url, post.slug)
        items.append(
            FeedItem(
                title=post.title,
                link=link,
                description=post.description or post.content,
                pub_date=rfc822_from_raw(post.raw_date),
                guid=link,
            )
        )
    return items


def render_rss(
    posts: list[Post],
    base_url: str,
    title: str = FEED_TITLE,
    description: str = FEED_DESCRIPTION,
) -> str:
    base_url = base_url.rstrip("/")
    items = []
    for item in feed_items(posts, base_url):
        items.append(
            "\n".join(
                [
                    "    <item>",
                    f"      <title>{html.escape(item.title)}</title>",
                    f"      <link>{html.escape(item.link)}</link>",
                    f"      <description>{html.escape(item.description)}</description>",
                    f"      <pubDate>{item.pub_date}</pubDate>",
                    f"      <guid>{html.escape(item.guid)}</guid>",
                    "    </item>",
                ]
            )
        )
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        '<rss version="2.0">',
        "  <channel>",
        f"    <title>{html.escape(title)}</title>",
        f"    <link>{html.escape(base_url)}</link>",
        f"    <description>{html.escape(description)}</description>",
    ]
    lines.extend(items)
    lines.extend(["  </channel>", "</rss>"])
    return "\n".join(lines) + "\n"
