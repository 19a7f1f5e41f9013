from __future__ import annotations

import asyncio
from typing import Optional

import pytest
from aiohttp import web


def _item(
    title: Optional[str] = "Post",
    link: Optional[str] = "https://example.substack.com/p/post",
    description: Optional[str] = None,
    pub_date: Optional[str] = None,
) -> str:
    parts = ["<item>"]
    if title is not None:
        parts.append(f"<title>{title}</title>")
    if description is not None:
        parts.append(f"<description>{description}</description>")
    if link is not None:
        parts.append(f"<link>{link}</link>")
    if pub_date is not None:
        parts.append(f"<pubDate>{pub_date}</pubDate>")
    parts.append("</item>")
    return "\n".join(parts)


def _feed(*items: str) -> str:
    body = "\n".join(items)
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<rss version="2.0"><channel>\n'
        "<title>Example</title>\n"
        "<link>https://example.substack.com</link>\n"
        f"{body}\n"
        "</channel></rss>\n"
    )


@pytest.fixture
def make_item():
    return _item


@pytest.fixture
def make_feed():
    return _feed


def _rendezvous_app(paths, feed_text: str, timeout: float = 5.0):
    """
    Feed app whose handlers only answer once every path has been requested.

    A handler that waits out `timeout` answers 504, so sequential fetching
    shows up as failed feeds instead of a hung test.
    """
    arrived = set()
    state = {}

    async def handle(request: web.Request) -> web.Response:
        if "all_in" not in state:
            state["all_in"] = asyncio.Event()
        arrived.add(request.path)
        if arrived >= set(paths):
            state["all_in"].set()
        try:
            await asyncio.wait_for(state["all_in"].wait(), timeout)
        except asyncio.TimeoutError:
            return web.Response(status=504, text="feeds were not fetched together")
        return web.Response(text=feed_text, content_type="application/rss+xml")

    app = web.Application()
    for path in paths:
        app.router.add_get(path, handle)
    return app


@pytest.fixture
def rendezvous_app():
    return _rendezvous_app
