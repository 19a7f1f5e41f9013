from __future__ import annotations

import asyncio
import logging
from typing import Iterable, List, Optional

import aiohttp

from .config import USER_AGENT
from .exceptions import RSSFetchError
from .models import Article, FeedSource
from .parser import extract


logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {"User-Agent": USER_AGENT}


async def fetch_feed_text(session: aiohttp.ClientSession, url: str) -> str:
    """
    GET a single feed URL and return its body as text.

    Raises RSSFetchError on a non-success status or network failure.
    """
    try:
        async with session.get(url, headers=DEFAULT_HEADERS) as response:
            if not 200 <= response.status < 300:
                raise RSSFetchError(f"HTTP error! status: {response.status} ({url})")
            return await response.text(errors="replace")
    except (aiohttp.ClientError, asyncio.TimeoutError, OSError) as e:
        raise RSSFetchError(f"Failed to fetch feed: {url} ({e!r})") from e


async def fetch_feed(
    url: str,
    category: str,
    session: Optional[aiohttp.ClientSession] = None,
) -> List[Article]:
    """
    Fetch one feed and extract its articles.

    Never raises to the caller: failures are logged and yield an empty list.
    A short-lived session is opened when none is passed.
    """
    if session is None:
        async with aiohttp.ClientSession(headers=DEFAULT_HEADERS) as own_session:
            return await fetch_feed(url, category, own_session)

    try:
        text = await fetch_feed_text(session, url)
    except RSSFetchError as e:
        logger.error("Error fetching %s RSS feed: %s", category, e)
        return []

    articles = extract(text, category)
    logger.debug("Fetched %d %s articles from %s", len(articles), category, url)
    return articles


async def fetch_many(
    sources: Iterable[FeedSource],
    session: Optional[aiohttp.ClientSession] = None,
) -> List[List[Article]]:
    """
    Fetch all sources concurrently; one result list per source, in source order.

    Failures on individual sources are isolated and show up as empty lists.
    """
    sources = list(sources)
    if session is None:
        async with aiohttp.ClientSession(headers=DEFAULT_HEADERS) as own_session:
            return await fetch_many(sources, own_session)

    return list(await asyncio.gather(*(fetch_feed(s.url, s.category, session) for s in sources)))
