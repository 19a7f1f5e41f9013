from __future__ import annotations

import functools
import itertools
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Mapping, Optional

import aiohttp

from .config import FEED_SOURCES
from .fetcher import DEFAULT_HEADERS, fetch_many
from .models import Article, FeedSource


logger = logging.getLogger(__name__)

ERROR_MESSAGE = "Failed to fetch RSS feeds"


def compare_articles(a: Article, b: Article) -> int:
    """Newest first; undated articles go to the bottom."""
    if a.date is None and b.date is None:
        return 0
    if a.date is None:
        return 1
    if b.date is None:
        return -1
    return (b.date - a.date).days


def sort_articles(articles: Iterable[Article]) -> List[Article]:
    # sorted() is stable, so equal dates keep their feed order
    return sorted(articles, key=functools.cmp_to_key(compare_articles))


def format_instant(moment: datetime) -> str:
    """ISO-8601 UTC instant with milliseconds and a Z suffix."""
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_payload(articles: List[Article], now: Optional[datetime] = None) -> Dict[str, Any]:
    now = now or datetime.now(timezone.utc)
    return {
        "success": True,
        "articles": [a.to_dict() for a in articles],
        "count": len(articles),
        "lastUpdated": format_instant(now),
    }


def error_payload() -> Dict[str, Any]:
    return {"success": False, "error": ERROR_MESSAGE, "articles": []}


class ArticleAggregator:
    """
    High-level API: fetch every configured feed and return one sorted article list.

    Pipeline: fetch (concurrently) → extract → flatten → sort (newest first, undated last)
    """

    def __init__(self, sources: Mapping[str, FeedSource] = FEED_SOURCES) -> None:
        self.sources = sources

    async def collect(self, session: Optional[aiohttp.ClientSession] = None) -> List[Article]:
        if session is None:
            async with aiohttp.ClientSession(headers=DEFAULT_HEADERS) as own_session:
                return await self.collect(own_session)

        results = await fetch_many(self.sources.values(), session)
        articles = list(itertools.chain.from_iterable(results))
        logger.info(
            "Collected %d articles from %d feeds",
            len(articles),
            len(self.sources),
        )
        return sort_articles(articles)

    async def build_payload(self, session: Optional[aiohttp.ClientSession] = None) -> Dict[str, Any]:
        return build_payload(await self.collect(session))
