"""
aiohttp surface for the article aggregator.

Endpoints:
- GET /api/rss.json   (merged Substack articles, cached for 24 hours)
"""
from __future__ import annotations

import logging
from typing import Mapping, Optional

from aiohttp import web

from .config import CACHE_CONTROL, FEED_SOURCES, RSS_ROUTE
from .core import ArticleAggregator, error_payload
from .models import FeedSource


logger = logging.getLogger(__name__)


class RssFeedHandler:
    def __init__(self, aggregator: Optional[ArticleAggregator] = None) -> None:
        self.aggregator = aggregator or ArticleAggregator()

    async def get_articles(self, request: web.Request) -> web.Response:
        try:
            payload = await self.aggregator.build_payload()
        except Exception:
            logger.exception("Error in RSS handler")
            return web.json_response(error_payload(), status=500)
        return web.json_response(payload, headers={"Cache-Control": CACHE_CONTROL})


def create_app(
    sources: Optional[Mapping[str, FeedSource]] = None,
    *,
    aggregator: Optional[ArticleAggregator] = None,
) -> web.Application:
    """
    Build the application serving GET /api/rss.json.

    Pass either a source table or a ready aggregator, not both.
    """
    if sources is not None and aggregator is not None:
        raise ValueError("create_app takes sources or aggregator, not both")
    if aggregator is None:
        aggregator = ArticleAggregator(FEED_SOURCES if sources is None else sources)
    handler = RssFeedHandler(aggregator)
    app = web.Application()
    app.router.add_get(RSS_ROUTE, handler.get_articles)
    return app
