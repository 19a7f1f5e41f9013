"""
rss_articles

A small service that merges a fixed set of Substack RSS feeds into one JSON
article list for a web page.

Core ideas:
- Input: a fixed table of feed URLs and category labels
- Process: fetch (concurrently) → extract (pattern based, tolerant) → flatten → sort (newest first)
- Output: JSON envelope served at GET /api/rss.json with a 24 hour cache directive

Example
-------
import asyncio
from rss_articles import ArticleAggregator

articles = asyncio.run(ArticleAggregator().collect())

for item in articles:
    print(item.date, item.category, item.title)
"""
from .models import Article, FeedSource
from .config import FEED_SOURCES
from .parser import extract
from .fetcher import fetch_feed
from .core import ArticleAggregator, sort_articles
from .api import create_app

__all__ = [
    "Article",
    "FeedSource",
    "FEED_SOURCES",
    "extract",
    "fetch_feed",
    "ArticleAggregator",
    "sort_articles",
    "create_app",
]
