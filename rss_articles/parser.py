from __future__ import annotations

import logging
import re
from datetime import date
from typing import Dict, Iterator, List, Optional

from .config import MAX_ITEMS_PER_FEED
from .exceptions import ParseError
from .models import Article
from .normalizer import to_article


logger = logging.getLogger(__name__)

_ITEM_RE = re.compile(r"<item>([\s\S]*?)</item>")
_FIELD_RES = {
    "title": re.compile(r"<title>([\s\S]*?)</title>"),
    "description": re.compile(r"<description>([\s\S]*?)</description>"),
    "link": re.compile(r"<link>([\s\S]*?)</link>"),
    "pub_date": re.compile(r"<pubDate>([\s\S]*?)</pubDate>"),
}


def iter_item_blocks(raw_feed_text: str) -> Iterator[str]:
    for match in _ITEM_RE.finditer(raw_feed_text):
        yield match.group(1)


def parse_item(block: str) -> Dict[str, Optional[str]]:
    """
    Pull the raw (untrimmed) field texts out of one <item> block.
    Fields: title, description, link, pub_date. Absent fields map to None.
    """
    fields: Dict[str, Optional[str]] = {}
    for name, pattern in _FIELD_RES.items():
        m = pattern.search(block)
        fields[name] = m.group(1) if m else None
    return fields


def extract(
    raw_feed_text: str,
    category: str,
    *,
    limit: int = MAX_ITEMS_PER_FEED,
    today: Optional[date] = None,
) -> List[Article]:
    """
    Best-effort extraction of articles from RSS markup of unknown quality.

    Items without a title or link are skipped. Output keeps document order and
    is capped at `limit`. Never raises: on unexpected errors the whole feed
    yields an empty list.
    """
    try:
        articles: List[Article] = []
        for block in iter_item_blocks(raw_feed_text):
            try:
                articles.append(to_article(parse_item(block), category, today=today))
            except ParseError as e:
                logger.debug("Skipping %s item: %s", category, e)
                continue
            if len(articles) >= limit:
                break
        return articles[:limit]
    except Exception:
        logger.exception("Error parsing %s RSS feed", category)
        return []
