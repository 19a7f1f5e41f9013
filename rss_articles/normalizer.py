from __future__ import annotations

import re
from datetime import date, datetime, timezone
from typing import Any, Dict, Optional

from feedparser.datetimes import _parse_date as _feedparser_parse_date

from .config import SOURCE_TAG, SUMMARY_MAX_CHARS
from .exceptions import ParseError
from .models import Article


_CDATA_RE = re.compile(r"<!\[CDATA\[|\]\]>")
_TAG_RE = re.compile(r"<[^>]*>")
ELLIPSIS = "..."


def strip_cdata(text: str) -> str:
    """Remove every CDATA open/close marker, wherever it appears, and trim."""
    return _CDATA_RE.sub("", text).strip()


def make_summary(description: str, max_chars: int = SUMMARY_MAX_CHARS) -> str:
    """
    Strip markup tags from a description and bound its length.

    Plain text longer than `max_chars` (measured before trimming) keeps its
    first `max_chars` characters, trimmed, followed by "...".
    """
    text = _TAG_RE.sub("", description)
    if len(text) > max_chars:
        return text[:max_chars].strip() + ELLIPSIS
    return text.strip()


def parse_pub_date(value: Optional[str], *, today: Optional[date] = None) -> Optional[date]:
    """
    Convert a feed date string to a UTC calendar date.

    Missing value -> `today` (current UTC date by default).
    Present but unparseable value -> None, i.e. the article is undated.
    """
    if value is None or not value.strip():
        return today or datetime.now(timezone.utc).date()
    parsed = _feedparser_parse_date(value.strip())
    if not parsed:
        return None
    try:
        year, month, day = parsed[:3]
        return date(year, month, day)
    except (TypeError, ValueError):
        return None


def to_article(entry: Dict[str, Any], category: str, *, today: Optional[date] = None) -> Article:
    """
    Convert raw item fields into an Article.
    Requires:
    - title (non-empty after CDATA stripping)
    - link (non-empty)
    Optional:
    - description, pub_date
    """
    title = strip_cdata(entry.get("title") or "")
    link = (entry.get("link") or "").strip()
    if not title or not link:
        raise ParseError("Item lacks required fields for Article: title/link")

    description = strip_cdata(entry.get("description") or "")

    return Article(
        title=title,
        summary=make_summary(description),
        url=link,
        date=parse_pub_date(entry.get("pub_date"), today=today),
        category=category,
        source=SOURCE_TAG,
        external=True,
        tags=(SOURCE_TAG, category),
    )
