from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from .models import FeedSource


SOURCE_TAG = "substack"
USER_AGENT = "Mozilla/5.0 (compatible; RSSBot/1.0)"
MAX_ITEMS_PER_FEED = 10
SUMMARY_MAX_CHARS = 200
CACHE_MAX_AGE = 86400
CACHE_CONTROL = f"public, max-age={CACHE_MAX_AGE}, s-maxage={CACHE_MAX_AGE}"
RSS_ROUTE = "/api/rss.json"


def _build_sources(*sources: FeedSource) -> Mapping[str, FeedSource]:
    return MappingProxyType({s.key: s for s in sources})


FEED_SOURCES: Mapping[str, FeedSource] = _build_sources(
    FeedSource(
        key="tech",
        url="https://firstprinciplesdesign.substack.com/feed",
        category="tech",
    ),
    FeedSource(
        key="product",
        url="https://whythatworked.substack.com/feed",
        category="product",
    ),
)


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"
    log_file: Optional[str] = None


def load_settings() -> Settings:
    """
    Read process settings from the environment.

    Call `dotenv.load_dotenv()` first if a `.env` file should be honoured.
    Raises ValueError when RSS_API_PORT is not a valid port number or
    LOG_LEVEL is not a standard logging level name.
    """
    raw_port = os.getenv("RSS_API_PORT", "8080")
    try:
        port = int(raw_port)
    except ValueError as e:
        raise ValueError(f"RSS_API_PORT must be an integer, got {raw_port!r}") from e
    if not 0 < port < 65536:
        raise ValueError(f"RSS_API_PORT out of range: {port}")

    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"LOG_LEVEL is not a logging level name: {log_level!r}")

    return Settings(
        host=os.getenv("RSS_API_HOST", "0.0.0.0"),
        port=port,
        log_level=log_level,
        log_file=os.getenv("LOG_FILE") or None,
    )
