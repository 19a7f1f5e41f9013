from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class FeedSource:
    key: str
    url: str
    category: str


@dataclass(frozen=True)
class Article:
    """
    Normalized article extracted from one feed item.

    WARNING: `to_dict` is the JSON contract consumed by the web page.
    """
    title: str
    summary: str
    url: str
    date: Optional[date]
    category: str
    source: str = "substack"
    external: bool = True
    tags: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "summary": self.summary,
            "url": self.url,
            "date": self.date.isoformat() if self.date else None,
            "category": self.category,
            "source": self.source,
            "external": self.external,
            "tags": list(self.tags),
        }
