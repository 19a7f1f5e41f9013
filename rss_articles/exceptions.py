class RSSFetchError(Exception):
    """Raised when an RSS feed cannot be fetched (bad status or network failure)."""


class ParseError(Exception):
    """Raised when a feed item lacks the fields required for an Article."""
