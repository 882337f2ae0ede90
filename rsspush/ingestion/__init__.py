"""Feed fetching, parsing and content extraction."""

from .content import ContentExtractor
from .fetcher import FeedFetcher
from .parser import FeedParser

__all__ = ["ContentExtractor", "FeedFetcher", "FeedParser"]
