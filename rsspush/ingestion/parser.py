"""Feed parser wrapping feedparser."""

import calendar
import io
from datetime import datetime
from typing import Any, List, Optional, Union

import feedparser
import pendulum

from ..errors import ParseError
from ..models import FeedEntry


class FeedParser:
    """Convert raw feed text into FeedEntry models, preserving feed order."""

    def parse(self, raw: Union[bytes, str]) -> List[FeedEntry]:
        """
        Parse RSS/Atom content.

        Raises:
            ParseError: If the content is not a recognisable feed.
        """
        if isinstance(raw, str):
            raw = raw.encode("utf-8")

        # A stream is never mistaken for a URL or file path.
        feed = feedparser.parse(io.BytesIO(raw))

        # feedparser flags recoverable problems (charset mismatches and the
        # like) as bozo too; only reject when nothing usable came out.
        if feed.bozo and not feed.entries:
            raise ParseError(f"Invalid feed: {feed.get('bozo_exception')}")
        if not feed.entries and not feed.get("version") and not feed.feed:
            raise ParseError("Content is not an RSS or Atom feed")

        return [self._to_entry(entry) for entry in feed.entries]

    def _to_entry(self, entry: Any) -> FeedEntry:
        content = ""
        if entry.get("content"):
            content = "".join(part.get("value", "") for part in entry.content)

        return FeedEntry.from_fields(
            guid=entry.get("id"),
            link=entry.get("link"),
            title=entry.get("title", ""),
            content=content,
            description=entry.get("summary") or entry.get("description") or "",
            published_at=self._published(entry),
        )

    def _published(self, entry: Any) -> Optional[datetime]:
        """Publication date from feedparser's UTC time tuples."""
        parsed = entry.get("published_parsed") or entry.get("updated_parsed")
        if not parsed:
            return None
        try:
            return pendulum.from_timestamp(calendar.timegm(parsed), tz="UTC")
        except (TypeError, ValueError, OverflowError):
            return None
