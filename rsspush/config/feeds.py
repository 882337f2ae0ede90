"""Feed list management."""

from pathlib import Path
from typing import List, Optional

from .loader import load_feeds, save_feeds
from .models import FeedConfig


class FeedList:
    """The configured list of feeds, backed by feeds.yaml."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def feeds(self) -> List[FeedConfig]:
        """All configured feeds; an absent file is an empty list."""
        try:
            return load_feeds(self.path)
        except FileNotFoundError:
            return []

    def entries(self) -> List[str]:
        """URIs of the enabled feeds, in file order."""
        return [f.url for f in self.feeds() if f.enabled]

    def add(self, url: str, name: Optional[str] = None) -> bool:
        """
        Append a feed.

        Returns:
            False if the URL is already present
        """
        feeds = self.feeds()
        if any(f.url == url for f in feeds):
            return False
        feeds.append(FeedConfig(url=url, name=name))
        save_feeds(feeds, self.path)
        return True

    def remove(self, url: str) -> bool:
        """
        Remove a feed by URL or name.

        Returns:
            False if nothing matched
        """
        feeds = self.feeds()
        remaining = [f for f in feeds if f.url != url and f.name != url]
        if len(remaining) == len(feeds):
            return False
        save_feeds(remaining, self.path)
        return True
