"""Feed entry model."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class FeedEntry(BaseModel):
    """One item parsed from a syndication feed."""

    identifier: str = Field("", description="Dedup key: GUID, falling back to link")
    guid: str = Field("", description="Feed-supplied GUID")
    link: str = Field("", description="Entry URL")
    title: str = Field("", description="Entry title")
    content: str = Field("", description="Rich-text body, may be empty")
    description: str = Field("", description="Fallback rich-text summary")
    published_at: Optional[datetime] = Field(None, description="Publication timestamp (best effort)")

    @classmethod
    def from_fields(
        cls,
        guid: Optional[str] = None,
        link: Optional[str] = None,
        **kwargs,
    ) -> "FeedEntry":
        """Build an entry, deriving the identifier from GUID or link."""
        guid = (guid or "").strip()
        link = (link or "").strip()
        return cls(identifier=guid or link, guid=guid, link=link, **kwargs)

    @property
    def has_identifier(self) -> bool:
        """Whether the entry can be deduplicated at all."""
        return bool(self.identifier)
