"""Unit tests for fetching, parsing and content extraction."""

from datetime import timezone

import httpx
import pytest

from conftest import rss_feed, rss_item
from rsspush.errors import FetchError, ParseError
from rsspush.ingestion import ContentExtractor, FeedFetcher, FeedParser
from rsspush.ingestion import content as content_module
from rsspush.models import FeedEntry


class TestFeedEntry:
    """Tests for identifier derivation."""

    def test_guid_is_identifier(self):
        """Should use the GUID when present."""
        entry = FeedEntry.from_fields(guid="tag:1", link="https://example.com/1")
        assert entry.identifier == "tag:1"

    def test_link_fallback(self):
        """Should fall back to the link when the GUID is empty."""
        entry = FeedEntry.from_fields(guid="", link="https://example.com/1")
        assert entry.identifier == "https://example.com/1"
        assert entry.has_identifier

    def test_no_identifier(self):
        """Should leave the identifier empty when both are missing."""
        entry = FeedEntry.from_fields(guid=None, link="  ")
        assert entry.identifier == ""
        assert not entry.has_identifier


class TestFeedParser:
    """Tests for FeedParser."""

    def test_parses_entries_in_feed_order(self, two_entry_feed):
        """Should return entries in document order."""
        entries = FeedParser().parse(two_entry_feed)

        assert [e.identifier for e in entries] == ["a", "b"]
        assert entries[0].title == "Entry A"
        assert entries[0].link == "https://example.com/a"
        assert entries[0].description == "Body A"

    def test_link_used_without_guid(self):
        """Entries without a GUID should be identified by their link."""
        raw = rss_feed(rss_item(link="https://example.com/only-link", title="Linked"))
        entries = FeedParser().parse(raw)
        assert entries[0].identifier == "https://example.com/only-link"

    def test_entry_without_guid_or_link_kept(self):
        """Entries with neither GUID nor link should not be dropped."""
        raw = rss_feed(rss_item(title="Orphan", description="text"))
        entries = FeedParser().parse(raw)
        assert len(entries) == 1
        assert entries[0].identifier == ""
        assert entries[0].title == "Orphan"

    def test_content_encoded(self):
        """Should expose content:encoded as content."""
        item = (
            "<item><title>Rich</title><guid>r</guid>"
            "<description>short</description>"
            "<content:encoded><![CDATA[<p>Full <b>body</b></p>]]></content:encoded>"
            "</item>"
        )
        entry = FeedParser().parse(rss_feed(item))[0]
        assert "Full" in entry.content
        assert entry.description == "short"

    def test_published_at(self):
        """Should convert pubDate to an aware UTC datetime."""
        item = (
            "<item><title>Dated</title><guid>d</guid>"
            "<pubDate>Mon, 06 Jan 2025 10:00:00 GMT</pubDate></item>"
        )
        entry = FeedParser().parse(rss_feed(item))[0]
        assert entry.published_at is not None
        assert entry.published_at.utcoffset() == timezone.utc.utcoffset(None)
        assert (entry.published_at.year, entry.published_at.month, entry.published_at.day) == (2025, 1, 6)
        assert entry.published_at.hour == 10

    def test_atom_feed(self):
        """Should parse Atom feeds too."""
        raw = (
            '<?xml version="1.0" encoding="utf-8"?>'
            '<feed xmlns="http://www.w3.org/2005/Atom"><title>Atom</title>'
            '<id>urn:feed</id><updated>2025-01-01T00:00:00Z</updated>'
            '<entry><title>One</title><id>urn:entry:1</id>'
            '<link href="https://example.com/atom/1"/>'
            '<updated>2025-01-01T00:00:00Z</updated>'
            '<content type="html">&lt;p&gt;Atom body&lt;/p&gt;</content></entry>'
            "</feed>"
        )
        entries = FeedParser().parse(raw)
        assert entries[0].identifier == "urn:entry:1"
        assert "Atom body" in entries[0].content

    def test_empty_channel(self):
        """A valid feed without items should yield no entries."""
        assert FeedParser().parse(rss_feed()) == []

    def test_garbage_raises_parse_error(self):
        """Should raise ParseError for content that is not a feed."""
        with pytest.raises(ParseError):
            FeedParser().parse(b"<html><body><p>Not a feed <b>at all</p></body>")

    def test_accepts_text(self, two_entry_feed):
        """Should accept already-decoded text."""
        entries = FeedParser().parse(two_entry_feed.decode("utf-8"))
        assert len(entries) == 2


class TestContentExtractor:
    """Tests for ContentExtractor."""

    def test_prefers_content(self):
        """Should use content when it is non-empty."""
        entry = FeedEntry(identifier="x", content="<p>content</p>", description="description")
        assert ContentExtractor().best_body(entry) == "content"

    def test_falls_back_to_description(self):
        """Should use the description when content is empty."""
        entry = FeedEntry(identifier="x", content="", description="<p>non-empty</p>")
        extractor = ContentExtractor()
        assert extractor.best_markup(entry) == "<p>non-empty</p>"
        assert extractor.best_body(entry) == "non-empty"

    def test_both_empty(self):
        """Should return an empty body when nothing is available."""
        entry = FeedEntry(identifier="x")
        assert ContentExtractor().best_body(entry) == ""

    def test_markup_to_text(self):
        """Should strip tags and keep block structure."""
        markup = "<h1>Title</h1><p>Hello <b>world</b><br>again</p><script>x()</script><ul><li>one</li><li>two</li></ul>"
        assert ContentExtractor().to_text(markup) == "Title\nHello world\nagain\none\ntwo"

    def test_malformed_markup_does_not_raise(self):
        """Unbalanced markup should still convert."""
        assert ContentExtractor().to_text("<p>open <b>bold <i>both") == "open bold both"

    def test_conversion_failure_returns_raw(self, monkeypatch):
        """Should fall back to the raw markup if conversion fails."""

        def broken(*args, **kwargs):
            raise RuntimeError("parser exploded")

        monkeypatch.setattr(content_module, "BeautifulSoup", broken)
        assert ContentExtractor().to_text("<p>raw</p>") == "<p>raw</p>"


@pytest.mark.asyncio
class TestFeedFetcher:
    """Tests for FeedFetcher."""

    async def test_sends_identifying_user_agent(self):
        """Should send the configured User-Agent, not the httpx default."""
        seen = {}

        def handler(request):
            seen["ua"] = request.headers["User-Agent"]
            return httpx.Response(200, content=b"<rss/>")

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            fetcher = FeedFetcher(client=client, user_agent="rsspush-test/1.0")
            body = await fetcher.fetch("https://example.com/feed")

        assert body == b"<rss/>"
        assert seen["ua"] == "rsspush-test/1.0"

    async def test_default_user_agent_identifies_rsspush(self):
        """The default User-Agent should name the tool."""
        seen = {}

        def handler(request):
            seen["ua"] = request.headers["User-Agent"]
            return httpx.Response(200, content=b"")

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            await FeedFetcher(client=client).fetch("https://example.com/feed")

        assert seen["ua"].startswith("rsspush/")

    async def test_non_200_returns_body(self):
        """Should return the body of an error response rather than raising."""

        def handler(request):
            return httpx.Response(404, content=b"not here")

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            body = await FeedFetcher(client=client).fetch("https://example.com/missing")

        assert body == b"not here"

    async def test_transport_error_raises_fetch_error(self):
        """Should wrap transport failures in FetchError."""

        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(FetchError, match="connection refused"):
                await FeedFetcher(client=client).fetch("https://example.com/feed")
