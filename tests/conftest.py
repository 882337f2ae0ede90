"""Pytest configuration and shared fixtures."""

import asyncio
from typing import Dict, List, Union

import pytest

from rsspush.errors import DispatchError, FetchError
from rsspush.models import NotificationRequest
from rsspush.seen import MemorySeenBackend, SeenStore
from rsspush.sinks import NotificationSink


def rss_feed(*items: str) -> bytes:
    """Wrap <item> fragments in an RSS 2.0 document."""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<rss version="2.0" xmlns:content="http://purl.org/rss/1.0/modules/content/">\n'
        "<channel><title>Example</title><link>https://example.com/</link>"
        "<description>Example feed</description>\n"
        + "\n".join(items)
        + "\n</channel></rss>\n"
    ).encode("utf-8")


def rss_item(guid: str = "", link: str = "", title: str = "Title", description: str = "") -> str:
    parts = [f"<title>{title}</title>"]
    if link:
        parts.append(f"<link>{link}</link>")
    if guid:
        parts.append(f'<guid isPermaLink="false">{guid}</guid>')
    if description:
        parts.append(f"<description>{description}</description>")
    return "<item>" + "".join(parts) + "</item>"


class FakeFetcher:
    """Serve canned bodies (or raise canned errors) per URI."""

    def __init__(self, responses: Dict[str, Union[bytes, Exception]]) -> None:
        self.responses = responses
        self.calls: List[str] = []

    async def fetch(self, uri: str) -> bytes:
        self.calls.append(uri)
        response = self.responses[uri]
        if isinstance(response, Exception):
            raise response
        return response


class RecordingSink(NotificationSink):
    """Sink that records every request, optionally failing or pausing."""

    def __init__(self, name: str = "recording", fail_on: str = None, delay: float = 0.0) -> None:
        super().__init__()
        self.name = name
        self.fail_on = fail_on
        self.delay = delay
        self.requests: List[NotificationRequest] = []

    async def dispatch(self, request: NotificationRequest) -> None:
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.fail_on is not None and request.identifier == self.fail_on:
            raise DispatchError(self.name, f"rejected {request.identifier}")
        self.requests.append(request)

    @property
    def identifiers(self) -> List[str]:
        return [r.identifier for r in self.requests]


@pytest.fixture
def memory_backend():
    """Provide an empty in-memory seen backend."""
    return MemorySeenBackend()


@pytest.fixture
def store(memory_backend):
    """Provide a SeenStore over the in-memory backend."""
    return SeenStore(memory_backend)


@pytest.fixture
def two_entry_feed():
    """Feed with entries 'a' and 'b'."""
    return rss_feed(
        rss_item(guid="a", link="https://example.com/a", title="Entry A", description="Body A"),
        rss_item(guid="b", link="https://example.com/b", title="Entry B", description="Body B"),
    )


@pytest.fixture
def fetch_error():
    return FetchError("HTTP error: connection refused")
