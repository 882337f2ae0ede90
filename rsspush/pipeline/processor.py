"""Per-feed processing: fetch, parse, deduplicate, dispatch."""

import asyncio
from enum import Enum
from typing import List, Optional, Sequence

from rich.console import Console
from rich.markup import escape

from ..errors import FeedError
from ..ingestion import ContentExtractor, FeedFetcher, FeedParser
from ..models import FeedEntry, FeedReport, NotificationRequest
from ..seen import SeenStore
from ..sinks import NotificationSink

console = Console()


class FeedState(str, Enum):
    """Lifecycle of one feed within a run."""

    PENDING = "pending"
    FETCHING = "fetching"
    PARSING = "parsing"
    ITERATING = "iterating"
    DONE = "done"
    FAILED = "failed"


class FeedProcessor:
    """
    Process one feed source at a time.

    New entries are dispatched to every sink in order and only recorded
    as seen once all of them accepted it. The first dispatch or storage
    error stops the feed; the entry stays unrecorded so the next run
    retries it. With an empty sink list, new entries are recorded without
    being sent.
    """

    def __init__(
        self,
        store: SeenStore,
        sinks: Sequence[NotificationSink],
        fetcher: Optional[FeedFetcher] = None,
        parser: Optional[FeedParser] = None,
        extractor: Optional[ContentExtractor] = None,
        verbose: bool = False,
        output: Optional[Console] = None,
    ) -> None:
        self.store = store
        self.sinks: List[NotificationSink] = list(sinks)
        self.fetcher = fetcher or FeedFetcher()
        self.parser = parser or FeedParser()
        self.extractor = extractor or ContentExtractor()
        self.verbose = verbose
        self.console = output or console
        self.state = FeedState.PENDING

    def render(self, entry: FeedEntry) -> NotificationRequest:
        """Build the notification for an entry."""
        return NotificationRequest(
            identifier=entry.identifier,
            title=entry.title,
            link=entry.link,
            plain_text_body=self.extractor.best_body(entry),
            rich_text_body=self.extractor.best_markup(entry),
        )

    async def process(self, uri: str) -> FeedReport:
        """
        Run one feed through the pipeline.

        Raises:
            FetchError, ParseError, StorageError, DispatchError
        """
        report = FeedReport(source_uri=uri)
        try:
            self.state = FeedState.FETCHING
            if self.verbose:
                self.console.print(f"Fetching {escape(uri)}")
            raw = await self.fetcher.fetch(uri)

            self.state = FeedState.PARSING
            entries = self.parser.parse(raw)
            report.entries = len(entries)
            if self.verbose:
                self.console.print(f"\tFound {len(entries)} entries")

            self.state = FeedState.ITERATING
            for entry in entries:
                await self._process_entry(entry, report)
        except FeedError:
            self.state = FeedState.FAILED
            raise

        self.state = FeedState.DONE
        return report

    async def _process_entry(self, entry: FeedEntry, report: FeedReport) -> None:
        if not entry.has_identifier:
            self.console.print(
                f"[yellow]Entry {escape(entry.title or '(untitled)')!r} has neither GUID nor link; "
                f"it cannot be deduplicated and is treated as new[/yellow]"
            )

        async with self.store.claim(entry.identifier):
            # Seen-state backends block on disk or database I/O
            if await asyncio.to_thread(self.store.contains, entry.identifier):
                report.skipped += 1
                return

            report.new += 1
            if self.verbose:
                self.console.print(f"New item: {escape(entry.identifier)}")
                self.console.print(f"\tTitle: {escape(entry.title)}")

            if self.sinks:
                request = self.render(entry)
                for sink in self.sinks:
                    await sink.dispatch(request)
                report.dispatched += 1

            await asyncio.to_thread(self.store.record, entry.identifier)
