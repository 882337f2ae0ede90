"""Run orchestration across all configured feeds."""

import asyncio
from typing import Callable, List, Optional, Sequence, Union

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..errors import FeedError, StorageError
from ..models import FeedFailure, FeedReport, RunResult
from ..seen import SeenStore
from .processor import FeedProcessor

console = Console()
error_console = Console(stderr=True)


class RunOrchestrator:
    """
    Process every feed once, collecting failures instead of stopping.

    Feeds run concurrently up to ``max_concurrent``; entries within one
    feed are always handled in parser order. Failures are reported in
    feed-list order after the whole pass, and the seen store is flushed
    before the result is returned.
    """

    def __init__(
        self,
        store: SeenStore,
        processor_factory: Callable[[], FeedProcessor],
        max_concurrent: int = 5,
    ) -> None:
        self.store = store
        self.processor_factory = processor_factory
        self.max_concurrent = max(1, max_concurrent)

    async def _process_one(
        self, uri: str, semaphore: asyncio.Semaphore
    ) -> Union[FeedReport, FeedFailure]:
        async with semaphore:
            processor = self.processor_factory()
            try:
                return await processor.process(uri)
            except FeedError as e:
                return FeedFailure(source_uri=uri, kind=type(e).__name__, error=str(e))
            except Exception as e:
                return FeedFailure(source_uri=uri, kind=type(e).__name__, error=f"Unexpected error: {e}")

    async def run(self, uris: Sequence[str]) -> RunResult:
        """Process all feeds and aggregate the outcome."""
        semaphore = asyncio.Semaphore(self.max_concurrent)
        outcomes = await asyncio.gather(*(self._process_one(uri, semaphore) for uri in uris))

        result = RunResult()
        for outcome in outcomes:
            if isinstance(outcome, FeedFailure):
                result.failures.append(outcome)
            else:
                result.reports.append(outcome)

        try:
            await asyncio.to_thread(self.store.flush)
        except StorageError as e:
            result.failures.append(
                FeedFailure(source_uri=self.store.describe(), kind=type(e).__name__, error=str(e))
            )

        return result

    def run_sync(self, uris: Sequence[str]) -> RunResult:
        """Synchronous wrapper for run."""
        return asyncio.run(self.run(uris))


def print_run_summary(result: RunResult, output: Optional[Console] = None) -> None:
    """Print a table of per-feed statistics."""
    output = output or console

    table = Table(title="Run Summary")
    table.add_column("Feed", style="cyan")
    table.add_column("Status", style="bold")
    table.add_column("Entries", style="yellow")
    table.add_column("New", style="green")
    table.add_column("Sent", style="green")

    for report in result.reports:
        table.add_row(
            escape(report.source_uri),
            "[green]ok[/green]",
            str(report.entries),
            str(report.new),
            str(report.dispatched),
        )
    for failure in result.failures:
        table.add_row(escape(failure.source_uri), f"[red]{failure.kind}[/red]", "-", "-", "-")

    output.print(table)


def report_failures(failures: List[FeedFailure], output: Optional[Console] = None) -> None:
    """Write each failure to diagnostic output."""
    output = output or error_console
    for failure in failures:
        output.print(escape(str(failure)), style="red", highlight=False)
