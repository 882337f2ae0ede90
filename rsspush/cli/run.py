"""Shared run implementation for the push and send commands."""

import asyncio
from pathlib import Path
from typing import List, Optional

import httpx
import typer
from rich.console import Console

from ..config import Config, FeedList, SinkOptions
from ..errors import ConfigurationError
from ..ingestion import FeedFetcher
from ..models import RunResult
from ..pipeline import FeedProcessor, RunOrchestrator, print_run_summary, report_failures
from ..seen import SeenStore, open_seen_store
from ..sinks import build_sinks

console = Console()
error_console = Console(stderr=True)


async def run_feeds(
    config: Config,
    store: SeenStore,
    options: SinkOptions,
    uris: List[str],
    verbose: bool = False,
) -> RunResult:
    """Process all feeds with one shared HTTP client."""
    fetch = config.config.fetch
    async with httpx.AsyncClient(timeout=fetch.timeout, follow_redirects=True) as client:
        fetcher = FeedFetcher(client=client, timeout=fetch.timeout, user_agent=fetch.user_agent)
        sinks = build_sinks(options, client=client, timeout=fetch.timeout)
        orchestrator = RunOrchestrator(
            store,
            lambda: FeedProcessor(store, sinks, fetcher=fetcher, verbose=verbose),
            max_concurrent=fetch.max_concurrent,
        )
        return await orchestrator.run(uris)


def execute_run(
    options: SinkOptions,
    usage: str,
    config_path: Optional[Path] = None,
    verbose: bool = False,
) -> None:
    """
    Validate configuration, process every feed, and exit non-zero on failure.

    Raises:
        typer.Exit: With code 1 on configuration errors or feed failures
    """
    try:
        config = Config(config_path)
        # Loading the store reads config.yaml; the sinks check credentials
        # and the template. Both happen before any feed is touched.
        store = open_seen_store(config)
        build_sinks(options)
        uris = FeedList(config.feeds_path).entries()
    except ConfigurationError as e:
        error_console.print(f"[red]{e}[/red]")
        error_console.print(usage, highlight=False, markup=False)
        raise typer.Exit(1)

    if not uris:
        console.print(f"[yellow]No feeds configured in {config.feeds_path}[/yellow]")
        return

    try:
        result = asyncio.run(run_feeds(config, store, options, uris, verbose=verbose))
    except KeyboardInterrupt:
        console.print("\n[yellow]Run interrupted by user[/yellow]")
        raise typer.Exit(1)
    finally:
        if config.config.seen.backend == "postgres":
            from ..db import close_connection_pool

            close_connection_pool()

    if verbose:
        print_run_summary(result)

    if not result.success:
        report_failures(result.failures)
        raise typer.Exit(1)
