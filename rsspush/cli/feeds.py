"""Feed list management commands."""

import asyncio
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..config import Config, FeedList
from ..errors import FeedError
from ..ingestion import FeedFetcher, FeedParser

console = Console()
feeds_app = typer.Typer(help="Manage the feed list")

ConfigOption = typer.Option(
    None, "--config", "-c", envvar="RSSPUSH_CONFIG", help="Path to config.yaml"
)


@feeds_app.command("list")
def feeds_list(config_path: Optional[Path] = ConfigOption) -> None:
    """List all configured feeds."""
    feed_list = FeedList(Config(config_path).feeds_path)
    feeds = feed_list.feeds()

    if not feeds:
        console.print("[yellow]No feeds configured.[/yellow]")
        return

    table = Table(title="Configured Feeds")
    table.add_column("URL", style="blue")
    table.add_column("Name", style="cyan")
    table.add_column("Enabled", style="yellow")

    for feed in feeds:
        table.add_row(escape(feed.url), escape(feed.name or ""), "✓" if feed.enabled else "✗")

    console.print(table)


@feeds_app.command("add")
def feeds_add(
    url: str = typer.Argument(..., help="RSS/Atom feed URL"),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Display name"),
    config_path: Optional[Path] = ConfigOption,
) -> None:
    """Add a feed to the list."""
    feed_list = FeedList(Config(config_path).feeds_path)

    if not feed_list.add(url, name=name):
        console.print(f"[red]Feed '{escape(url)}' already exists.[/red]")
        raise typer.Exit(1)

    console.print(f"[green]✅ Added feed: {escape(url)}[/green]")


@feeds_app.command("remove")
def feeds_remove(
    url: str = typer.Argument(..., help="Feed URL (or name) to remove"),
    config_path: Optional[Path] = ConfigOption,
) -> None:
    """Remove a feed from the list."""
    feed_list = FeedList(Config(config_path).feeds_path)

    if not feed_list.remove(url):
        console.print(f"[red]Feed '{escape(url)}' not found.[/red]")
        raise typer.Exit(1)

    console.print(f"[green]✅ Removed feed: {escape(url)}[/green]")


@feeds_app.command("test")
def feeds_test(
    url: Optional[str] = typer.Argument(None, help="Feed URL to test (or test all)"),
    config_path: Optional[Path] = ConfigOption,
) -> None:
    """Fetch and parse feeds without recording or sending anything."""
    config = Config(config_path)
    uris = [url] if url else FeedList(config.feeds_path).entries()

    if not uris:
        console.print("[yellow]No feeds configured.[/yellow]")
        return

    fetch = config.config.fetch
    fetcher = FeedFetcher(timeout=fetch.timeout, user_agent=fetch.user_agent)
    parser = FeedParser()
    failed = False

    for uri in uris:
        try:
            entries = parser.parse(asyncio.run(fetcher.fetch(uri)))
            console.print(f"[green]✅ {escape(uri)}: OK ({len(entries)} entries)[/green]")
        except FeedError as e:
            failed = True
            console.print(f"[red]❌ {escape(uri)}: Failed - {escape(str(e))}[/red]")

    if failed:
        raise typer.Exit(1)
