"""Init command implementation."""

from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel

from ..config import ConfigModel, save_config, save_feeds
from ..config.loader import DEFAULT_CONFIG_PATH

console = Console()


def init_command(
    config_dir: Path = typer.Option(
        DEFAULT_CONFIG_PATH.parent,
        "--config-dir",
        "-c",
        help="Configuration directory",
    ),
    store: str = typer.Option(
        "file",
        "--store",
        help="Seen-state backend (file, postgres)",
    ),
    seen_dir: Path = typer.Option(
        Path.home() / ".rsspush" / "seen",
        "--seen-dir",
        help="Directory for the file seen-state backend",
    ),
    db_host: str = typer.Option("localhost", "--db-host", help="Postgres host"),
    db_port: int = typer.Option(5432, "--db-port", help="Postgres port"),
    db_name: str = typer.Option("rsspush", "--db-name", help="Database name"),
    db_user: str = typer.Option("rsspush", "--db-user", help="Database user"),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing configuration"),
) -> None:
    """Initialize rsspush configuration and seen-state storage."""
    console.print(Panel.fit("rsspush - Initialization", style="bold blue"))

    if store not in ("file", "postgres"):
        console.print(f"[red]Unknown store '{store}'; use 'file' or 'postgres'.[/red]")
        raise typer.Exit(1)

    config_dir = config_dir.expanduser()
    config_path = config_dir / "config.yaml"
    feeds_path = config_dir / "feeds.yaml"

    if config_path.exists() and not force:
        console.print(f"[red]{config_path} already exists; use --force to overwrite.[/red]")
        raise typer.Exit(1)

    config = ConfigModel(
        seen={"backend": store, "path": str(seen_dir)},
        postgres={
            "host": db_host,
            "port": db_port,
            "database": db_name,
            "user": db_user,
            "password_env": "RSSPUSH_DB_PASSWORD",
        },
    )

    save_config(config, config_path)
    console.print(f"✅ Created config: {config_path}")

    if not feeds_path.exists():
        save_feeds([], feeds_path)
        console.print(f"✅ Created feeds: {feeds_path} (empty)")

    if store == "file":
        seen_dir.expanduser().mkdir(parents=True, exist_ok=True)
        console.print(f"✅ Created seen-state directory: {seen_dir}")
    else:
        from ..db import init_database, validate_connection

        console.print("\n[bold]Testing database connection...[/bold]")
        db_config = config.postgres.model_dump()

        if not validate_connection(db_config):
            console.print(
                "[red]❌ Database connection failed![/red]\n"
                "Please ensure Postgres is running and credentials are correct.\n"
                "Set the password via environment variable: "
                "[bold]export RSSPUSH_DB_PASSWORD=your_password[/bold]"
            )
            raise typer.Exit(1)

        try:
            init_database(db_config)
            console.print("✅ Database schema initialized")
        except Exception as e:
            console.print(f"[red]❌ Failed to initialize database: {e}[/red]")
            raise typer.Exit(1)

    console.print(
        Panel(
            f"[green]✅ rsspush initialized successfully![/green]\n\n"
            f"Configuration: {config_path}\n"
            f"Feeds: {feeds_path}\n\n"
            f"Next steps:\n"
            f"1. Add a feed: [bold]rsspush feeds add https://example.com/feed.xml[/bold]\n"
            f"2. Prime the seen-state: [bold]rsspush push --no-send[/bold]\n"
            f"3. Run: [bold]rsspush push --api-key=<key> --user-key=<key>[/bold]",
            style="green",
        )
    )
