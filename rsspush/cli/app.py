"""Main CLI application."""

import typer
from dotenv import load_dotenv
from rich.console import Console

# Load .env file if it exists
load_dotenv()

from .. import __version__
from .feeds import feeds_app
from .init import init_command
from .push import push_command
from .send import send_command

console = Console()

app = typer.Typer(
    name="rsspush",
    help="Send push notifications and emails for new RSS/Atom feed entries",
    no_args_is_help=True,
)


def version_command() -> None:
    """Show the version of rsspush."""
    console.print(f"rsspush {__version__}")


# Register commands
app.command("init")(init_command)
app.command("push")(push_command)
app.command("send")(send_command)
app.command("version")(version_command)
app.add_typer(feeds_app, name="feeds", help="Manage the feed list")


if __name__ == "__main__":
    app()
