"""Push command implementation."""

from pathlib import Path
from typing import Optional

import typer

from ..config import SinkOptions
from .run import execute_run

USAGE = "Usage: rsspush push --api-key=<key> --user-key=<key>"


def push_command(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Should we be extra verbose?"),
    send: bool = typer.Option(True, "--send/--no-send", help="Should we send push notifications?"),
    api_key: Optional[str] = typer.Option(
        None, "--api-key", envvar="PUSHOVER_API_KEY", help="Pushover API key"
    ),
    user_key: Optional[str] = typer.Option(
        None, "--user-key", envvar="PUSHOVER_USER_KEY", help="Pushover user (or group) key"
    ),
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", envvar="RSSPUSH_CONFIG", help="Path to config.yaml"
    ),
) -> None:
    """Read the list of feeds and send a push notification for each new item found in them."""
    options = SinkOptions(
        send=send,
        use_pushover=True,
        pushover_api_key=api_key,
        pushover_user_key=user_key,
        pushover_with_title=False,
    )
    execute_run(options, USAGE, config_path=config_path, verbose=verbose)
