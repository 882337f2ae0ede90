"""Send command implementation."""

from pathlib import Path
from typing import Optional

import typer

from ..config import SinkOptions
from .run import execute_run

USAGE = (
    "Usage: rsspush send [--send] [--use-pushover --pushover-api-key=<key> --pushover-user-key=<key>]\n"
    "       [--email-template=</path/to/file>] [--use-sendy --sendy-api-hostname=<sendy.example.com>\n"
    "        --sendy-api-key=<key> --sendy-list-id=<id> --sendy-from-name=<name> --sendy-from-email=<email>]"
)


def send_command(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Should we be extra verbose?"),
    send: bool = typer.Option(True, "--send/--no-send", help="Should we send any messages?"),
    use_pushover: bool = typer.Option(False, "--use-pushover", help="Should we send push messages?"),
    pushover_api_key: Optional[str] = typer.Option(
        None, "--pushover-api-key", envvar="PUSHOVER_API_KEY", help="Pushover API key"
    ),
    pushover_user_key: Optional[str] = typer.Option(
        None, "--pushover-user-key", envvar="PUSHOVER_USER_KEY", help="Pushover user (or group) key"
    ),
    email_template: Optional[Path] = typer.Option(
        None, "--email-template", help="Path to email template file ($title and $body are substituted)"
    ),
    use_sendy: bool = typer.Option(False, "--use-sendy", help="Should we send emails with Sendy?"),
    sendy_api_hostname: Optional[str] = typer.Option(
        None, "--sendy-api-hostname", envvar="SENDY_API_HOSTNAME",
        help="Sendy API Hostname (e.g. sendy.example.com)",
    ),
    sendy_api_key: Optional[str] = typer.Option(
        None, "--sendy-api-key", envvar="SENDY_API_KEY", help="Sendy API key"
    ),
    sendy_list_id: Optional[str] = typer.Option(
        None, "--sendy-list-id", envvar="SENDY_LIST_ID", help="Sendy list ID"
    ),
    sendy_from_name: Optional[str] = typer.Option(
        None, "--sendy-from-name", envvar="SENDY_FROM_NAME", help="Sendy from name"
    ),
    sendy_from_email: Optional[str] = typer.Option(
        None, "--sendy-from-email", envvar="SENDY_FROM_EMAIL", help="Sendy from email address"
    ),
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", envvar="RSSPUSH_CONFIG", help="Path to config.yaml"
    ),
) -> None:
    """Read the list of feeds and send a push notification or an email for each new item found in them."""
    options = SinkOptions(
        send=send,
        use_pushover=use_pushover,
        pushover_api_key=pushover_api_key,
        pushover_user_key=pushover_user_key,
        use_sendy=use_sendy,
        sendy_api_hostname=sendy_api_hostname,
        sendy_api_key=sendy_api_key,
        sendy_list_id=sendy_list_id,
        sendy_from_name=sendy_from_name,
        sendy_from_email=sendy_from_email,
        email_template=email_template,
    )
    execute_run(options, USAGE, config_path=config_path, verbose=verbose)
