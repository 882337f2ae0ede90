"""Notification sinks."""

from typing import List, Optional

import httpx

from ..config import SinkOptions
from .base import NotificationSink
from .pushover import PushoverSink
from .sendy import SendySink


def build_sinks(
    options: SinkOptions,
    client: Optional[httpx.AsyncClient] = None,
    timeout: float = 30.0,
) -> List[NotificationSink]:
    """
    Validate sink options and construct the enabled sinks, in dispatch order.

    Raises:
        ConfigurationError: If an enabled sink is missing required settings.
    """
    options.validate_enabled()

    if not options.send:
        return []

    sinks: List[NotificationSink] = []
    if options.use_pushover:
        sinks.append(PushoverSink(
            api_key=options.pushover_api_key,
            user_key=options.pushover_user_key,
            with_title=options.pushover_with_title,
            client=client,
            timeout=timeout,
        ))
    if options.use_sendy:
        sinks.append(SendySink(
            hostname=options.sendy_api_hostname,
            api_key=options.sendy_api_key,
            list_id=options.sendy_list_id,
            from_name=options.sendy_from_name,
            from_email=options.sendy_from_email,
            template_path=options.email_template,
            client=client,
            timeout=timeout,
        ))
    return sinks


__all__ = ["NotificationSink", "PushoverSink", "SendySink", "build_sinks"]
