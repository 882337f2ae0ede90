"""Pushover push-notification sink."""

from typing import Optional

import httpx

from ..errors import DispatchError
from ..models import NotificationRequest
from .base import NotificationSink

PUSHOVER_API_URL = "https://api.pushover.net/1/messages.json"

# Limits documented by the Pushover API.
MAX_MESSAGE_LENGTH = 1024
MAX_TITLE_LENGTH = 250
MAX_URL_LENGTH = 512


def _truncate(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    return text[: limit - 1].rstrip() + "…"


class PushoverSink(NotificationSink):
    """Send each notification to one Pushover user or group."""

    name = "pushover"

    def __init__(
        self,
        api_key: str,
        user_key: str,
        with_title: bool = True,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 30.0,
        api_url: str = PUSHOVER_API_URL,
    ) -> None:
        """
        Initialize Pushover sink.

        Args:
            api_key: Application API token
            user_key: User (or group) key of the recipient
            with_title: Send the entry title as the message title
            client: Shared HTTP client, if any
            timeout: Request timeout in seconds
            api_url: Messages endpoint
        """
        super().__init__(client=client, timeout=timeout)
        self.api_key = api_key
        self.user_key = user_key
        self.with_title = with_title
        self.api_url = api_url

    def build_payload(self, request: NotificationRequest) -> dict:
        # Pushover rejects blank messages.
        message = request.plain_text_body or request.title or request.link or request.identifier
        payload = {
            "token": self.api_key,
            "user": self.user_key,
            "message": _truncate(message, MAX_MESSAGE_LENGTH),
        }
        if self.with_title and request.title:
            payload["title"] = _truncate(request.title, MAX_TITLE_LENGTH)
        if request.link and len(request.link) <= MAX_URL_LENGTH:
            payload["url"] = request.link
        return payload

    async def dispatch(self, request: NotificationRequest) -> None:
        response = await self._post(self.api_url, self.build_payload(request))

        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        if response.status_code != 200 or body.get("status") != 1:
            errors = body.get("errors") or [f"{response.status_code} {response.reason_phrase}"]
            raise DispatchError(self.name, "; ".join(str(e) for e in errors))
