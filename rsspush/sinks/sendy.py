"""Sendy email-campaign sink."""

from pathlib import Path
from string import Template
from typing import Optional

import httpx

from ..errors import ConfigurationError, DispatchError
from ..models import NotificationRequest
from .base import NotificationSink

CAMPAIGN_CREATE_PATH = "/api/campaigns/create.php"


class SendySink(NotificationSink):
    """
    Create and immediately send a Sendy campaign for each notification.

    An optional template file is rendered with ``$title`` and ``$body``
    (the entry's original markup) to produce the HTML part.
    """

    name = "sendy"

    def __init__(
        self,
        hostname: str,
        api_key: str,
        list_id: str,
        from_name: str,
        from_email: str,
        template_path: Optional[Path] = None,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 30.0,
    ) -> None:
        super().__init__(client=client, timeout=timeout)
        self.hostname = hostname
        self.api_key = api_key
        self.list_id = list_id
        self.from_name = from_name
        self.from_email = from_email
        self.template = self._load_template(template_path) if template_path else None

    @staticmethod
    def _load_template(path: Path) -> Template:
        try:
            return Template(Path(path).expanduser().read_text(encoding="utf-8"))
        except OSError as e:
            raise ConfigurationError(f"can't read email template {path}: {e}") from e

    @property
    def api_url(self) -> str:
        return f"https://{self.hostname}{CAMPAIGN_CREATE_PATH}"

    def render_html(self, request: NotificationRequest) -> str:
        if self.template is None:
            return request.rich_text_body
        return self.template.safe_substitute(title=request.title, body=request.rich_text_body)

    def build_payload(self, request: NotificationRequest) -> dict:
        return {
            "api_key": self.api_key,
            "from_name": self.from_name,
            "from_email": self.from_email,
            "reply_to": self.from_email,
            "title": request.title,
            "subject": request.title,
            "html_text": self.render_html(request),
            "plain_text": request.plain_text_body,
            "list_ids": self.list_id,
            "send_campaign": "1",
        }

    async def dispatch(self, request: NotificationRequest) -> None:
        response = await self._post(self.api_url, self.build_payload(request))
        if response.status_code != 200:
            raise DispatchError(self.name, f"{response.status_code} {response.reason_phrase}")
