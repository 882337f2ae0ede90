"""Notification sink interface."""

from abc import ABC, abstractmethod
from typing import Optional

import httpx

from ..errors import DispatchError
from ..models import NotificationRequest


class NotificationSink(ABC):
    """
    Abstract base class for notification targets.

    A sink delivers one rendered notification per call and does not
    deduplicate: at-most-once delivery comes from the SeenStore ordering
    in the feed processor.
    """

    name = "sink"

    def __init__(self, client: Optional[httpx.AsyncClient] = None, timeout: float = 30.0) -> None:
        self.client = client
        self.timeout = timeout

    @abstractmethod
    async def dispatch(self, request: NotificationRequest) -> None:
        """
        Deliver a notification.

        Args:
            request: Rendered notification

        Raises:
            DispatchError: If the service rejected the notification or
                could not be reached
        """
        pass

    async def _post(self, url: str, data: dict) -> httpx.Response:
        """POST form data, translating transport failures to DispatchError."""
        try:
            if self.client is not None:
                return await self.client.post(url, data=data, timeout=self.timeout)
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                return await client.post(url, data=data)
        except httpx.HTTPError as e:
            raise DispatchError(self.name, f"HTTP error: {e}") from e
