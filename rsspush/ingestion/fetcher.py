"""Feed fetcher."""

from typing import Optional

import httpx

from ..config.models import DEFAULT_USER_AGENT
from ..errors import FetchError


class FeedFetcher:
    """
    Fetch raw feed content over HTTP.

    Feeds are fetched here rather than through feedparser's own URL
    handling because some hosts (reddit among them) answer a generic
    client identity with an HTTP error, so an explicit User-Agent is sent.

    The body is returned whatever the HTTP status; only transport-level
    failures are errors. A single attempt is made.
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 30.0,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        """Initialize feed fetcher."""
        self.client = client
        self.timeout = timeout
        self.user_agent = user_agent

    async def fetch(self, uri: str) -> bytes:
        """Fetch the feed at ``uri`` and return its raw body."""
        headers = {"User-Agent": self.user_agent}
        try:
            if self.client is not None:
                response = await self.client.get(uri, headers=headers, timeout=self.timeout)
            else:
                async with httpx.AsyncClient(
                    timeout=self.timeout,
                    follow_redirects=True,
                ) as client:
                    response = await client.get(uri, headers=headers)
        except httpx.InvalidURL as e:
            raise FetchError(f"invalid URL {uri!r}: {e}") from e
        except httpx.HTTPError as e:
            raise FetchError(f"HTTP error: {e}") from e

        return response.content
