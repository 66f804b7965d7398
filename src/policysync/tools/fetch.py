"""Policy document download tool."""

from __future__ import annotations

import logging

import httpx

from policysync.config.settings import Settings
from policysync.core.errors import FetchError


logger = logging.getLogger(__name__)


class DocumentFetcher:
    """Downloads policy documents over HTTP.

    A single attempt per URL: no retries and no timeout.
    """

    def __init__(self, settings: Settings | None = None, client: httpx.AsyncClient | None = None) -> None:
        """Initialize the fetcher.

        Args:
            settings: Application settings. If None, loads from environment.
            client: Optional preconfigured client, used as-is and left open.
        """
        if settings is None:
            settings = Settings()
        self.user_agent = settings.sync.user_agent
        self._client = client

    def _new_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=None,
            follow_redirects=True,
            headers={"User-Agent": self.user_agent},
        )

    async def fetch(self, url: str) -> bytes:
        """Download a document and return the response body.

        Args:
            url: Document URL.

        Returns:
            Raw response bytes.

        Raises:
            FetchError: On a non-success status or a transport failure.
        """
        logger.debug("Downloading %s", url)
        try:
            if self._client is not None:
                response = await self._client.get(url)
            else:
                async with self._new_client() as client:
                    response = await client.get(url)
        except httpx.HTTPError as e:
            raise FetchError(url, str(e) or type(e).__name__) from e

        if not response.is_success:
            raise FetchError(url, response.reason_phrase or f"HTTP {response.status_code}", response.status_code)

        logger.debug("Downloaded %d bytes from %s", len(response.content), url)
        return response.content
