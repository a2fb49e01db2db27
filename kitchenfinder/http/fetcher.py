"""
Async JSON fetcher shared by the directory and directions clients
"""

import logging
from typing import Any, Dict, Optional

import httpx

from kitchenfinder.core.errors import FetchError

FETCH_FAILED_MESSAGE = "Could not complete request"


class JsonFetcher:
    """
    Issues GET requests and parses the response body as JSON
    Closes its httpx.AsyncClient on exit unless the client was passed in
    """

    def __init__(self, timeout: Optional[float] = 30.0, client: Optional[httpx.AsyncClient] = None):
        self.timeout = timeout
        self.logger = logging.getLogger(__name__)
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(
            timeout=timeout,
            headers={"Accept": "application/json"},
            follow_redirects=True,
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self):
        """Close HTTP client if this fetcher created it"""
        if self._owns_client:
            await self.client.aclose()

    async def fetch(self, url: str, params: Optional[Dict[str, str]] = None) -> Any:
        """
        GET a URL and return the decoded JSON body

        Args:
            url: Endpoint to request
            params: Optional query parameters (URL-encoded by httpx)

        Returns:
            Parsed JSON value

        Raises:
            FetchError: On transport errors, error statuses or non-JSON bodies
        """
        try:
            response = await self.client.get(url, params=params)
            response.raise_for_status()
        except httpx.HTTPError as e:
            self.logger.error(f"HTTP error fetching {url}: {e}")
            raise FetchError(FETCH_FAILED_MESSAGE) from e

        try:
            return response.json()
        except ValueError as e:
            # Parse details stay in the log only
            self.logger.debug(f"Invalid JSON from {url}: {e}")
            raise FetchError(FETCH_FAILED_MESSAGE) from e
