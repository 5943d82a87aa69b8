"""HTTP fetcher for listing pages."""

import logging
from typing import Optional

import httpx

from cinevood_rss.core import FetchError, Fetcher

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/127.0.0.0 Safari/537.36"
)


class HttpFetcher(Fetcher):
    """Retrieve raw markup over HTTP. No retries."""
    
    def __init__(
        self,
        timeout: float = 30.0,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.timeout = timeout
        self.headers = {"User-Agent": user_agent}
        self._transport = transport
    
    async def fetch(self, url: str) -> str:
        """Fetch url and return the response body."""
        logger.debug("Fetching %s", url)
        
        async with httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=True,
            headers=self.headers,
            transport=self._transport,
        ) as client:
            try:
                response = await client.get(url)
            except httpx.TimeoutException as e:
                raise FetchError(url, f"timed out: {e}") from e
            except httpx.HTTPError as e:
                raise FetchError(url, str(e) or e.__class__.__name__) from e
        
        if not response.is_success:
            raise FetchError(url, response.reason_phrase, status_code=response.status_code)
        
        logger.debug("Fetched %s (%d bytes)", url, len(response.content))
        return response.text
