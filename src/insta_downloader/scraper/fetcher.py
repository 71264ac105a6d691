"""Single-shot page fetcher."""

import asyncio
import logging
from typing import Optional

import aiohttp

from ..errors import (
    UpstreamHTTPError,
    UpstreamNotFoundError,
    UpstreamThrottledError,
    UpstreamTimeoutError,
    UpstreamUnreachableError,
)

logger = logging.getLogger(__name__)


# Headers of an ordinary desktop browser navigation
BROWSER_HEADERS = {
    'User-Agent': (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    ),
    'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,image/apng,*/*;q=0.8',
    'Accept-Language': 'en-US,en;q=0.9',
    'Accept-Encoding': 'gzip, deflate',
    'Connection': 'keep-alive',
    'Upgrade-Insecure-Requests': '1',
    'Sec-Fetch-Dest': 'document',
    'Sec-Fetch-Mode': 'navigate',
    'Sec-Fetch-Site': 'none',
    'Cache-Control': 'max-age=0',
}


class PageFetcher:
    """Fetches a page once, with no retries."""

    def __init__(
        self,
        timeout: float = 30,
        max_redirects: int = 5,
        headers: Optional[dict] = None,
    ):
        self.timeout = timeout
        self.max_redirects = max_redirects
        self.headers = headers or dict(BROWSER_HEADERS)

    async def fetch(self, url: str) -> str:
        """
        GET a page and return its body as text.

        Args:
            url: Absolute URL to fetch

        Returns:
            Response body decoded as text

        Raises:
            UpstreamTimeoutError: if the total timeout elapsed
            UpstreamUnreachableError: on DNS failure or refused connection
            UpstreamNotFoundError: on a 404 response
            UpstreamThrottledError: on a 429 response
            UpstreamHTTPError: on any other non-2xx response or client error
        """
        timeout = aiohttp.ClientTimeout(total=self.timeout)

        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(
                    url,
                    headers=self.headers,
                    allow_redirects=True,
                    max_redirects=self.max_redirects,
                ) as response:
                    self._check_status(url, response.status)
                    return await response.text(errors='replace')

        except asyncio.TimeoutError:
            logger.warning("Timeout after %ss fetching %s", self.timeout, url)
            raise UpstreamTimeoutError(f"Timeout after {self.timeout}s")
        except aiohttp.ClientConnectorError as e:
            logger.warning("Could not connect to %s: %s", url, e)
            raise UpstreamUnreachableError(str(e))
        except aiohttp.TooManyRedirects:
            raise UpstreamHTTPError(f"More than {self.max_redirects} redirects")
        except aiohttp.ClientError as e:
            raise UpstreamHTTPError(f"Network error: {e}")

    def _check_status(self, url: str, status: int) -> None:
        if 200 <= status < 300:
            return

        logger.warning("HTTP %s from %s", status, url)
        if status == 404:
            raise UpstreamNotFoundError()
        if status == 429:
            raise UpstreamThrottledError()
        raise UpstreamHTTPError(f"HTTP {status}", http_status=status)
