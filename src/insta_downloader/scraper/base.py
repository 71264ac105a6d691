"""Base scraper interface."""

from abc import ABC, abstractmethod
from typing import Optional

from ..extractor import MediaDescriptor
from .fetcher import PageFetcher


class BaseScraper(ABC):
    """Abstract base class for post media scrapers."""

    platform: str = "unknown"

    def __init__(
        self,
        timeout: float = 30,
        max_redirects: int = 5,
        fetcher: Optional[PageFetcher] = None,
    ):
        self.fetcher = fetcher or PageFetcher(timeout=timeout, max_redirects=max_redirects)

    @abstractmethod
    def supports(self, url: str) -> bool:
        """
        Check if this scraper supports the given URL.

        Args:
            url: URL to check

        Returns:
            True if this scraper can handle the URL
        """
        pass

    @abstractmethod
    async def scrape(self, url: str) -> MediaDescriptor:
        """
        Resolve the media behind a post URL.

        Args:
            url: URL to scrape

        Returns:
            MediaDescriptor for the post

        Raises:
            DownloaderError: categorized failure
        """
        pass
