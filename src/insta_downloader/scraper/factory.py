"""Scraper factory for selecting the appropriate scraper."""

from typing import Optional

from ..errors import InvalidInputError
from ..extractor import MediaDescriptor
from .base import BaseScraper
from .instagram import InstagramScraper


# Registry of available scrapers
_SCRAPERS: list[type[BaseScraper]] = [
    InstagramScraper,
]


def get_scraper(url: str, **kwargs) -> Optional[BaseScraper]:
    """
    Get the appropriate scraper for a URL.

    Args:
        url: URL to find scraper for
        **kwargs: Additional arguments passed to scraper constructor

    Returns:
        Scraper instance or None if no matching scraper
    """
    for scraper_class in _SCRAPERS:
        scraper = scraper_class(**kwargs)
        if scraper.supports(url):
            return scraper
    return None


async def resolve_url(url: str, **kwargs) -> MediaDescriptor:
    """
    Convenience function to resolve a post URL to its media.

    Raises:
        InvalidInputError: if no scraper handles the URL
        DownloaderError: whatever the scraper reports
    """
    if not url:
        raise InvalidInputError("URL is required")

    scraper = get_scraper(url, **kwargs)
    if not scraper:
        raise InvalidInputError()

    return await scraper.scrape(url)


def list_supported_platforms() -> list[str]:
    """List all supported platforms."""
    return sorted({scraper_class.platform for scraper_class in _SCRAPERS})
