"""Instagram scraper reading media from the post page HTML."""

import logging

from ..errors import InvalidInputError
from ..extractor import MediaDescriptor, extract_media
from ..validator import extract_shortcode, is_valid_post_url, normalize_url
from .base import BaseScraper

logger = logging.getLogger(__name__)


class InstagramScraper(BaseScraper):
    """Scraper for Instagram posts, reels, IGTV and stories."""

    platform = "instagram"

    def supports(self, url: str) -> bool:
        """Check if URL is an Instagram post URL."""
        return is_valid_post_url(url)

    async def scrape(self, url: str) -> MediaDescriptor:
        """
        Fetch the post page and pull the media out of it.

        Works only for public posts; private or deleted posts end up as
        ExtractionFailedError or UpstreamNotFoundError.
        """
        url = normalize_url(url)

        shortcode = extract_shortcode(url)
        if not shortcode:
            raise InvalidInputError("Invalid Instagram URL format")

        logger.info("Scraping URL: %s (shortcode %s)", url, shortcode)

        html = await self.fetcher.fetch(url)
        return extract_media(html, base_url=url)
