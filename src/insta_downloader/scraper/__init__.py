"""Scraper module for resolving social media posts to their media."""

from .base import BaseScraper
from .fetcher import BROWSER_HEADERS, PageFetcher
from .instagram import InstagramScraper
from .factory import get_scraper, resolve_url, list_supported_platforms

__all__ = [
    "BaseScraper",
    "BROWSER_HEADERS",
    "PageFetcher",
    "InstagramScraper",
    "get_scraper",
    "resolve_url",
    "list_supported_platforms",
]
