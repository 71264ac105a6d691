from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from enum import Enum
from functools import cached_property
from typing import Optional
from urllib.parse import urljoin

from bs4 import BeautifulSoup


# Script types whose inline text may carry embedded page state
SCRIPT_TYPES = ["text/javascript", "application/json"]


class MediaType(str, Enum):
    IMAGE = "image"
    VIDEO = "video"


@dataclass(frozen=True)
class MediaDescriptor:
    download_url: str
    thumbnail_url: str
    type: MediaType

    def absolutize(self, base_url: Optional[str]) -> "MediaDescriptor":
        """Resolve relative URLs against the page they were found on."""
        if not base_url:
            return self
        return replace(
            self,
            download_url=urljoin(base_url, self.download_url),
            thumbnail_url=urljoin(base_url, self.thumbnail_url),
        )

    def to_dict(self) -> dict:
        return {
            "downloadUrl": self.download_url,
            "thumbnailUrl": self.thumbnail_url,
            "type": self.type.value,
        }


class Page:
    """A fetched HTML document, parsed lazily and at most once."""

    def __init__(self, html: str, url: Optional[str] = None):
        self.html = html
        self.url = url

    @cached_property
    def soup(self) -> BeautifulSoup:
        return BeautifulSoup(self.html, 'html.parser')

    @cached_property
    def script_texts(self) -> list[str]:
        """Text of every inline script block of a recognized type."""
        return [
            script.string
            for script in self.soup.find_all('script', attrs={'type': SCRIPT_TYPES})
            if script.string
        ]

    def meta_content(self, property_name: str) -> Optional[str]:
        """Content of a ``<meta property=...>`` tag, None when absent or empty."""
        tag = self.soup.find('meta', attrs={'property': property_name})
        if tag is None:
            return None
        content = (tag.get('content') or '').strip()
        return content or None


class ExtractionStrategy(ABC):
    name: str = "unknown"

    @abstractmethod
    def extract(self, page: Page) -> Optional[MediaDescriptor]:
        """Return the media found in the page, or None if not applicable."""
        pass
