"""Legacy ``window._sharedData`` page state."""

import json
import logging
import re
from typing import Optional

from .base import ExtractionStrategy, MediaDescriptor, Page
from .normalizer import normalize_media

logger = logging.getLogger(__name__)


class SharedDataStrategy(ExtractionStrategy):
    """Read the post graph from the global state assigned in an inline script."""

    name = "shared_data"

    MARKER = 'window._sharedData'
    PATTERN = re.compile(r'window\._sharedData\s*=\s*({.+?});')

    def extract(self, page: Page) -> Optional[MediaDescriptor]:
        for text in page.script_texts:
            if self.MARKER not in text:
                continue
            try:
                descriptor = self._parse(text)
            except (ValueError, LookupError, TypeError, AttributeError) as e:
                logger.warning("Failed to parse _sharedData: %s", e)
                continue
            if descriptor:
                return descriptor
        return None

    def _parse(self, text: str) -> Optional[MediaDescriptor]:
        match = self.PATTERN.search(text)
        if not match:
            raise ValueError("no _sharedData assignment found")

        data = json.loads(match.group(1))
        post_page = (data.get('entry_data') or {}).get('PostPage')
        if not post_page:
            logger.debug("_sharedData has no PostPage entry")
            return None

        media = post_page[0]['graphql']['shortcode_media']
        return normalize_media(media)
