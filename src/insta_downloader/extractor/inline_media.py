"""Ad-hoc ``"shortcode_media"`` objects embedded in script text."""

import json
import logging
import re
from typing import Optional

from ..errors import NormalizationError
from .base import ExtractionStrategy, MediaDescriptor, Page
from .normalizer import normalize_media

logger = logging.getLogger(__name__)


class InlineMediaStrategy(ExtractionStrategy):
    """Cut the media object out of script text up to the following ``"user"`` key."""

    name = "inline_media"

    MARKER = '"shortcode_media"'
    PATTERN = re.compile(r'"shortcode_media"\s*:\s*({.+?})\s*,\s*"user"')

    def extract(self, page: Page) -> Optional[MediaDescriptor]:
        for text in page.script_texts:
            if self.MARKER not in text:
                continue
            match = self.PATTERN.search(text)
            if not match:
                continue
            try:
                return normalize_media(json.loads(match.group(1)))
            except (json.JSONDecodeError, NormalizationError) as e:
                logger.warning("Failed to parse shortcode_media: %s", e)
        return None
