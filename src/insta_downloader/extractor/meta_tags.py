"""Open Graph meta tag fallback."""

from typing import Optional

from .base import ExtractionStrategy, MediaDescriptor, MediaType, Page


class MetaTagStrategy(ExtractionStrategy):
    name = "meta_tags"

    def extract(self, page: Page) -> Optional[MediaDescriptor]:
        video = page.meta_content('og:video')
        image = page.meta_content('og:image')

        if video:
            return MediaDescriptor(
                download_url=video,
                thumbnail_url=image or video,
                type=MediaType.VIDEO,
            )
        if image:
            return MediaDescriptor(
                download_url=image,
                thumbnail_url=image,
                type=MediaType.IMAGE,
            )
        return None
