"""Media extraction pipeline - find the post media inside a fetched page."""

import logging
from typing import List, Optional

from ..errors import ExtractionFailedError
from .base import ExtractionStrategy, MediaDescriptor, MediaType, Page
from .normalizer import normalize_media
from .shared_data import SharedDataStrategy
from .inline_media import InlineMediaStrategy
from .meta_tags import MetaTagStrategy

logger = logging.getLogger(__name__)


# Tried in order, first hit wins
_STRATEGIES: List[ExtractionStrategy] = [
    SharedDataStrategy(),
    InlineMediaStrategy(),
    MetaTagStrategy(),  # Generic fallback
]


def get_all_strategies() -> List[ExtractionStrategy]:
    return list(_STRATEGIES)


def register_strategy(strategy: ExtractionStrategy, index: Optional[int] = None) -> None:
    """
    Add a strategy to the pipeline.

    Args:
        strategy: Strategy instance to register
        index: Position in the priority order; appended last when None
    """
    if strategy in _STRATEGIES:
        return
    if index is None:
        _STRATEGIES.append(strategy)
    else:
        _STRATEGIES.insert(index, strategy)


def unregister_strategy(strategy: ExtractionStrategy) -> None:
    if strategy in _STRATEGIES:
        _STRATEGIES.remove(strategy)


def find_media(
    html: str,
    base_url: Optional[str] = None,
    strategies: Optional[List[ExtractionStrategy]] = None,
) -> Optional[MediaDescriptor]:
    """Run the strategies over a page and return the first descriptor, or None.

    A strategy that raises is logged and skipped like one that found nothing.
    """
    page = Page(html, url=base_url)

    for strategy in strategies if strategies is not None else get_all_strategies():
        try:
            descriptor = strategy.extract(page)
        except Exception:
            logger.exception("Extraction strategy %s failed", strategy.name)
            continue

        if descriptor:
            logger.info("Media found by %s strategy (%s)", strategy.name, descriptor.type.value)
            return descriptor.absolutize(base_url)
        logger.debug("%s strategy found nothing", strategy.name)

    return None


def extract_media(
    html: str,
    base_url: Optional[str] = None,
    strategies: Optional[List[ExtractionStrategy]] = None,
) -> MediaDescriptor:
    """Like find_media, but raise when no strategy finds anything.

    Raises:
        ExtractionFailedError: if every strategy came up empty
    """
    descriptor = find_media(html, base_url=base_url, strategies=strategies)
    if descriptor is None:
        raise ExtractionFailedError()
    return descriptor


__all__ = [
    "ExtractionStrategy",
    "MediaDescriptor",
    "MediaType",
    "Page",
    "SharedDataStrategy",
    "InlineMediaStrategy",
    "MetaTagStrategy",
    "normalize_media",
    "get_all_strategies",
    "register_strategy",
    "unregister_strategy",
    "find_media",
    "extract_media",
]
