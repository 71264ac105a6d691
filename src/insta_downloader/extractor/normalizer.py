"""Turn an Instagram media graph into a MediaDescriptor."""

from collections.abc import Mapping, Sequence
from typing import Any

from ..errors import NormalizationError
from .base import MediaDescriptor, MediaType


def _require_url(node: Mapping, key: str) -> str:
    value = node.get(key)
    if not value or not isinstance(value, str):
        raise NormalizationError(f"media node has no {key}")
    return value


def normalize_media(media: Any) -> MediaDescriptor:
    """
    Build a descriptor from a ``shortcode_media`` style object.

    Video posts use their video URL with the display URL as thumbnail.
    Carousels (``edge_sidecar_to_children``) only ever yield their first
    child; the remaining children are not looked at.

    Raises:
        NormalizationError: if the object is not a mapping or lacks the
            URL fields the chosen branch needs
    """
    if not isinstance(media, Mapping):
        raise NormalizationError("media graph is not an object")

    if media.get('is_video'):
        return MediaDescriptor(
            download_url=_require_url(media, 'video_url'),
            thumbnail_url=_require_url(media, 'display_url'),
            type=MediaType.VIDEO,
        )

    sidecar = media.get('edge_sidecar_to_children') or {}
    edges = sidecar.get('edges') if isinstance(sidecar, Mapping) else None
    if edges:
        if not isinstance(edges, Sequence) or isinstance(edges, str):
            raise NormalizationError("carousel edges is not a list")
        first = edges[0].get('node') if isinstance(edges[0], Mapping) else None
        if not isinstance(first, Mapping):
            raise NormalizationError("carousel child has no node")
        display_url = _require_url(first, 'display_url')
        return MediaDescriptor(
            download_url=display_url,
            thumbnail_url=display_url,
            type=MediaType.VIDEO if first.get('is_video') else MediaType.IMAGE,
        )

    display_url = _require_url(media, 'display_url')
    return MediaDescriptor(
        download_url=display_url,
        thumbnail_url=display_url,
        type=MediaType.IMAGE,
    )
