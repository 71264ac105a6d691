"""Offline checks on Instagram post URLs."""

import re
from typing import Optional


# Accepted post categories, in shortcode lookup order
POST_CATEGORIES = ("p", "reel", "tv", "stories")

POST_URL_PATTERN = re.compile(
    r'^https?://(www\.)?instagram\.com/(p|reel|tv|stories)/[\w-]+',
    re.IGNORECASE,
)

SHORTCODE_PATTERNS = [
    re.compile(r'instagram\.com/p/([^/?#]+)', re.IGNORECASE),
    re.compile(r'instagram\.com/reel/([^/?#]+)', re.IGNORECASE),
    re.compile(r'instagram\.com/tv/([^/?#]+)', re.IGNORECASE),
    re.compile(r'instagram\.com/stories/([^/?#]+)', re.IGNORECASE),
]


def normalize_url(url: str) -> str:
    """Strip whitespace and add ``https://`` when no scheme is given."""
    url = url.strip()
    if not url.startswith(('http://', 'https://')):
        url = 'https://' + url
    return url


def is_valid_post_url(url: Optional[str]) -> bool:
    """
    Check whether a string looks like a supported Instagram post URL.

    Covers posts, reels, IGTV and stories. Never touches the network and
    never raises: empty or non-string input is simply invalid.

    Args:
        url: Candidate URL, with or without scheme

    Returns:
        True if the URL matches one of the accepted shapes
    """
    if not url or not isinstance(url, str):
        return False
    return POST_URL_PATTERN.match(normalize_url(url)) is not None


def extract_shortcode(url: str) -> Optional[str]:
    """Return the post identifier from a normalized URL, or None."""
    for pattern in SHORTCODE_PATTERNS:
        match = pattern.search(url)
        if match:
            return match.group(1)
    return None
