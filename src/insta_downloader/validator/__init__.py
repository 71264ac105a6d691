"""Validator module for checking Instagram post URLs."""

from .url_validator import (
    POST_CATEGORIES,
    normalize_url,
    is_valid_post_url,
    extract_shortcode,
)

__all__ = [
    "POST_CATEGORIES",
    "normalize_url",
    "is_valid_post_url",
    "extract_shortcode",
]
