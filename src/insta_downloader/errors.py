"""Error categories surfaced to API callers."""

from typing import Optional


class DownloaderError(Exception):
    """Base class for all errors reported back to the caller.

    Each subclass carries the HTTP status and the user-facing message the
    API responds with.
    """

    status_code: int = 500
    message: str = "Failed to process the request. Please try again later."

    def __init__(self, detail: Optional[str] = None):
        super().__init__(detail or self.message)
        self.detail = detail or self.message


class InvalidInputError(DownloaderError):
    """Missing or malformed post URL."""

    status_code = 400
    message = "Please provide a valid Instagram URL (post, reel, stories, or IGTV)"


class UpstreamUnreachableError(DownloaderError):
    """DNS failure or refused connection."""

    status_code = 503
    message = "Network error. Please check your internet connection and try again."


class UpstreamTimeoutError(UpstreamUnreachableError):
    """The page did not arrive within the fetch timeout."""


class UpstreamNotFoundError(DownloaderError):
    status_code = 404
    message = "Post not found. The URL may be incorrect or the post may have been deleted."


class UpstreamThrottledError(DownloaderError):
    status_code = 429
    message = "Too many requests. Please wait a moment and try again."


class UpstreamHTTPError(DownloaderError):
    """Any other non-2xx upstream response or client failure."""

    def __init__(self, detail: Optional[str] = None, http_status: Optional[int] = None):
        super().__init__(detail)
        self.http_status = http_status


class ExtractionFailedError(DownloaderError):
    """The page was fetched but no strategy found media in it."""

    status_code = 404
    message = "Could not retrieve content. The post may be private, deleted, or not supported."


class NormalizationError(ValueError):
    """A media graph lacks the fields needed to build a descriptor.

    Never reaches the caller: extraction strategies treat it as
    "not applicable" and the pipeline moves on.
    """
