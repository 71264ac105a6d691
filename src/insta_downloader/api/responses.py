"""Mapping of results and errors to API responses."""

import logging

from fastapi.responses import JSONResponse

from ..errors import DownloaderError
from ..extractor import MediaDescriptor

logger = logging.getLogger(__name__)


def success_response(descriptor: MediaDescriptor) -> dict:
    return {**descriptor.to_dict(), "success": True}


def error_response(error: Exception) -> JSONResponse:
    """Turn any exception into a ``{"error": ...}`` response.

    Categorized errors keep their status and message; everything else
    becomes a generic 500.
    """
    if isinstance(error, DownloaderError):
        status_code = error.status_code
        message = error.detail if status_code == 400 else error.message
    else:
        logger.error("Unexpected error: %s", error, exc_info=error)
        status_code = DownloaderError.status_code
        message = DownloaderError.message

    return JSONResponse(status_code=status_code, content={"error": message})
