"""FastAPI web server for the downloader."""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from omegaconf import DictConfig
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..config import load_config, setup_logging
from ..errors import InvalidInputError
from ..scraper import BaseScraper, InstagramScraper
from ..validator import is_valid_post_url
from .responses import error_response, success_response

logger = logging.getLogger(__name__)

# Get module directory for static assets
MODULE_DIR = Path(__file__).parent


class DownloadRequest(BaseModel):
    """Request body for resolving a post."""
    url: Optional[Any] = None


def create_app(
    cfg: Optional[DictConfig] = None,
    scraper: Optional[BaseScraper] = None,
) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        cfg: Composed configuration; the packaged defaults when None
        scraper: Scraper to resolve posts with; built from config when None

    Returns:
        Configured FastAPI app
    """
    cfg = cfg if cfg is not None else load_config()

    app = FastAPI(
        title="Instagram Downloader",
        description="Resolve Instagram posts to direct media URLs",
        version="1.0.0",
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    scraper = scraper or InstagramScraper(
        timeout=cfg.fetcher.timeout,
        max_redirects=cfg.fetcher.max_redirects,
    )

    # Mount static files
    static_dir = MODULE_DIR / "static"
    if static_dir.exists():
        app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")

    # ==================== ERROR HANDLERS ====================

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return JSONResponse(status_code=404, content={"error": "Endpoint not found"})
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": "Request body must be JSON with a url field"})

    @app.exception_handler(Exception)
    async def internal_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s", request.url.path)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    # ==================== PAGE ROUTES ====================

    @app.get("/", response_class=HTMLResponse)
    async def index():
        """Serve the front page."""
        index_path = static_dir / "index.html"
        if not index_path.exists():
            return HTMLResponse("<h1>index.html not found</h1>", status_code=500)
        return FileResponse(index_path)

    # ==================== DOWNLOAD API ====================

    @app.post("/api/download")
    async def download(body: DownloadRequest):
        """Resolve a post URL to its media URLs."""
        url = body.url

        if not url:
            return error_response(InvalidInputError("URL is required"))

        if not isinstance(url, str) or not is_valid_post_url(url):
            return error_response(InvalidInputError())

        logger.info("Processing request for URL: %s", url)

        try:
            descriptor = await scraper.scrape(url)
        except Exception as e:
            return error_response(e)

        return success_response(descriptor)

    @app.get("/api/health")
    async def health():
        """Health check."""
        return {
            "status": "OK",
            "message": "Instagram Downloader API is running",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    return app


def run_server(cfg: Optional[DictConfig] = None) -> None:
    """
    Run the API server.

    Args:
        cfg: Composed configuration; the packaged defaults when None
    """
    import uvicorn

    cfg = cfg if cfg is not None else load_config()
    setup_logging(cfg.logging.level)

    app = create_app(cfg)
    logger.info("Health check: http://localhost:%s/api/health", cfg.server.port)
    uvicorn.run(app, host=cfg.server.host, port=int(cfg.server.port))
