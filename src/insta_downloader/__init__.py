"""Instagram Downloader - resolve Instagram posts to direct media URLs."""

__version__ = "1.0.0"
