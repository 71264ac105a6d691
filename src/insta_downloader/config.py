"""Configuration loading."""

import logging
from typing import Optional

from hydra import compose, initialize_config_module
from omegaconf import DictConfig
from rich.logging import RichHandler


CONFIG_MODULE = "insta_downloader.conf"
CONFIG_NAME = "config"


def load_config(overrides: Optional[list[str]] = None) -> DictConfig:
    """
    Compose the packaged config outside of a hydra entry point.

    Args:
        overrides: hydra-style overrides, e.g. ``["server.port=8080"]``

    Returns:
        Composed configuration
    """
    with initialize_config_module(version_base=None, config_module=CONFIG_MODULE):
        return compose(config_name=CONFIG_NAME, overrides=overrides or [])


def setup_logging(level: str = "INFO") -> None:
    """Route log records through rich, once per process."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
        force=True,
    )
