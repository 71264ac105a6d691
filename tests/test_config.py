"""Tests for configuration loading."""

import logging

from rich.logging import RichHandler

from insta_downloader.config import load_config, setup_logging


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("PORT", raising=False)
        cfg = load_config()

        assert cfg.server.port == 5000
        assert cfg.fetcher.timeout == 30
        assert cfg.fetcher.max_redirects == 5
        assert cfg.url is None
        assert cfg.serve is False

    def test_port_from_environment(self, monkeypatch):
        monkeypatch.setenv("PORT", "8081")
        cfg = load_config()

        assert cfg.server.port == 8081

    def test_overrides(self, monkeypatch):
        monkeypatch.delenv("PORT", raising=False)
        cfg = load_config(["fetcher.timeout=10", "server.port=9000"])

        assert cfg.fetcher.timeout == 10
        assert cfg.server.port == 9000


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_replaces_existing_root_handlers(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

        setup_logging("debug")

        assert len(calls) == 1
        assert calls[0]["force"] is True
        assert calls[0]["level"] == "DEBUG"
        assert isinstance(calls[0]["handlers"][0], RichHandler)
