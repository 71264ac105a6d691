"""Tests for the run.py runner."""

import importlib.util
import sys
from pathlib import Path

import pytest


RUN_PATH = Path(__file__).parent.parent / "run.py"


@pytest.fixture
def runner():
    spec = importlib.util.spec_from_file_location("run", RUN_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestRunner:
    """Tests for argument handling."""

    def test_rejects_non_numeric_port(self, runner, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["run.py", "--port", "abc"])

        with pytest.raises(SystemExit) as exc_info:
            runner.main()

        assert exc_info.value.code == 2
        assert "Invalid port: abc" in capsys.readouterr().out

    def test_help(self, runner, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["run.py", "--help"])

        runner.main()

        assert "--port PORT" in capsys.readouterr().out
