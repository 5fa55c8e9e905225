"""
Tests for environment configuration and logging setup.
"""

import importlib
import os
import subprocess
import sys
from pathlib import Path

import pytest

import src.config as config

PROJECT_ROOT = Path(__file__).resolve().parent.parent

CONFIG_VARS = ("APP_HOST", "APP_PORT", "APP_RELOAD", "LOG_LEVEL")


@pytest.fixture
def reload_config(monkeypatch):
    """Recarrega src.config com o ambiente ajustado pelo teste."""
    for name in CONFIG_VARS:
        monkeypatch.delenv(name, raising=False)

    def _reload(**env):
        for name, value in env.items():
            monkeypatch.setenv(name, value)
        return importlib.reload(config)

    yield _reload

    monkeypatch.undo()
    importlib.reload(config)


class TestSettings:

    def test_defaults(self, reload_config):
        cfg = reload_config()

        assert cfg.APP_HOST == "0.0.0.0"
        assert cfg.APP_PORT == 8000
        assert cfg.APP_RELOAD is False
        assert cfg.LOG_LEVEL == "INFO"

    def test_values_from_environment(self, reload_config):
        cfg = reload_config(APP_HOST="127.0.0.1", APP_PORT="9001", LOG_LEVEL="debug")

        assert cfg.APP_HOST == "127.0.0.1"
        assert cfg.APP_PORT == 9001
        assert cfg.LOG_LEVEL == "DEBUG"

    @pytest.mark.parametrize("value", ["1", "true", "TRUE", "yes"])
    def test_reload_truthy_values(self, reload_config, value):
        assert reload_config(APP_RELOAD=value).APP_RELOAD is True

    @pytest.mark.parametrize("value", ["0", "false", "no", "on", ""])
    def test_reload_other_values_are_false(self, reload_config, value):
        assert reload_config(APP_RELOAD=value).APP_RELOAD is False


class TestLoggingStreams:

    def _run_demo(self, log_level):
        env = dict(os.environ, LOG_LEVEL=log_level)
        return subprocess.run(
            [sys.executable, "demo.py"],
            cwd=PROJECT_ROOT,
            env=env,
            capture_output=True,
            text=True,
            timeout=60,
        )

    def test_debug_logs_go_to_stderr_only(self):
        result = self._run_demo("DEBUG")

        assert result.returncode == 0
        assert result.stdout.splitlines() == [
            "Placing food order.",
            "Placing drink order.",
            "Calculating cost for food.",
            "Calculating cost for drink.",
        ]
        assert "DEBUG" in result.stderr
        assert "DEBUG" not in result.stdout

    def test_warning_level_keeps_stderr_quiet(self):
        result = self._run_demo("WARNING")

        assert result.returncode == 0
        assert len(result.stdout.splitlines()) == 4
        assert "DEBUG" not in result.stderr
