"""
Unit Tests for Configuration and Logging
"""

import json
import logging

from posture.config import Settings
from posture.log import JsonFormatter, configure_logging


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch):
        """Test defaults when nothing is configured."""
        for name in ("GITLAB_BASE_URL", "SEARCH_MAX_PAGES", "PROBE_MAX_WORKERS", "LOG_FORMAT"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings()

        assert settings.gitlab.base_url == "https://gitlab.com"
        assert settings.search.max_pages == 10
        assert settings.probe.max_workers == 4
        assert settings.log.format == "json"

    def test_environment_overrides(self, monkeypatch):
        """Test reading values from environment variables."""
        monkeypatch.setenv("GITLAB_BASE_URL", "https://gitlab.example.com")
        monkeypatch.setenv("SEARCH_MAX_PAGES", "3")
        monkeypatch.setenv("GITHUB_AUTH_TOKEN", "ghp_test")

        settings = Settings()

        assert settings.gitlab.base_url == "https://gitlab.example.com"
        assert settings.search.max_pages == 3
        assert settings.github.token == "ghp_test"


class TestLogging:
    """Tests for logging setup."""

    def test_json_formatter(self):
        record = logging.LogRecord("posture.test", logging.INFO, __file__, 1, "hello %s", ("world",), None)

        payload = json.loads(JsonFormatter().format(record))

        assert payload["message"] == "hello world"
        assert payload["level"] == "INFO"
        assert payload["logger"] == "posture.test"

    def test_configure_logging_replaces_handler(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("LOG_FORMAT", "text")
        root = logging.getLogger()
        previous_level = root.level

        first = configure_logging(Settings())
        second = configure_logging(Settings())
        try:
            assert first not in root.handlers
            assert second in root.handlers
            assert second.get_name() == "posture"
            assert sum(h.get_name() == "posture" for h in root.handlers) == 1
            assert root.level == logging.DEBUG
            assert not isinstance(second.formatter, JsonFormatter)
        finally:
            root.removeHandler(second)
            root.setLevel(previous_level)
