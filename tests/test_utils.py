"""Tests for configuration, exceptions and log formatting."""

import logging

import pytest

from stockboard.utils.config import AppConfig, get_config
from stockboard.utils.exceptions import (
    ConfigurationError,
    InventoryAPIError,
    ProductNotFoundError,
    ValidationError,
)
from stockboard.utils.logger import DetailsFormatter


class TestAppConfig:
    """Tests for YAML loading."""

    def test_bundled_config(self):
        config = get_config()

        assert config.server.graphql_path == "/graphql"
        assert config.dashboard.table_page_size == 10
        assert config.dashboard.explorer_page_size == 12

    def test_missing_file_uses_defaults(self, tmp_path):
        config = AppConfig(tmp_path / "absent.yml")

        assert config.dashboard.default_range == "7d"
        assert config.api.max_retries == 3

    def test_partial_file(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("dashboard:\n  table_page_size: 25\n")

        config = AppConfig(path)

        assert config.dashboard.table_page_size == 25
        assert config.dashboard.explorer_page_size == 12

    @pytest.mark.parametrize("content", [
        "dashboard: [unclosed\n",
        "dashboard:\n  table_page_size: lots\n",
    ])
    def test_invalid_file(self, tmp_path, content):
        path = tmp_path / "config.yml"
        path.write_text(content)

        with pytest.raises(ConfigurationError, match="Invalid configuration file"):
            AppConfig(path)

    def test_env_prefix(self, monkeypatch, tmp_path):
        monkeypatch.setenv("STOCKBOARD_PORT", "8123")

        assert AppConfig(tmp_path / "absent.yml").env.port == 8123


class TestExceptions:
    """Tests for error codes and GraphQL extensions."""

    @pytest.mark.parametrize("exc_class,code", [
        (ValidationError, "VALIDATION_ERROR"),
        (ProductNotFoundError, "NOT_FOUND"),
        (InventoryAPIError, "UPSTREAM_ERROR"),
        (ConfigurationError, "CONFIGURATION_ERROR"),
    ])
    def test_codes(self, exc_class, code):
        assert exc_class("boom").to_extensions() == {"code": code}

    def test_extensions_carry_details(self):
        exc = ValidationError("Stock cannot be negative", details={"stock": -1})

        assert exc.to_extensions() == {"code": "VALIDATION_ERROR", "details": {"stock": -1}}
        assert str(exc) == "Stock cannot be negative"


class TestDetailsFormatter:
    """Tests for the log formatter."""

    def _record(self, **extra):
        record = logging.LogRecord("stockboard.api", logging.ERROR, __file__, 1, "load failed", None, None)
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_plain_message(self):
        assert DetailsFormatter("%(message)s").format(self._record()) == "load failed"

    def test_appends_details(self):
        line = DetailsFormatter("%(message)s").format(self._record(details={"b": 2, "a": 1}))

        assert line == 'load failed | details={"a": 1, "b": 2}'
