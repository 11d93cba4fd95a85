# Area: Shared Tests
"""Tests for ServerConfig validation."""

import logging

import pytest
from pydantic import ValidationError

from wordle_server._server_config import (
    DEFAULT_ANSWERS_PATH,
    DEFAULT_GUESSES_PATH,
    ServerConfig,
    validate_config,
)
from wordle_server.errors import UsageError


class TestServerConfigDefaults:
    """Defaults match the documented startup behaviour."""

    def test_defaults(self):
        config = validate_config({})
        assert config.answers_path == DEFAULT_ANSWERS_PATH
        assert config.guesses_path == DEFAULT_GUESSES_PATH
        assert config.hostname is None
        assert config.port == "0"
        assert config.log_file is None
        assert config.level == logging.INFO

    def test_display_hostname(self):
        assert validate_config({}).display_hostname == "ALL"
        assert validate_config({"hostname": "localhost"}).display_hostname == "localhost"

    def test_frozen(self):
        config = validate_config({})
        with pytest.raises(ValidationError):
            config.port = "4000"


class TestServerConfigValidation:
    """Bad values become UsageError."""

    def test_log_level_normalised(self):
        config = validate_config({"log_level": "debug"})
        assert config.log_level == "DEBUG"
        assert config.level == logging.DEBUG

    @pytest.mark.parametrize("values", [
        {"log_level": "chatty"},
        {"port": "  "},
        {"backlog": 0},
    ])
    def test_invalid_values(self, values):
        with pytest.raises(UsageError):
            validate_config(values)

    def test_port_stripped(self):
        assert validate_config({"port": " 4000 "}).port == "4000"

    def test_service_name_port_allowed(self):
        assert ServerConfig(port="http").port == "http"
