"""
Unit tests for serving configuration.
"""

import dataclasses
import logging
from pathlib import Path

import pytest

from ehttpd.config import ServingConfig, configure_logging


ENV_VARS = [
    "EHTTPD_ROOT",
    "EHTTPD_URL_PREFIX",
    "EHTTPD_DEFAULT_TYPE",
    "EHTTPD_CHARSET",
    "EHTTPD_MIME_CASE_SENSITIVE",
    "EHTTPD_BUFFER_SIZE",
    "EHTTPD_LOG_LEVEL",
]


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestDefaults:
    """Tests for default values."""

    def test_defaults(self):
        config = ServingConfig()

        assert config.root == "."
        assert config.url_prefix == ""
        assert config.default_content_type == "application/octet-stream"
        assert config.charset is None
        assert config.case_sensitive_mime is True
        assert config.buffer_size == 8192
        assert config.log_level == "INFO"

    def test_frozen(self):
        """Test the config cannot be changed after creation."""
        config = ServingConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.root = "/tmp"


class TestFromEnv:
    """Tests for ServingConfig.from_env."""

    def test_empty_environment(self, clean_env):
        assert ServingConfig.from_env() == ServingConfig()

    def test_reads_variables(self, clean_env, serving_root: Path):
        clean_env.setenv("EHTTPD_ROOT", str(serving_root))
        clean_env.setenv("EHTTPD_URL_PREFIX", "/static")
        clean_env.setenv("EHTTPD_DEFAULT_TYPE", "text/plain")
        clean_env.setenv("EHTTPD_CHARSET", "utf-8")
        clean_env.setenv("EHTTPD_MIME_CASE_SENSITIVE", "false")
        clean_env.setenv("EHTTPD_BUFFER_SIZE", "1024")
        clean_env.setenv("EHTTPD_LOG_LEVEL", "DEBUG")

        config = ServingConfig.from_env()

        assert config.root == str(serving_root)
        assert config.url_prefix == "/static"
        assert config.default_content_type == "text/plain"
        assert config.charset == "utf-8"
        assert config.case_sensitive_mime is False
        assert config.buffer_size == 1024
        assert config.log_level == "DEBUG"
        config.validate()

    def test_empty_default_type_refuses(self, clean_env):
        """Test an empty default type disables serving unknown types."""
        clean_env.setenv("EHTTPD_DEFAULT_TYPE", "")
        assert ServingConfig.from_env().default_content_type is None

    @pytest.mark.parametrize("value, expected", [
        ("1", True), ("yes", True), ("0", False), ("off", False), ("No", False),
    ])
    def test_case_sensitivity_flag(self, clean_env, value: str, expected: bool):
        clean_env.setenv("EHTTPD_MIME_CASE_SENSITIVE", value)
        assert ServingConfig.from_env().case_sensitive_mime is expected


class TestValidate:
    """Tests for ServingConfig.validate."""

    def test_valid(self, serving_root: Path):
        ServingConfig(root=str(serving_root), url_prefix="/static").validate()

    @pytest.mark.parametrize("overrides", [
        {"buffer_size": 0},
        {"log_level": "LOUD"},
        {"url_prefix": "static"},
    ])
    def test_invalid_values(self, serving_root: Path, overrides: dict):
        config = ServingConfig(root=str(serving_root), **overrides)
        with pytest.raises(ValueError):
            config.validate()

    def test_missing_root(self, tmp_path: Path):
        with pytest.raises(ValueError, match="not a directory"):
            ServingConfig(root=str(tmp_path / "missing")).validate()


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_sets_package_level(self):
        logger = logging.getLogger("ehttpd")
        previous = logger.level
        try:
            configure_logging("ERROR")
            assert logger.level == logging.ERROR
            configure_logging("debug")
            assert logger.level == logging.DEBUG
        finally:
            logger.setLevel(previous)
