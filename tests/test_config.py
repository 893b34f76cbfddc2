"""Tests for multivalue.config — DisplayConfig frozen dataclass."""

import logging

import pytest

from multivalue.config import DisplayConfig
from multivalue.errors import ConfigurationError


class TestDisplayConfig:
    def test_defaults(self) -> None:
        cfg = DisplayConfig()

        assert cfg.separator == "="
        assert cfg.strip is True
        assert cfg.layout == "pairs"
        assert cfg.sort_keys is False
        assert cfg.log_level == "warning"

    def test_override(self) -> None:
        cfg = DisplayConfig(separator=":", layout="grouped", sort_keys=True, log_level="debug")

        assert cfg.separator == ":"
        assert cfg.layout == "grouped"
        assert cfg.sort_keys is True
        assert cfg.level == logging.DEBUG

    def test_frozen(self) -> None:
        cfg = DisplayConfig()

        with pytest.raises(AttributeError):
            cfg.layout = "grouped"  # type: ignore[misc]

    def test_level_is_case_insensitive(self) -> None:
        assert DisplayConfig(log_level="INFO").level == logging.INFO
        assert DisplayConfig(log_level="Error").level == logging.ERROR


class TestValidation:
    def test_empty_separator(self) -> None:
        with pytest.raises(ConfigurationError, match="separator"):
            DisplayConfig(separator="")

    def test_unknown_layout(self) -> None:
        with pytest.raises(ConfigurationError, match="Unknown layout 'table'"):
            DisplayConfig(layout="table")

    def test_unknown_log_level(self) -> None:
        with pytest.raises(ConfigurationError, match="Unknown log level"):
            DisplayConfig(log_level="chatty")
