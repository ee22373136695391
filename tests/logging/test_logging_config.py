"""Tests for logger configuration."""

import pytest

from lexbench.logging import LoggerConfig, LogLevel


class TestLoggerConfig:
    """Validate LoggerConfig inputs."""

    def test_default_values(self) -> None:
        cfg = LoggerConfig()
        assert cfg.base_level is LogLevel.INFO
        assert cfg.do_stdout is True
        assert cfg.flush_interval_s == 1.0
        assert cfg.buffer_size == 10000
        assert "%(message)s" in cfg.str_format

    def test_level_ordering(self) -> None:
        assert LogLevel.TRACE < LogLevel.DEBUG < LogLevel.INFO < LogLevel.WARNING < LogLevel.ERROR

    def test_invalid_flush_interval(self) -> None:
        with pytest.raises(ValueError):
            LoggerConfig(flush_interval_s=0.0)

    def test_invalid_buffer_size(self) -> None:
        with pytest.raises(ValueError):
            LoggerConfig(buffer_size=0)

    def test_format_requires_message(self) -> None:
        with pytest.raises(ValueError, match="message"):
            LoggerConfig(str_format="%(asctime)s %(levelname)s")
