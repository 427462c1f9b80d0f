"""Tests for logging configuration utilities."""

from __future__ import annotations

import json
import logging
from pathlib import Path
import sys

from unitsteps.core.sampling import Sampler
from unitsteps.core.utils.logging import (
    StructuredJSONFormatter,
    configure_logging,
    get_logger,
)


def _record(
    level: int = logging.INFO, msg: str = "Test message", exc_info=None
) -> logging.LogRecord:
    record = logging.LogRecord(
        name="test.logger",
        level=level,
        pathname="/path/to/file.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )
    record.funcName = "test_function"
    record.module = "test_module"
    return record


class TestStructuredJSONFormatter:
    """Test suite for StructuredJSONFormatter."""

    def test_basic_log_format(self):
        """Test basic log record formatting to JSON."""
        data = json.loads(StructuredJSONFormatter().format(_record()))

        assert data["level"] == "INFO"
        assert data["message"] == "Test message"
        assert "timestamp" in data
        assert data["context"]["logger_name"] == "test.logger"
        assert data["context"]["module"] == "test_module"
        assert data["context"]["function"] == "test_function"
        assert data["context"]["line"] == 42

    def test_log_with_extra_fields(self):
        """Test that extra fields are included in context."""
        record = _record(level=logging.DEBUG)
        record.pattern = "midpoints"
        record.n = 4

        data = json.loads(StructuredJSONFormatter().format(record))

        assert data["context"]["pattern"] == "midpoints"
        assert data["context"]["n"] == 4
        assert "msg" not in data["context"]

    def test_log_with_exception(self):
        """Test that exception info is captured in context."""
        try:
            raise ValueError("Test error")
        except ValueError:
            exc_info = sys.exc_info()

        data = json.loads(
            StructuredJSONFormatter().format(_record(logging.ERROR, "Error occurred", exc_info))
        )

        assert data["level"] == "ERROR"
        assert data["context"]["error_type"] == "ValueError"
        assert data["context"]["error_message"] == "Test error"
        assert "ValueError: Test error" in data["context"]["stack_trace"]

    def test_non_serializable_extra_is_stringified(self):
        """Extras json cannot encode fall back to str()."""
        record = _record()
        record.sampler = Sampler("steps")

        data = json.loads(StructuredJSONFormatter().format(record))

        assert data["context"]["sampler"].startswith("Sampler(pattern='steps'")


class TestConfigureLogging:
    """Test suite for configure_logging function."""

    def test_configure_standard_logging(self, capsys, restore_root_logging):
        """Test standard text logging configuration."""
        configure_logging(level="INFO", structured=False)

        logging.getLogger("test.standard").info("Test message")

        captured = capsys.readouterr()
        assert "Test message" in captured.out
        assert "test.standard" in captured.out
        assert "INFO" in captured.out

    def test_level_filters(self, capsys, restore_root_logging):
        """Records below the configured level are dropped."""
        configure_logging(level="warning")

        logging.getLogger("test.filter").info("hidden")
        logging.getLogger("test.filter").warning("shown")

        out = capsys.readouterr().out
        assert "hidden" not in out
        assert "shown" in out

    def test_structured_logging_of_sampler(self, tmp_path: Path, restore_root_logging):
        """Sampler debug records render as JSON lines in a log file."""
        log_file = tmp_path / "unitsteps.jsonl"
        configure_logging(level="DEBUG", structured=True, filename=str(log_file))

        Sampler("trailing")(4, lambda t: t)
        for handler in logging.getLogger().handlers:
            handler.flush()

        lines = [json.loads(line) for line in log_file.read_text().splitlines() if line]
        messages = [line["message"] for line in lines]
        assert "Sampling trailing (n=4, container=sequence, count=4)" in messages
        assert all(line["level"] == "DEBUG" for line in lines)


class TestGetLogger:
    """Test suite for get_logger."""

    def test_plain_logger(self):
        """Without context a plain Logger is returned."""
        logger = get_logger("unitsteps.test")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "unitsteps.test"

    def test_adapter_with_context(self, caplog):
        """Context kwargs are attached to every record."""
        logger = get_logger("unitsteps.test", pattern="midpoints")
        assert isinstance(logger, logging.LoggerAdapter)

        with caplog.at_level(logging.INFO, logger="unitsteps.test"):
            logger.info("sampled")

        assert caplog.records[-1].pattern == "midpoints"
