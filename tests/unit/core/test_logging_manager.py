"""
Tests for logging_manager module.

Tests RefcheckLogger file output, the NullLogger/safe_logger null object and
handle_cli_error.
"""
import pytest
import click
from pathlib import Path
from unittest.mock import MagicMock

from refcheck.core.exceptions import DocumentReadError
from refcheck.core.logging_manager import (
    NullLogger,
    RefcheckLogger,
    format_cli_error,
    handle_cli_error,
    safe_logger,
)


class TestNullLogger:
    """Tests for NullLogger class."""

    def test_log_methods_are_no_ops(self):
        logger = NullLogger()
        logger.log_operation("op", {"key": "value"})
        logger.log_error(ValueError("boom"), {"context": "test"})
        logger.log_debug("debug", {"key": "value"})
        logger.log_info("info")
        logger.log_warning("warning")

    def test_log_cli_error_returns_formatted(self):
        result = NullLogger().log_cli_error(ValueError("test error"))
        assert result == "Error: test error"


class TestSafeLogger:
    """Tests for safe_logger function."""

    def test_returns_logger_when_provided(self):
        mock_logger = MagicMock(spec=RefcheckLogger)
        assert safe_logger(mock_logger) is mock_logger

    def test_returns_null_logger_when_none(self):
        assert isinstance(safe_logger(None), NullLogger)

    def test_null_logger_is_singleton(self):
        assert safe_logger(None) is safe_logger(None)

    def test_forwards_calls(self):
        mock_logger = MagicMock(spec=RefcheckLogger)
        safe_logger(mock_logger).log_info("message")
        mock_logger.log_info.assert_called_once_with("message")


class TestRefcheckLogger:
    """Tests for RefcheckLogger file output."""

    def test_creates_log_files(self, tmp_path):
        log_dir = tmp_path / "logs"
        logger = RefcheckLogger(log_dir, "unit")
        logger.log_operation("check_file", {"path": "a.md", "missing": ["2"]})

        log_file = log_dir / "unit.log"
        assert log_file.exists()
        assert (log_dir / "errors.log").exists()
        text = log_file.read_text(encoding="utf-8")
        assert 'OPERATION - check_file: {"path": "a.md", "missing": ["2"]}' in text

    def test_debug_and_info_messages(self, tmp_path):
        logger = RefcheckLogger(tmp_path, "unit_levels")
        logger.log_debug("scanning", {"lines": 3})
        logger.log_info("done")

        text = (tmp_path / "unit_levels.log").read_text(encoding="utf-8")
        assert 'DEBUG - scanning: {"lines": 3}' in text
        assert "INFO - done" in text

    def test_errors_go_to_error_log(self, tmp_path):
        logger = RefcheckLogger(tmp_path, "unit_errors")
        error = DocumentReadError(Path("notes.md"), "Permission denied")
        logger.log_error(error, {"path": "notes.md"})

        text = (tmp_path / "errors.log").read_text(encoding="utf-8")
        assert "ERROR - DocumentReadError: notes.md: Permission denied" in text
        assert "Context: path=notes.md" in text

    def test_reinitialising_does_not_duplicate_handlers(self, tmp_path):
        RefcheckLogger(tmp_path, "unit_reinit")
        logger = RefcheckLogger(tmp_path, "unit_reinit")
        assert len(logger.main_logger.handlers) == 2
        assert len(logger.error_logger.handlers) == 1

    def test_log_cli_error_message(self, tmp_path):
        logger = RefcheckLogger(tmp_path, "unit_cli")
        message = logger.log_cli_error(ValueError("bad input"))
        assert message == "Error: bad input"


class TestFormatCliError:
    """Tests for format_cli_error."""

    def test_plain(self):
        assert format_cli_error(RuntimeError("x")) == "Error: x"

    def test_with_traceback(self):
        try:
            raise RuntimeError("x")
        except RuntimeError as e:
            message = format_cli_error(e, show_traceback=True)
        assert message.startswith("Error: x\n\n")
        assert "Traceback" in message


class TestHandleCliError:
    """Tests for handle_cli_error."""

    def test_exits_with_code_and_message(self, capsys):
        ctx = click.Context(click.Command("dummy"), obj={"logger": None, "verbose": False})
        with pytest.raises(SystemExit) as exc_info:
            handle_cli_error(ctx, ValueError("boom"), "check")

        assert exc_info.value.code == 1
        assert "Error: boom" in capsys.readouterr().err

    def test_logs_with_context(self):
        logger = MagicMock(spec=RefcheckLogger)
        logger.log_cli_error.return_value = "Error: boom"
        ctx = click.Context(click.Command("dummy"), obj={"logger": logger, "verbose": True})
        error = ValueError("boom")

        with pytest.raises(SystemExit):
            handle_cli_error(ctx, error, "check", {"path": "a.md"}, exit_code=3)

        logger.log_cli_error.assert_called_once_with(
            error, {"operation": "check", "path": "a.md"}, show_traceback=True
        )
