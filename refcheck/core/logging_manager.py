#!/usr/bin/env python3
"""
logging_manager.py
--------------------
File logging for refcheck runs.

Console output is handled by the reporter in console.py; this module keeps a
persistent record of each run (documents checked, missing definitions, errors)
in rotating log files when a log directory is configured.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
import logging
import sys
import traceback
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

# --- Third party imports ---
import click


class RefcheckLogger:
    """
    Rotating file logger for refcheck operations.

    Writes everything to ``<component>.log`` and errors only to
    ``errors.log``. Warnings and above are also echoed to stderr.

    Attributes:
        log_dir: Directory for log files
        component_name: Name used for the log file and logger hierarchy
        main_logger: Logger for all operations
        error_logger: Logger for errors only
    """

    def __init__(
        self,
        log_dir: Path,
        component_name: str = "refcheck",
        max_bytes: int = 5 * 1024 * 1024,
        backup_count: int = 3,
    ) -> None:
        """
        Initialize the logger and create its handlers.

        Args:
            log_dir: Directory for log files (created if missing)
            component_name: Component identifier (e.g. 'refcheck')
            max_bytes: Maximum log file size before rotation (default: 5MB)
            backup_count: Number of rotated files to keep (default: 3)
        """
        self.log_dir = Path(log_dir)
        self.component_name = component_name
        self.max_bytes = max_bytes
        self.backup_count = backup_count
        self._setup_loggers()

    def _setup_loggers(self) -> None:
        self.log_dir.mkdir(parents=True, exist_ok=True)

        self.main_logger = logging.getLogger(f"{self.component_name}.operations")
        self.main_logger.setLevel(logging.DEBUG)
        self.main_logger.propagate = False
        self._reset_handlers(self.main_logger)

        self.error_logger = logging.getLogger(f"{self.component_name}.errors")
        self.error_logger.setLevel(logging.ERROR)
        self.error_logger.propagate = False
        self._reset_handlers(self.error_logger)

        self._create_file_handler(
            self.main_logger,
            self.log_dir / f"{self.component_name}.log",
            logging.DEBUG,
        )
        self._create_file_handler(
            self.error_logger,
            self.log_dir / "errors.log",
            logging.ERROR,
        )

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%H:%M:%S",
            )
        )
        self.main_logger.addHandler(console_handler)

    @staticmethod
    def _reset_handlers(logger: logging.Logger) -> None:
        """Close and drop handlers left over from a previous instance."""
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

    def _create_file_handler(
        self, logger: logging.Logger, file_path: Path, level: int
    ) -> None:
        handler = RotatingFileHandler(
            file_path,
            maxBytes=self.max_bytes,
            backupCount=self.backup_count,
            encoding="utf-8",
        )
        handler.setLevel(level)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s:%(lineno)d] - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)

    def log_operation(
        self, operation: str, details: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Record a completed operation with its details as JSON.

        Args:
            operation: Operation name (e.g. 'check_file')
            details: Optional details dictionary
        """
        details = details or {}
        self.main_logger.info(
            f"OPERATION - {operation}: {json.dumps(details, default=str)}"
        )

    def log_error(
        self, error: Exception, context: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Record an error with its context and traceback in errors.log.

        Args:
            error: Exception that occurred
            context: Optional context (path, operation, ...)
        """
        self.error_logger.error(f"ERROR - {type(error).__name__}: {error}")

        if context:
            context_str = ", ".join(f"{k}={v}" for k, v in context.items())
            self.error_logger.error(f"Context: {context_str}")

        self.error_logger.error(f"Traceback:\n{traceback.format_exc()}")

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        """Record a debug message."""
        self.main_logger.debug(self._format("DEBUG", message, details))

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        """Record an informational message."""
        self.main_logger.info(self._format("INFO", message, details))

    def log_warning(
        self, message: str, details: Optional[Dict[str, Any]] = None
    ) -> None:
        """Record a warning (also shown on stderr)."""
        self.main_logger.warning(self._format("WARNING", message, details))

    @staticmethod
    def _format(level: str, message: str, details: Optional[Dict[str, Any]]) -> str:
        if details:
            return f"{level} - {message}: {json.dumps(details, default=str)}"
        return f"{level} - {message}"

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        """
        Log an error in full and return the short message for the terminal.

        Args:
            error: Exception to log
            context: Optional context about where the error occurred
            show_traceback: Append the traceback to the returned message

        Returns:
            ``Error: <message>``, followed by the traceback if requested

        Examples:
            >>> logger.log_cli_error(DocumentReadError(Path("a.md"), "Is a directory"))
            'Error: a.md: Is a directory'
        """
        self.log_error(error, context or {"source": "cli"})
        return format_cli_error(error, show_traceback)


def format_cli_error(error: Exception, show_traceback: bool = False) -> str:
    """Build the terminal message for an error."""
    message = f"Error: {error}"
    if show_traceback:
        message += f"\n\n{traceback.format_exc()}"
    return message


def handle_cli_error(
    ctx: "click.Context",
    error: Exception,
    operation: str,
    additional_context: Optional[Dict[str, Any]] = None,
    exit_code: int = 1,
) -> None:
    """
    Standard error exit for refcheck commands.

    Logs the error (if file logging is enabled), prints a red message on
    stderr and exits. With --verbose the traceback is printed too.

    Args:
        ctx: Click context holding 'logger' and 'verbose'
        error: Exception that occurred
        operation: Name of the failed operation (e.g. 'check')
        additional_context: Optional extra context (path, ...)
        exit_code: Process exit status (default: 1)

    Note:
        This function never returns.
    """
    obj = ctx.obj or {}
    logger: Optional[RefcheckLogger] = obj.get("logger")
    verbose: bool = obj.get("verbose", False)

    context = {"operation": operation}
    if additional_context:
        context.update(additional_context)

    error_msg = safe_logger(logger).log_cli_error(
        error, context, show_traceback=verbose
    )
    click.secho(error_msg, fg="red", err=True, color=obj.get("color"))
    sys.exit(exit_code)


class NullLogger:
    """
    No-op stand-in for RefcheckLogger.

    Used when no log directory is configured so callers never need
    ``if logger:`` checks.
    """

    def log_operation(self, operation: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_warning(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        """Return the terminal message without logging anything."""
        return format_cli_error(error, show_traceback)


_null_logger = NullLogger()


def safe_logger(logger: Optional[RefcheckLogger]) -> RefcheckLogger:
    """
    Return ``logger``, or the shared NullLogger when it is None.

    Usage:
        safe_logger(logger).log_info("message")
    """
    return logger if logger is not None else _null_logger  # type: ignore[return-value]
