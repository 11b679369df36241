#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for refcheck.

The reference checks themselves never raise: any text produces a (possibly
empty) report. These exceptions belong to the layer that reads documents and
interprets the command line.

Exception Hierarchy:
    Exception (built-in)
    └── RefcheckError - Base for all refcheck errors
        ├── DocumentReadError - A markdown document could not be read
        └── InvocationError - Invalid command line usage

Usage:
    from refcheck.core.exceptions import DocumentReadError

    try:
        content = read_document(path)
    except DocumentReadError as e:
        reporter.emit(f"Error reading {e.path.name}: {e.reason}", "error")
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Optional


class RefcheckError(Exception):
    """
    Base exception for refcheck.

    Catch this to handle any failure raised by the orchestration layer.
    """

    pass


class DocumentReadError(RefcheckError):
    """
    Raised when a markdown document cannot be read.

    Wraps the underlying OSError or UnicodeDecodeError so callers can
    report the failing path without inspecting the original exception.

    Attributes:
        path: Document that failed to load
        reason: Human-readable cause

    Examples:
        >>> raise DocumentReadError(Path("notes.md"), "Permission denied")
    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class InvocationError(RefcheckError):
    """
    Raised for invalid command line usage.

    Examples:
        >>> raise InvocationError("Please provide only one of --file or --directory.")
    """

    def __init__(self, message: str, argument: Optional[str] = None) -> None:
        self.argument = argument
        super().__init__(message)
