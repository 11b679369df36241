#!/usr/bin/env python3
"""
documents.py
------------
Runs the footnote reference check over markdown files and directories.

Reads each document, applies ``references.check`` and reports the outcome
through a ConsoleReporter. Directories are processed one file at a time, in
name order, and processing stops at the first document that fails or cannot
be read.

Usage:
    from refcheck.core.console import ConsoleReporter
    from refcheck.validators.documents import ReferenceChecker

    checker = ReferenceChecker(ConsoleReporter())
    ok = checker.check_path(Path("docs"))
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import List, Optional

# --- Local imports ---
from refcheck.core.cli import CheckStats
from refcheck.core.console import ConsoleReporter
from refcheck.core.exceptions import DocumentReadError
from refcheck.core.logging_manager import RefcheckLogger, safe_logger
from refcheck.utils.fs import find_markdown_files, read_document
from refcheck.validators.references import (
    MissingDefinition,
    check,
    format_missing_definition,
)


class ReferenceChecker:
    """
    Checks markdown documents for references without definitions.

    Attributes:
        reporter: Console output sink
        logger: Optional file logger
        verbose: Whether diagnostic output from the checks is printed
        stats: Counters for the current run
    """

    def __init__(
        self,
        reporter: ConsoleReporter,
        logger: Optional[RefcheckLogger] = None,
        verbose: bool = False,
    ) -> None:
        self.reporter = reporter
        self.logger = logger
        self.verbose = verbose
        self.stats = CheckStats()

    def check_document(self, path: Path) -> List[MissingDefinition]:
        """
        Read a document and return its missing definitions.

        Raises:
            DocumentReadError: If the document cannot be read
        """
        content = read_document(path)
        diagnostics = self.reporter.verbose_sink() if self.verbose else None
        missing = check(content, diagnostics)

        self.stats.files_processed += 1
        if missing:
            self.stats.files_failed += 1
            self.stats.missing_definitions += len(missing)

        safe_logger(self.logger).log_operation("check_file", {
            "path": str(path),
            "missing": [m.ref_id for m in missing],
        })
        return missing

    def check_file(self, path: Path) -> bool:
        """
        Check one file and report the result.

        Returns:
            True if every reference has a definition

        Raises:
            DocumentReadError: If the file cannot be read
        """
        self.reporter.emit(f"Checking references in {path.name} ...")
        missing = self.check_document(path)

        if not missing:
            self.reporter.emit("✓ All references have definitions", "success")
            return True

        self.reporter.emit("✗ Missing reference definitions:", "error")
        for entry in missing:
            self.reporter.emit(f"  {format_missing_definition(entry)}", "notice")
        return False

    def check_directory(self, directory: Path) -> bool:
        """
        Check every markdown file directly inside ``directory``.

        Stops at the first file that fails or cannot be read. A directory
        without markdown files passes.

        Returns:
            True if all checked files passed
        """
        self.reporter.emit(f"Checking all markdown files in directory: {directory} ...")
        files = find_markdown_files(directory)

        if not files:
            self.reporter.emit(f"No markdown files found in {directory}", "notice")
            safe_logger(self.logger).log_info(
                "No markdown files found", {"directory": str(directory)}
            )
            return True

        for path in files:
            try:
                if not self.check_file(path):
                    return False
            except DocumentReadError as e:
                self.stats.errors += 1
                safe_logger(self.logger).log_error(e, {"path": str(path)})
                self.reporter.emit(f"Error reading {path.name}: {e.reason}", "error")
                return False

        return True

    def check_path(self, path: Path) -> bool:
        """Check a directory or a single file."""
        if path.is_dir():
            return self.check_directory(path)
        return self.check_file(path)
