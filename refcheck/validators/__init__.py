#!/usr/bin/env python3
"""
validators
----------
Footnote reference validation for markdown documents.

Architecture:
    - references.py: pure checks on document text (no I/O)
    - documents.py: reads files and directories, reports results
    - cli.py: the ``refcheck`` command

Usage:
    # Through CLI
    refcheck --file notes.md
    refcheck --directory docs --verbose

    # Direct import for programmatic use
    from refcheck.validators import check
    missing = check(text)
"""

from .references import (
    MissingDefinition,
    check,
    extract_definitions,
    extract_references,
    find_missing_definitions,
    format_missing_definition,
)

__all__ = [
    "MissingDefinition",
    "check",
    "extract_definitions",
    "extract_references",
    "find_missing_definitions",
    "format_missing_definition",
]
