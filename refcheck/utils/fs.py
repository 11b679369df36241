#!/usr/bin/env python3
"""
fs.py
-------------------
Filesystem utilities for locating and reading markdown documents.

Functions:
    find_markdown_files: List the markdown documents directly inside a directory
    read_document: Read a document as UTF-8 text
    resolve_path: Make a command line path absolute against the working directory

Usage:
    from refcheck.utils.fs import find_markdown_files, read_document

    for path in find_markdown_files(Path("docs")):
        content = read_document(path)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import List, Optional

# --- Local imports ---
from refcheck.core.exceptions import DocumentReadError


MARKDOWN_SUFFIX = ".md"


def find_markdown_files(directory: Path) -> List[Path]:
    """
    Find markdown documents in a directory.

    Only direct entries are considered (no recursion) and only names ending
    in the literal ``.md``. Results are sorted by name.

    Args:
        directory: Directory to list

    Returns:
        Sorted list of paths; empty if the directory does not exist

    Raises:
        OSError: If the directory exists but cannot be listed
    """
    if not directory.is_dir():
        return []
    return sorted(
        (entry for entry in directory.iterdir() if entry.name.endswith(MARKDOWN_SUFFIX)),
        key=lambda entry: entry.name,
    )


def read_document(path: Path) -> str:
    """
    Read a markdown document.

    Args:
        path: Document path

    Returns:
        Full document text

    Raises:
        DocumentReadError: If the file cannot be opened or is not valid UTF-8
    """
    try:
        return Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise DocumentReadError(path, f"not valid UTF-8 ({e.reason})") from e
    except OSError as e:
        raise DocumentReadError(path, e.strerror or str(e)) from e


def resolve_path(value: str, cwd: Optional[Path] = None) -> Path:
    """Return ``value`` as an absolute path, relative ones joined to ``cwd``."""
    path = Path(value)
    if path.is_absolute():
        return path
    return (cwd or Path.cwd()) / path
