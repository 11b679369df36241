"""
Utilities package for refcheck.

Import commonly-used utilities directly from this package:
    from refcheck.utils import find_markdown_files, read_document
"""

from .fs import (
    MARKDOWN_SUFFIX,
    find_markdown_files,
    read_document,
    resolve_path,
)

__all__ = [
    "MARKDOWN_SUFFIX",
    "find_markdown_files",
    "read_document",
    "resolve_path",
]
