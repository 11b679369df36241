"""
refcheck
--------
Footnote reference checker for markdown documents.

Verifies that every in-text marker such as ``[^3]`` has a matching
definition line such as ``[^3]: Some note.`` in the same document.

Subpackages:
    - core: logging, exceptions, console output, CLI helpers
    - utils: filesystem helpers
    - validators: reference checks and the ``refcheck`` command
"""

__version__ = "0.1.0"
