"""
conftest.py
-----------
Shared pytest fixtures for refcheck tests.

Provides fixtures for:
- Temporary directories
- Sample markdown documents with and without missing definitions
"""
import pytest
from pathlib import Path
from tempfile import TemporaryDirectory


# ----- Path Fixtures -----

@pytest.fixture
def tmp_dir():
    """Create a temporary directory for test file operations."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


# ----- Sample Markdown Content Fixtures -----

@pytest.fixture
def complete_content():
    """Document where every reference is defined."""
    return """# Notes

The first claim[^1] and the second[^2].
The first claim again[^1].

[^1]: First source.
[^2]: Second source.
"""


@pytest.fixture
def incomplete_content():
    """Document with two undefined references, one used twice."""
    return """# Draft

Intro[^1] and later[^10].
Another point[^2].
Back to ten[^10].

[^1]: Only the first note is written.
"""


@pytest.fixture
def complete_file(tmp_dir, complete_content):
    """Create a markdown file with all definitions present."""
    file_path = tmp_dir / "complete.md"
    file_path.write_text(complete_content, encoding="utf-8")
    return file_path


@pytest.fixture
def incomplete_file(tmp_dir, incomplete_content):
    """Create a markdown file with missing definitions."""
    file_path = tmp_dir / "incomplete.md"
    file_path.write_text(incomplete_content, encoding="utf-8")
    return file_path
