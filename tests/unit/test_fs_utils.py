"""
test_fs_utils.py
----------------
Unit tests for refcheck.utils.fs module.

Tests markdown discovery, document reading and path resolution.
"""
import pytest
from pathlib import Path

from refcheck.core.exceptions import DocumentReadError
from refcheck.utils.fs import find_markdown_files, read_document, resolve_path


class TestFindMarkdownFiles:
    """Test find_markdown_files function."""

    def test_find_markdown_files_in_directory(self, tmp_dir):
        (tmp_dir / "file1.md").write_text("content")
        (tmp_dir / "file2.md").write_text("content")
        (tmp_dir / "file.txt").write_text("content")

        files = find_markdown_files(tmp_dir)
        assert [f.name for f in files] == ["file1.md", "file2.md"]

    def test_sorted_by_name(self, tmp_dir):
        for name in ["c.md", "a.md", "b.md"]:
            (tmp_dir / name).write_text("content")

        assert [f.name for f in find_markdown_files(tmp_dir)] == ["a.md", "b.md", "c.md"]

    def test_not_recursive(self, tmp_dir):
        subdir = tmp_dir / "2024"
        subdir.mkdir()
        (tmp_dir / "root.md").write_text("content")
        (subdir / "nested.md").write_text("content")

        assert [f.name for f in find_markdown_files(tmp_dir)] == ["root.md"]

    def test_literal_suffix(self, tmp_dir):
        """Only names ending in '.md' count."""
        (tmp_dir / "upper.MD").write_text("content")
        (tmp_dir / "notes.markdown").write_text("content")
        (tmp_dir / "notes.md.bak").write_text("content")

        assert find_markdown_files(tmp_dir) == []

    def test_nonexistent_directory(self, tmp_dir):
        assert find_markdown_files(tmp_dir / "nonexistent") == []

    def test_empty_directory(self, tmp_dir):
        assert find_markdown_files(tmp_dir) == []


class TestReadDocument:
    """Test read_document function."""

    def test_reads_utf8(self, tmp_dir):
        path = tmp_dir / "note.md"
        path.write_text("Café[^1]\n", encoding="utf-8")
        assert read_document(path) == "Café[^1]\n"

    def test_missing_file(self, tmp_dir):
        with pytest.raises(DocumentReadError) as exc_info:
            read_document(tmp_dir / "missing.md")
        assert exc_info.value.path == tmp_dir / "missing.md"

    def test_directory(self, tmp_dir):
        folder = tmp_dir / "folder.md"
        folder.mkdir()
        with pytest.raises(DocumentReadError):
            read_document(folder)

    def test_invalid_utf8(self, tmp_dir):
        path = tmp_dir / "latin1.md"
        path.write_bytes("caf\xe9".encode("latin-1"))
        with pytest.raises(DocumentReadError) as exc_info:
            read_document(path)
        assert "not valid UTF-8" in exc_info.value.reason


class TestResolvePath:
    """Test resolve_path function."""

    def test_absolute_unchanged(self, tmp_dir):
        assert resolve_path(str(tmp_dir)) == tmp_dir

    def test_relative_joined_to_cwd(self, tmp_dir):
        assert resolve_path("docs/a.md", cwd=tmp_dir) == tmp_dir / "docs" / "a.md"

    def test_relative_defaults_to_current_directory(self, tmp_dir, monkeypatch):
        monkeypatch.chdir(tmp_dir)
        assert resolve_path("a.md") == Path.cwd() / "a.md"
