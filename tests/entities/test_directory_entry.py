"""
Tests for the DirectoryEntry entity.
"""

import os

import pytest

from file_manager.entities.directory_entry import (
    DIRECTORY,
    FILE,
    DirectoryEntry,
    sort_entries,
)
from file_manager.exceptions import FileRepositoryError


class TestDirectoryEntry:
    """Test cases for the DirectoryEntry entity."""

    def test_file_entry(self, temp_directory: str):
        """Test a regular file is classified as a file."""
        path = os.path.join(temp_directory, "test1.txt")
        entry = DirectoryEntry(path)

        assert entry.path == os.path.abspath(path)
        assert entry.name == "test1.txt"
        assert entry.kind == FILE
        assert not entry.is_dir

    def test_directory_entry(self, temp_directory: str):
        """Test a directory is classified as a directory."""
        entry = DirectoryEntry(os.path.join(temp_directory, "subdir"))

        assert entry.kind == DIRECTORY
        assert entry.is_dir

    def test_nonexistent_path(self):
        """Test a missing path cannot become an entry."""
        with pytest.raises(FileRepositoryError, match="Entry does not exist"):
            DirectoryEntry("/nonexistent/path/file.txt")

    def test_empty_path(self):
        """Test an empty path is rejected."""
        with pytest.raises(FileRepositoryError, match="Path must be a non-empty string"):
            DirectoryEntry("")

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_symlink_is_neither_file_nor_directory(self, temp_directory: str):
        """Test symlinks are rejected rather than followed."""
        link = os.path.join(temp_directory, "link")
        os.symlink(os.path.join(temp_directory, "test1.txt"), link)

        with pytest.raises(FileRepositoryError, match="neither a regular file nor a directory"):
            DirectoryEntry(link)

    def test_get_details(self, temp_directory: str):
        """Test the details shown by the listing."""
        entry = DirectoryEntry(os.path.join(temp_directory, "test2.py"))

        assert entry.get_details() == {"name": "test2.py", "type": FILE}

    def test_sort_entries_directories_first(self, tmp_path):
        """Test directories come first, then files, each sorted by name."""
        for name in ("b.txt", "a.txt"):
            (tmp_path / name).write_text("x")
        for name in ("zdir", "adir"):
            (tmp_path / name).mkdir()

        entries = [DirectoryEntry(str(p)) for p in tmp_path.iterdir()]

        assert [e.name for e in sort_entries(entries)] == ["adir", "zdir", "a.txt", "b.txt"]

    def test_string_representations(self, temp_directory: str):
        """Test __str__ and __repr__."""
        entry = DirectoryEntry(os.path.join(temp_directory, "test1.txt"))

        assert str(entry) == "DirectoryEntry(name='test1.txt', kind='file')"
        assert repr(entry) == f"DirectoryEntry(path='{entry.path}')"
