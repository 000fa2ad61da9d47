"""
Tests for the DirectoryEntry entity.
"""

import os
from unittest.mock import MagicMock

from pathcomplete.entities.directory_entry import DirectoryEntry


class TestDirectoryEntry:
    """Test cases for the DirectoryEntry entity."""

    def test_is_dir(self):
        assert DirectoryEntry("docs", directory=True).is_dir() is True
        assert DirectoryEntry("readme.md").is_dir() is False

    def test_from_entry_with_os_dir_entry(self, temp_directory: str):
        """Test building entries from os.scandir results."""
        with os.scandir(temp_directory) as it:
            entries = {e.name: DirectoryEntry.from_entry(e) for e in it}

        assert entries["docs"] == DirectoryEntry("docs", directory=True)
        assert entries["downloads"].is_dir() is True
        assert entries["readme.md"] == DirectoryEntry("readme.md", directory=False)

    def test_str_representation(self):
        assert str(DirectoryEntry("docs", directory=True)) == "docs/"
        assert str(DirectoryEntry("readme.md")) == "readme.md"

    def test_from_entry_unreadable_type_is_not_a_directory(self):
        """is_dir() raising OSError yields a non-directory snapshot."""
        entry = MagicMock()
        entry.name = "locked"
        entry.is_dir.side_effect = PermissionError("Permission denied: 'locked'")

        assert DirectoryEntry.from_entry(entry) == DirectoryEntry("locked")

    def test_from_entry_keeps_existing_snapshot(self):
        entry = DirectoryEntry("docs", directory=True)

        assert DirectoryEntry.from_entry(entry) is entry
