"""
Pytest configuration and shared fixtures.
"""

import os
import tempfile
import pytest
from unittest.mock import MagicMock

from pathcomplete.container import DependencyContainer
from pathcomplete.entities.directory_entry import DirectoryEntry


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory tree for testing directory listing.

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        # Two subdirectories and a nested one
        os.makedirs(os.path.join(temp_dir, "docs"))
        os.makedirs(os.path.join(temp_dir, "downloads", "music"))

        # Plain files next to them
        with open(os.path.join(temp_dir, "readme.md"), "w") as f:
            f.write("# Test Markdown\n\nThis is a test.")

        with open(os.path.join(temp_dir, "dotfile"), "w") as f:
            f.write("x")

        yield temp_dir


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def fake_lister():
    """
    Build a listing function backed by a mapping of directory -> entries.

    Unknown directories raise FileNotFoundError, like os.scandir would.
    """

    def _make(entries: dict[str, list[DirectoryEntry]]):
        def _list(path: str) -> list[DirectoryEntry]:
            if path in entries:
                return entries[path]
            raise FileNotFoundError(f"No such directory: {path}")

        return _list

    return _make


@pytest.fixture
def dependency_container(mock_logger):
    """
    Create a dependency container with mocked dependencies for testing.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer()
    # Replace the logger with our mock
    container._logger = mock_logger
    return container
