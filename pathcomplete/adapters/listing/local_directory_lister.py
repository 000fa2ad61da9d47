"""
Local file system adapter implementation for directory listing.
"""

import logging
import os

from typing_extensions import override

from pathcomplete.entities.directory_entry import DirectoryEntry
from pathcomplete.exceptions import DirectoryListingError
from pathcomplete.ports.listing.directory_lister_port import DirectoryListerPort


class LocalDirectoryLister(DirectoryListerPort):
    """Local file system implementation of the directory lister port."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    def _validate_directory(self, directory: str) -> None:
        """
        Validate that a directory exists and is indeed a directory.

        Args:
            directory: Path to the directory to validate

        Raises:
            DirectoryListingError: If directory does not exist or is not a directory
        """
        if not os.path.exists(directory):
            raise DirectoryListingError(f"Directory does not exist: {directory}")

        if not os.path.isdir(directory):
            raise DirectoryListingError(f"Path is not a directory: {directory}")

    @override
    def list_entries(self, directory: str) -> list[DirectoryEntry]:
        """
        List the immediate entries of a directory.

        Args:
            directory: Path of the directory to list

        Returns:
            List of DirectoryEntry entities

        Raises:
            DirectoryListingError: If listing fails
        """
        try:
            self._validate_directory(directory)

            with os.scandir(directory) as it:
                entries = [DirectoryEntry.from_entry(e) for e in it]
            self._logger.debug(f"Read {len(entries)} entries from {directory}")
            return entries

        except DirectoryListingError:
            raise
        except Exception as e:
            raise DirectoryListingError(
                f"Failed to list entries in {directory}: {str(e)}"
            )
