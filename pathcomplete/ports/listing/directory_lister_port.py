"""
Directory lister port interface defining the contract for reading directory entries.
"""

from abc import ABC, abstractmethod
from typing import Callable, Iterable, Protocol


class DirectoryEntryLike(Protocol):
    """Anything exposing a name and an is-directory predicate (e.g. os.DirEntry)."""

    @property
    def name(self) -> str: ...

    def is_dir(self) -> bool: ...


DirectoryListerFunc = Callable[[str], Iterable[DirectoryEntryLike]]


class DirectoryListerPort(ABC):
    """Port interface for listing the immediate entries of a directory."""

    @abstractmethod
    def list_entries(self, directory: str) -> Iterable[DirectoryEntryLike]:
        """
        List the immediate entries of a directory.

        Args:
            directory: Path of the directory to list

        Returns:
            Entries of the directory, in any order

        Raises:
            DirectoryListingError: If the directory cannot be listed
        """
        pass
