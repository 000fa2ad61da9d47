"""
Directory entry domain entity.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class DirectoryEntry:
    """
    One immediate child of a listed directory.

    Mirrors the part of ``os.DirEntry`` the suggestion pipeline relies on, so
    listers may return either type.
    """

    name: str
    directory: bool = False

    def is_dir(self) -> bool:
        """Return True if the entry is a directory."""
        return self.directory

    @classmethod
    def from_entry(cls, entry: Any) -> "DirectoryEntry":
        """
        Snapshot anything exposing ``name`` and ``is_dir()``, e.g. ``os.DirEntry``.

        Args:
            entry: Entry returned by a lister

        Returns:
            DirectoryEntry snapshot; entries whose type cannot be read
            (``is_dir()`` raising OSError) count as non-directories
        """
        if isinstance(entry, cls):
            return entry
        try:
            is_directory = bool(entry.is_dir())
        except OSError:
            is_directory = False
        return cls(name=entry.name, directory=is_directory)

    def __str__(self) -> str:
        return self.name + "/" if self.directory else self.name
