"""
Adapter turning a plain listing function into a directory lister port.
"""

from typing_extensions import override

from pathcomplete.entities.directory_entry import DirectoryEntry
from pathcomplete.exceptions import DirectoryListingError
from pathcomplete.ports.listing.directory_lister_port import (
    DirectoryListerFunc,
    DirectoryListerPort,
)


class CallableDirectoryLister(DirectoryListerPort):
    """Wraps a ``(directory) -> entries`` function, e.g. ``os.scandir``."""

    def __init__(self, func: DirectoryListerFunc):
        if not callable(func):
            raise TypeError("Directory lister must be callable")
        self._func = func

    @override
    def list_entries(self, directory: str) -> list[DirectoryEntry]:
        try:
            return [DirectoryEntry.from_entry(e) for e in self._func(directory)]
        except DirectoryListingError:
            raise
        except Exception as e:
            raise DirectoryListingError(
                f"Failed to list entries in {directory}: {str(e)}"
            )

    def __repr__(self) -> str:
        return f"CallableDirectoryLister(func={self._func!r})"


def as_directory_lister(
    lister: DirectoryListerPort | DirectoryListerFunc,
) -> DirectoryListerPort:
    """Return ``lister`` as a port, wrapping plain callables."""
    if isinstance(lister, DirectoryListerPort):
        return lister
    return CallableDirectoryLister(lister)


__all__ = ["CallableDirectoryLister", "as_directory_lister"]
