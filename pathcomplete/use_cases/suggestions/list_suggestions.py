"""
Use case for building directory-path suggestions from partial input.
"""

import logging
from typing import Optional

from pathcomplete.adapters.listing.callable_directory_lister import (
    as_directory_lister,
)
from pathcomplete.entities.directory_entry import DirectoryEntry
from pathcomplete.entities.path_query import SEPARATOR, PathQuery
from pathcomplete.exceptions import DirectoryListingError
from pathcomplete.ports.listing.directory_lister_port import (
    DirectoryListerFunc,
    DirectoryListerPort,
)
from pathcomplete.utils.home import (
    contract_home_shorthand,
    expand_home_shorthand,
    uses_home_shorthand,
)


class ListSuggestionsUseCase:
    """Use case for listing directory completions of partially typed input."""

    def __init__(
        self,
        lister: DirectoryListerPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            lister: Port used to read directory entries
            logger: Logger instance to use for logging
        """
        self._lister = lister
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, text: str, home_directory: str, max_results: int) -> list[str]:
        """
        Suggest directories completing ``text``.

        Args:
            text: Raw input typed so far, possibly starting with "~/"
            home_directory: Absolute path substituted for "~/"
            max_results: Upper bound on the number of suggestions

        Returns:
            Sorted suggestions, each ending in "/"; empty when nothing matches
            or the directory cannot be listed
        """
        if not text or max_results <= 0:
            return []

        shorthand = uses_home_shorthand(text)
        query = PathQuery.from_expanded(expand_home_shorthand(text, home_directory))

        entries = self._read_entries(query.directory)
        if entries is None:
            return []

        base = query.directory_with_separator()
        suggestions: list[str] = []
        for entry in entries:
            if not entry.is_dir() or not query.matches(entry.name):
                continue
            path = base + entry.name + SEPARATOR
            if shorthand:
                path = contract_home_shorthand(path, home_directory)
            suggestions.append(path)

        suggestions.sort()
        self._logger.debug(
            f"{len(suggestions)} suggestions for '{text}' in {query.directory}"
        )
        return suggestions[:max_results]

    def _read_entries(self, directory: str) -> Optional[list[DirectoryEntry]]:
        # Every lister failure collapses to "no suggestions".
        try:
            entries = self._lister.list_entries(directory)
            return [DirectoryEntry.from_entry(e) for e in entries]
        except DirectoryListingError as e:
            self._logger.debug(f"Cannot list {directory}: {e}")
        except Exception as e:
            self._logger.warning(f"Unexpected error listing {directory}: {e}")
        return None


def list_suggestions(
    text: str,
    home_directory: str,
    lister: DirectoryListerPort | DirectoryListerFunc,
    max_results: int,
) -> list[str]:
    """
    Suggest directories completing ``text``.

    ``lister`` may be a DirectoryListerPort or a plain function such as
    ``os.scandir``.
    """
    use_case = ListSuggestionsUseCase(as_directory_lister(lister))
    return use_case.execute(text, home_directory, max_results)
